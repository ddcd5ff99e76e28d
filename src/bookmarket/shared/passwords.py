"""Password hashing for student and shop accounts."""

from werkzeug.security import check_password_hash, generate_password_hash

from bookmarket import settings


def hash_password(password: str) -> str:
    return generate_password_hash(password, method=settings.password_hash_method())


def verify_password(password_hash: str | None, password: str) -> bool:
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)
