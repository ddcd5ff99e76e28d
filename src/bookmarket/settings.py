"""Application settings read from the environment.

Protean's own configuration (databases, event processing) lives in
``domain.toml``; these are the few knobs the marketplace itself needs.
"""

import os

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_ADMIN_TOKEN = "change-me"


def admin_username() -> str:
    return os.environ.get("BOOKMARKET_ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME)


def admin_password() -> str:
    return os.environ.get("BOOKMARKET_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)


def admin_token() -> str:
    """Shared secret expected in the ``X-Admin-Token`` header on admin routes."""
    return os.environ.get("BOOKMARKET_ADMIN_TOKEN", DEFAULT_ADMIN_TOKEN)


def password_hash_method() -> str:
    """Werkzeug hashing method; tests lower the cost through the environment."""
    return os.environ.get("BOOKMARKET_PASSWORD_HASH_METHOD", "scrypt")
