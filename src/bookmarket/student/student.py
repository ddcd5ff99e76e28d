"""Student aggregate (CQRS): a buyer account.

Students may also order without an account by giving a name and phone at
checkout; a registered student simply lets the order form prefill those.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from bookmarket.domain import bookmarket
from bookmarket.shared.passwords import hash_password, verify_password
from bookmarket.shared.phone import is_valid_phone


@bookmarket.aggregate
class Student:
    name = String(required=True, max_length=200)
    phone = String(required=True, max_length=20, unique=True)
    password_hash = String(max_length=255)
    address = Text()
    grade = String(max_length=20)
    created_at = DateTime()

    @invariant.post
    def phone_must_be_well_formed(self):
        if not is_valid_phone(self.phone):
            raise ValidationError({"phone": [f"Invalid phone number: {self.phone!r}"]})

    @classmethod
    def register(cls, name, phone, password, address=None, grade=None):
        return cls(
            name=name,
            phone=phone,
            password_hash=hash_password(password),
            address=address,
            grade=grade,
            created_at=datetime.now(UTC),
        )

    def check_password(self, password) -> bool:
        return verify_password(self.password_hash, password)

    def update_profile(self, name=None, address=None, grade=None):
        if name is not None:
            self.name = name
        if address is not None:
            self.address = address
        if grade is not None:
            self.grade = grade
