"""Shop aggregate (CQRS): a bookseller registered on the marketplace.

A shop registers itself, stays invisible until an admin approves it, and then
owns the books it lists. Its phone number is private: students only see it
once they have placed a live order with the shop.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from bookmarket.domain import bookmarket
from bookmarket.shared.passwords import hash_password, verify_password
from bookmarket.shared.phone import is_valid_phone
from bookmarket.shop.events import ShopApprovalRevoked, ShopApproved, ShopRegistered, UpiHandleChanged


@bookmarket.aggregate
class Shop:
    shop_name = String(required=True, max_length=200)
    owner_name = String(required=True, max_length=200)
    phone = String(required=True, max_length=20, unique=True)
    password_hash = String(max_length=255)
    address = Text()
    city = String(max_length=100)
    upi_id = String(max_length=100)
    logo_url = String(max_length=500)
    banner_url = String(max_length=500)
    verified = Boolean(default=False)
    admin_note = Text()
    created_at = DateTime()

    @invariant.post
    def phone_must_be_well_formed(self):
        if not is_valid_phone(self.phone):
            raise ValidationError({"phone": [f"Invalid phone number: {self.phone!r}"]})

    @classmethod
    def register(cls, shop_name, owner_name, phone, password, address=None, city=None, upi_id=None):
        now = datetime.now(UTC)
        shop = cls(
            shop_name=shop_name,
            owner_name=owner_name,
            phone=phone,
            password_hash=hash_password(password),
            address=address,
            city=city,
            upi_id=upi_id or None,
            verified=False,
            created_at=now,
        )
        shop.raise_(
            ShopRegistered(
                shop_id=str(shop.id),
                shop_name=shop_name,
                city=city,
                registered_at=now,
            )
        )
        return shop

    def check_password(self, password) -> bool:
        return verify_password(self.password_hash, password)

    def update_profile(self, **changes):
        """Apply profile edits; keys left as ``None`` are untouched."""
        for field in ("shop_name", "owner_name", "address", "city", "logo_url", "banner_url"):
            value = changes.get(field)
            if value is not None:
                setattr(self, field, value)

    def set_upi_handle(self, upi_id):
        self.upi_id = upi_id or None
        self.raise_(UpiHandleChanged(shop_id=str(self.id), upi_id=self.upi_id))

    def accepts_upi(self) -> bool:
        return bool(self.upi_id)

    def set_verification(self, verified, admin_note=None):
        """Approve or un-approve the shop. Only a change of state raises an event."""
        self.admin_note = admin_note
        if verified == self.verified:
            return

        self.verified = verified
        now = datetime.now(UTC)
        if verified:
            self.raise_(ShopApproved(shop_id=str(self.id), admin_note=admin_note, approved_at=now))
        else:
            self.raise_(ShopApprovalRevoked(shop_id=str(self.id), admin_note=admin_note, revoked_at=now))
