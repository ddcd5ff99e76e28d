"""Domain events for the Shop aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from bookmarket.domain import bookmarket


@bookmarket.event(part_of="Shop")
class ShopRegistered:
    """A shop signed up and is waiting for admin approval."""

    __version__ = 1

    shop_id = Identifier(required=True)
    shop_name = String(required=True)
    city = String()
    registered_at = DateTime(required=True)


@bookmarket.event(part_of="Shop")
class ShopApproved:
    """An admin approved the shop; its books become visible."""

    __version__ = 1

    shop_id = Identifier(required=True)
    admin_note = Text()
    approved_at = DateTime(required=True)


@bookmarket.event(part_of="Shop")
class ShopApprovalRevoked:
    """An admin withdrew approval; the shop's books drop out of the catalogue."""

    __version__ = 1

    shop_id = Identifier(required=True)
    admin_note = Text()
    revoked_at = DateTime(required=True)


@bookmarket.event(part_of="Shop")
class UpiHandleChanged:
    __version__ = 1

    shop_id = Identifier(required=True)
    upi_id = String()
