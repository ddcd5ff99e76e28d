"""Shop login."""

from protean.utils.globals import current_domain

from bookmarket.exceptions import Unauthorized
from bookmarket.shop.shop import Shop


def authenticate_shop(phone: str, password: str) -> Shop:
    """Return the shop for valid credentials; unapproved shops are refused."""
    shop = current_domain.repository_for(Shop).find_by_phone(phone)
    if shop is None or not shop.check_password(password):
        raise Unauthorized({"credentials": ["Invalid credentials"]})
    if not shop.verified:
        raise Unauthorized({"shop": ["Account not approved yet."]})
    return shop
