"""Wipe every record in the marketplace. Admin only, and only on explicit confirmation."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookmarket.book.book import Book
from bookmarket.cart.cart import Cart
from bookmarket.domain import logger
from bookmarket.notification.notification import Notification
from bookmarket.order.order import Order
from bookmarket.review.review import Review
from bookmarket.shop.shop import Shop
from bookmarket.student.student import Student
from bookmarket.wishlist.wishlist import WishlistItem

CONFIRMATION_PHRASE = "DELETE EVERYTHING"

# Dependents first, owners last
_PURGE_ORDER = (Cart, WishlistItem, Review, Notification, Order, Book, Student, Shop)


def purge_all(confirmation: str | None) -> dict[str, int]:
    """Delete all records and return how many of each kind went."""
    if confirmation != CONFIRMATION_PHRASE:
        raise ValidationError({"confirm": [f"Type '{CONFIRMATION_PHRASE}' to clear the database"]})

    removed = {}
    for aggregate_cls in _PURGE_ORDER:
        dao = current_domain.repository_for(aggregate_cls)._dao
        count = 0
        while batch := dao.query.all().items:
            for record in batch:
                dao.delete(record)
                count += 1
        removed[aggregate_cls.__name__] = count

    logger.warning("Marketplace data cleared", **removed)
    return removed
