"""Catalogue reads: book search, book detail and public shop profiles.

Only books from verified shops are visible. Every row is decorated with the
book's and the shop's rating, recomputed from reviews on each call.

A shop's phone number is private. It is revealed to a student only while
that student has at least one non-cancelled order with the shop; the check
runs on every read, so cancelling the last order hides it again.
"""

from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from bookmarket.book.book import Book
from bookmarket.order.order import Order
from bookmarket.review.ratings import RatingSummary, rating_summaries, rating_summary
from bookmarket.review.review import TargetType
from bookmarket.shop.shop import Shop


class SortOrder(Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING = "rating"


@dataclass
class BookFilters:
    query: str | None = None
    shop_id: str | None = None
    grade: str | None = None
    subject: str | None = None
    city: str | None = None
    condition: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    sort: str | None = None

    def matches(self, book: Book, shop: Shop) -> bool:
        if self.query:
            needle = self.query.lower()
            haystacks = (book.book_name, book.subject, book.edition)
            if not any(needle in (value or "").lower() for value in haystacks):
                return False
        if self.shop_id and str(book.shop_id) != str(self.shop_id):
            return False
        if self.grade and book.grade != self.grade:
            return False
        if self.subject and book.subject != self.subject:
            return False
        if self.city and shop.city != self.city:
            return False
        if self.condition and book.condition != self.condition:
            return False
        if self.price_min is not None and book.price < self.price_min:
            return False
        if self.price_max is not None and book.price > self.price_max:
            return False
        return True


def _book_row(book: Book, shop: Shop, book_rating: RatingSummary, shop_rating: RatingSummary) -> dict:
    return {
        "id": str(book.id),
        "shop_id": str(book.shop_id),
        "book_name": book.book_name,
        "edition": book.edition,
        "subject": book.subject,
        "grade": book.grade,
        "price": book.price,
        "condition": book.condition,
        "stock": book.stock,
        "cover_url": book.cover_url,
        "created_at": book.created_at,
        "shop_name": shop.shop_name,
        "city": shop.city,
        "address": shop.address,
        "book_rating": book_rating.average,
        "book_reviews": book_rating.count,
        "shop_rating": shop_rating.average,
        "shop_reviews": shop_rating.count,
    }


def _sort_order(value: str | None) -> SortOrder | None:
    if not value:
        return None
    try:
        return SortOrder(value)
    except ValueError:
        choices = ", ".join(s.value for s in SortOrder)
        raise ValidationError({"sort": [f"Sort must be one of: {choices}"]}) from None


def search_books(filters: BookFilters | None = None) -> list[dict]:
    """Books from verified shops matching ``filters``.

    Out-of-stock books are included; clients show them as unavailable. Without
    a sort the catalogue comes back in listing order. ``rating`` sorts by the
    book's average, best first, newest listing first among equals.
    """
    filters = filters or BookFilters()
    shops = {str(shop.id): shop for shop in current_domain.repository_for(Shop).find_verified()}
    matches = []
    for book in current_domain.repository_for(Book).find_all():
        shop = shops.get(str(book.shop_id))
        if shop is not None and filters.matches(book, shop):
            matches.append((book, shop))

    book_ratings = rating_summaries(TargetType.BOOK.value, [book.id for book, _ in matches])
    shop_ratings = rating_summaries(TargetType.SHOP.value, {shop.id for _, shop in matches})
    unrated = RatingSummary(average=0.0, count=0)

    rows = []
    for book, shop in matches:
        rows.append(
            _book_row(
                book,
                shop,
                book_ratings.get(str(book.id), unrated),
                shop_ratings.get(str(shop.id), unrated),
            )
        )

    sort = _sort_order(filters.sort)
    if sort == SortOrder.PRICE_ASC:
        rows.sort(key=lambda row: row["price"])
    elif sort == SortOrder.PRICE_DESC:
        rows.sort(key=lambda row: row["price"], reverse=True)
    elif sort == SortOrder.RATING:
        rows.reverse()
        rows.sort(key=lambda row: row["book_rating"], reverse=True)
    return rows


def contact_visible(shop_id: str, student_id: str | None) -> bool:
    if not student_id:
        return False
    return current_domain.repository_for(Order).has_live_order(shop_id, student_id)


def get_book(book_id: str, student_id: str | None = None) -> dict:
    """A single listing with ratings, plus the shop phone when the student may see it."""
    book = current_domain.repository_for(Book).get(book_id)
    shop = current_domain.repository_for(Shop).get(book.shop_id)
    if not shop.verified:
        raise ObjectNotFoundError({"_entity": f"Book with id {book_id} is not available"})

    row = _book_row(
        book,
        shop,
        rating_summary(TargetType.BOOK.value, str(book.id)),
        rating_summary(TargetType.SHOP.value, str(shop.id)),
    )
    row["phone"] = shop.phone if contact_visible(str(shop.id), student_id) else None
    return row


def shop_profile(shop_id: str, student_id: str | None = None) -> dict:
    """Public shop profile; same phone rule as ``get_book``."""
    shop = current_domain.repository_for(Shop).get(shop_id)
    rating = rating_summary(TargetType.SHOP.value, str(shop.id))
    return {
        "id": str(shop.id),
        "shop_name": shop.shop_name,
        "owner_name": shop.owner_name,
        "address": shop.address,
        "city": shop.city,
        "logo_url": shop.logo_url,
        "banner_url": shop.banner_url,
        "upi_id": shop.upi_id,
        "verified": shop.verified,
        "phone": shop.phone if contact_visible(str(shop.id), student_id) else None,
        "avg_rating": rating.average,
        "review_count": rating.count,
    }
