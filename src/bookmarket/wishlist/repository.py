"""Repository for wishlist entries."""

from bookmarket.domain import bookmarket
from bookmarket.wishlist.wishlist import WishlistItem


@bookmarket.repository(part_of=WishlistItem)
class WishlistRepository:
    def find_entry(self, student_id: str, book_id: str) -> WishlistItem | None:
        entries = self._dao.query.filter(student_id=str(student_id), book_id=str(book_id)).all().items
        return entries[0] if entries else None

    def find_for_student(self, student_id: str) -> list[WishlistItem]:
        return self._dao.query.filter(student_id=str(student_id)).order_by("-added_at").limit(None).all().items

    def find_for_book(self, book_id: str) -> list[WishlistItem]:
        return self._dao.query.filter(book_id=str(book_id)).limit(None).all().items
