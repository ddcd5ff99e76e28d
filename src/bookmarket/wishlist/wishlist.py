"""WishlistItem aggregate: a student bookmarking a book for later."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier

from bookmarket.domain import bookmarket


@bookmarket.aggregate
class WishlistItem:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)
    added_at = DateTime()

    @classmethod
    def bookmark(cls, student_id, book_id):
        return cls(student_id=student_id, book_id=book_id, added_at=datetime.now(UTC))
