"""Repository for the Book aggregate.

Listings are read without Protean's default page size: every query here
returns all matching books.
"""

from bookmarket.book.book import Book
from bookmarket.domain import bookmarket


@bookmarket.repository(part_of=Book)
class BookRepository:
    def find_all(self) -> list[Book]:
        return self._dao.query.order_by("created_at").limit(None).all().items

    def find_by_shop(self, shop_id: str) -> list[Book]:
        return self._dao.query.filter(shop_id=str(shop_id)).order_by("created_at").limit(None).all().items

    def find_by_grade(self, grade: str) -> list[Book]:
        return self._dao.query.filter(grade=grade).limit(None).all().items

    def find_by_ids(self, book_ids) -> dict[str, Book]:
        """Books keyed by id; ids that no longer exist are simply absent."""
        wanted = {str(book_id) for book_id in book_ids}
        if not wanted:
            return {}
        books = self._dao.query.filter(id__in=list(wanted)).limit(None).all().items
        return {str(b.id): b for b in books}
