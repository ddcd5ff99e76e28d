"""A student's wishlist joined with the books it points at."""

from protean.utils.globals import current_domain

from bookmarket.book.book import Book
from bookmarket.wishlist.wishlist import WishlistItem


def wishlist_for(student_id: str) -> list[dict]:
    entries = current_domain.repository_for(WishlistItem).find_for_student(student_id)
    books = current_domain.repository_for(Book).find_by_ids(entry.book_id for entry in entries)

    rows = []
    for entry in entries:
        row = {"book_id": str(entry.book_id), "added_at": entry.added_at}
        book = books.get(str(entry.book_id))
        if book is not None:
            row.update(book_name=book.book_name, price=book.price, stock=book.stock, shop_id=str(book.shop_id))
        rows.append(row)
    return rows
