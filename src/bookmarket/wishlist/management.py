"""Wishlist commands. Adding twice is harmless; removing a missing entry too."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.domain import bookmarket
from bookmarket.student.student import Student
from bookmarket.wishlist.wishlist import WishlistItem


@bookmarket.command(part_of="WishlistItem")
class AddToWishlist:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)


@bookmarket.command(part_of="WishlistItem")
class RemoveFromWishlist:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)


@bookmarket.command_handler(part_of=WishlistItem)
class WishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        current_domain.repository_for(Student).get(command.student_id)
        current_domain.repository_for(Book).get(command.book_id)

        repo = current_domain.repository_for(WishlistItem)
        existing = repo.find_entry(command.student_id, command.book_id)
        if existing is not None:
            return str(existing.id)

        entry = WishlistItem.bookmark(student_id=command.student_id, book_id=command.book_id)
        repo.add(entry)
        return str(entry.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        existing = repo.find_entry(command.student_id, command.book_id)
        if existing is not None:
            repo._dao.delete(existing)
