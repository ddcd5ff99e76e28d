"""Owner-scoped listing management: add, edit and remove books.

Only the shop that listed a book may change it. Removing a book leaves its
orders untouched (they carry the book name) but drops it from carts and
wishlists so nobody tries to check it out later.
"""

from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book, BookCondition
from bookmarket.cart.cart import Cart
from bookmarket.domain import bookmarket, logger
from bookmarket.exceptions import Unauthorized
from bookmarket.shop.shop import Shop
from bookmarket.wishlist.wishlist import WishlistItem


@bookmarket.command(part_of="Book")
class AddBook:
    shop_id = Identifier(required=True)
    book_name = String(required=True, max_length=255)
    edition = String(max_length=100)
    subject = String(max_length=100)
    grade = String(max_length=20)
    price = Float(required=True)
    condition = String(choices=BookCondition, default=BookCondition.NEW.value)
    stock = Integer(default=1)
    cover_url = String(max_length=500)


@bookmarket.command(part_of="Book")
class UpdateBook:
    book_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    book_name = String(max_length=255)
    edition = String(max_length=100)
    subject = String(max_length=100)
    grade = String(max_length=20)
    price = Float()
    condition = String(choices=BookCondition)
    stock = Integer()
    cover_url = String(max_length=500)


@bookmarket.command(part_of="Book")
class RemoveBook:
    book_id = Identifier(required=True)
    shop_id = Identifier(required=True)


def _owned_book(book_id, shop_id) -> Book:
    book = current_domain.repository_for(Book).get(book_id)
    if not book.is_owned_by(shop_id):
        raise Unauthorized({"shop_id": ["This book belongs to another shop"]})
    return book


@bookmarket.command_handler(part_of=Book)
class ManageBooksHandler:
    @handle(AddBook)
    def add_book(self, command):
        # Raises ObjectNotFoundError for an unknown shop
        current_domain.repository_for(Shop).get(command.shop_id)

        book = Book.list_for_sale(
            shop_id=command.shop_id,
            book_name=command.book_name,
            price=command.price,
            edition=command.edition,
            subject=command.subject,
            grade=command.grade,
            condition=command.condition,
            stock=command.stock,
            cover_url=command.cover_url,
        )
        current_domain.repository_for(Book).add(book)
        return str(book.id)

    @handle(UpdateBook)
    def update_book(self, command):
        book = _owned_book(command.book_id, command.shop_id)
        book.revise(
            book_name=command.book_name,
            edition=command.edition,
            subject=command.subject,
            grade=command.grade,
            price=command.price,
            condition=command.condition,
            stock=command.stock,
            cover_url=command.cover_url,
        )
        current_domain.repository_for(Book).add(book)

    @handle(RemoveBook)
    def remove_book(self, command):
        book = _owned_book(command.book_id, command.shop_id)
        book_id = str(book.id)

        cart_repo = current_domain.repository_for(Cart)
        carts_touched = 0
        for cart in cart_repo.find_containing(book_id):
            cart.remove_book(book_id)
            cart_repo.add(cart)
            carts_touched += 1

        wishlist_repo = current_domain.repository_for(WishlistItem)
        for entry in wishlist_repo.find_for_book(book_id):
            wishlist_repo._dao.delete(entry)

        current_domain.repository_for(Book)._dao.delete(book)
        logger.info("Book removed", book_id=book_id, shop_id=str(command.shop_id), carts_touched=carts_touched)
