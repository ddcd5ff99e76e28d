"""Cart line management: commands and handler.

A student's cart is opened on first use, so every command addresses the cart
by student id rather than by cart id.
"""

from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.cart.cart import Cart
from bookmarket.domain import bookmarket
from bookmarket.student.student import Student


@bookmarket.command(part_of="Cart")
class AddToCart:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@bookmarket.command(part_of="Cart")
class UpdateCartQuantity:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@bookmarket.command(part_of="Cart")
class RemoveFromCart:
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)


@bookmarket.command(part_of="Cart")
class ClearCart:
    student_id = Identifier(required=True)


def cart_for(student_id) -> Cart:
    """The student's cart, opened (unsaved) if they never had one."""
    cart = current_domain.repository_for(Cart).find_for_student(student_id)
    if cart is None:
        cart = Cart.open_for(str(student_id))
    return cart


@bookmarket.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        current_domain.repository_for(Student).get(command.student_id)
        current_domain.repository_for(Book).get(command.book_id)

        cart = cart_for(command.student_id)
        cart.set_line(command.book_id, command.quantity)
        current_domain.repository_for(Cart).add(cart)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        cart = cart_for(command.student_id)
        cart.update_quantity(command.book_id, command.quantity)
        current_domain.repository_for(Cart).add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = cart_for(command.student_id)
        cart.remove_book(command.book_id)
        current_domain.repository_for(Cart).add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        cart = cart_for(command.student_id)
        cart.clear()
        current_domain.repository_for(Cart).add(cart)
