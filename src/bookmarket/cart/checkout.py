"""Checkout: turn every cart line into its own order, then empty the cart.

Everything runs inside the command handler's unit of work. All lines are
validated (book still listed, a copy in stock, UPI handle present when paying
by UPI) before anything is written, so a failing line leaves no orders behind
and the cart untouched.

Each line becomes exactly one order that takes exactly one copy off the
shelf; the line's quantity only scales the amount charged.
"""

from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.cart.cart import Cart
from bookmarket.domain import bookmarket, logger
from bookmarket.exceptions import EmptyCart, OutOfStock
from bookmarket.order.order import Order, PaymentMethod
from bookmarket.order.placement import resolve_buyer, shop_for


@bookmarket.command(part_of="Cart")
class Checkout:
    student_id = Identifier(required=True)
    student_address = Text()
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.COD.value)


@bookmarket.command_handler(part_of=Cart)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        """Returns the created order ids, in cart order."""
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.find_for_student(command.student_id)
        if cart is None or cart.is_empty():
            raise EmptyCart({"cart": ["Cart is empty"]})

        buyer = resolve_buyer(student_id=command.student_id, student_address=command.student_address)

        book_repo = current_domain.repository_for(Book)
        books = book_repo.find_by_ids(line.book_id for line in cart.lines)

        # Validate every line before touching anything
        planned = []
        for line in cart.lines:
            book = books.get(str(line.book_id))
            if book is None:
                book = book_repo.get(line.book_id)  # raises ObjectNotFoundError
            if not book.in_stock():
                raise OutOfStock({"stock": [f"'{book.book_name}' is out of stock"]})
            shop = shop_for(book)
            if command.payment_method == PaymentMethod.UPI.value and not shop.accepts_upi():
                raise ValidationError({"payment_method": [f"{shop.shop_name} does not accept UPI payments"]})
            planned.append((line, book, shop))

        order_repo = current_domain.repository_for(Order)
        order_ids = []
        for line, book, shop in planned:
            order = Order.place(
                book=book,
                shop=shop,
                quantity=line.quantity,
                payment_method=command.payment_method,
                **buyer,
            )
            book.withdraw_one()
            book_repo.add(book)
            order_repo.add(order)
            order_ids.append(str(order.id))

        cart.mark_checked_out(order_ids)
        cart_repo.add(cart)

        logger.info("Cart checked out", student_id=str(command.student_id), orders=len(order_ids))
        return order_ids
