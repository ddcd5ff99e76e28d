"""PlaceOrder: buy a single copy of a book.

The order row and the stock decrement are written in the same unit of work:
either both land or neither does. Guests may order by giving a name and
phone; registered students can pass their id and let the profile fill in.
"""

from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.domain import bookmarket, logger
from bookmarket.order.order import Order, PaymentMethod
from bookmarket.shop.shop import Shop
from bookmarket.student.student import Student


@bookmarket.command(part_of="Order")
class PlaceOrder:
    book_id = Identifier(required=True)
    student_id = Identifier()
    student_name = String(max_length=200)
    student_phone = String(max_length=20)
    student_address = Text()
    quantity = Integer(default=1, min_value=1)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.COD.value)


def resolve_buyer(student_id=None, student_name=None, student_phone=None, student_address=None):
    """Work out who is buying, preferring explicit values over the stored profile.

    Returns a dict with ``student_id``, ``student_name``, ``student_phone`` and
    ``student_address``.
    """
    if student_id:
        student = current_domain.repository_for(Student).get(student_id)
        student_name = student_name or student.name
        student_phone = student_phone or student.phone
        student_address = student_address or student.address
        student_id = str(student.id)

    errors = {}
    if not student_name:
        errors["student_name"] = ["Student name is required"]
    if not student_phone:
        errors["student_phone"] = ["Student phone is required"]
    if not student_address:
        errors["student_address"] = ["Delivery address is required"]
    if errors:
        raise ValidationError(errors)

    return {
        "student_id": student_id,
        "student_name": student_name,
        "student_phone": student_phone,
        "student_address": student_address,
    }


def shop_for(book: Book) -> Shop:
    shop = current_domain.repository_for(Shop).get(book.shop_id)
    if not shop.verified:
        raise ValidationError({"shop": ["This shop is not accepting orders yet"]})
    return shop


@bookmarket.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        buyer = resolve_buyer(
            student_id=command.student_id,
            student_name=command.student_name,
            student_phone=command.student_phone,
            student_address=command.student_address,
        )

        book_repo = current_domain.repository_for(Book)
        book = book_repo.get(command.book_id)
        shop = shop_for(book)

        order = Order.place(
            book=book,
            shop=shop,
            quantity=command.quantity,
            payment_method=command.payment_method,
            **buyer,
        )
        book.withdraw_one()

        book_repo.add(book)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_code=order.order_code,
            book_id=str(book.id),
            stock_left=book.stock,
        )
        return str(order.id)
