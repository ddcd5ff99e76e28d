"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer, Text

from bookmarket.domain import bookmarket


@bookmarket.event(part_of="Cart")
class CartLineSet:
    """A book was put in the cart, or its quantity was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity = Integer(required=True)


@bookmarket.event(part_of="Cart")
class CartLineRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    student_id = Identifier(required=True)
    book_id = Identifier(required=True)


@bookmarket.event(part_of="Cart")
class CartCheckedOut:
    """Every line of the cart became an order and the cart was emptied."""

    __version__ = 1

    cart_id = Identifier(required=True)
    student_id = Identifier(required=True)
    order_ids = Text(required=True)  # JSON array of order ids
