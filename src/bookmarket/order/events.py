"""Domain events for the Order aggregate.

Every event carries enough of the order (code, parties, student phone) for
the notification handler to address its message without reloading the order.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bookmarket.domain import bookmarket


@bookmarket.event(part_of="Order")
class OrderPlaced:
    """A student ordered a book; one copy has been taken off the shelf."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    book_id = Identifier(required=True)
    book_name = String(required=True)
    shop_id = Identifier(required=True)
    student_id = Identifier()
    student_phone = String()
    quantity = Integer(required=True)
    total_price = Float(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)


@bookmarket.event(part_of="Order")
class OrderConfirmed:
    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    shop_id = Identifier(required=True)
    student_id = Identifier()
    student_phone = String()
    confirmed_at = DateTime(required=True)


@bookmarket.event(part_of="Order")
class OrderRejected:
    """The shop turned the order down; its copy went back into stock."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    book_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    student_id = Identifier()
    student_phone = String()
    previous_status = String(required=True)
    rejected_at = DateTime(required=True)


@bookmarket.event(part_of="Order")
class OrderDelivered:
    """The student has the book; payment is settled as part of delivery."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    shop_id = Identifier(required=True)
    student_id = Identifier()
    student_phone = String()
    total_price = Float(required=True)
    delivered_at = DateTime(required=True)


@bookmarket.event(part_of="Order")
class OrderCancelled:
    """The student withdrew a pending order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    shop_id = Identifier(required=True)
    student_id = Identifier()
    cancelled_at = DateTime(required=True)


@bookmarket.event(part_of="Order")
class OrderPaymentStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    order_code = String(required=True)
    payment_status = String(required=True)
    transaction_id = String()
