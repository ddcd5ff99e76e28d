"""Order aggregate (CQRS): one book bought by one student from one shop.

An order snapshots everything it needs at placement time (book name, unit
price, total, the student's contact details) so later edits to the book or
the student never rewrite history.

State Machine (5 states):
    PENDING → CONFIRMED → DELIVERED
    PENDING → REJECTED
    CONFIRMED → REJECTED
    PENDING → CANCELLED (student only)

DELIVERED, REJECTED and CANCELLED are terminal. Payment status moves
independently, except that delivery always settles it to PAID.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from bookmarket.domain import bookmarket
from bookmarket.exceptions import InvalidTransition
from bookmarket.order.events import (
    OrderCancelled,
    OrderConfirmed,
    OrderDelivered,
    OrderPaymentStatusChanged,
    OrderPlaced,
    OrderRejected,
)
from bookmarket.shared.upi import build_payment_link, render_qr_data_url


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DELIVERED = "delivered"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    COD = "cod"
    UPI = "upi"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.REJECTED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.DELIVERED, OrderStatus.REJECTED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.REJECTED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

# Statuses a shop may move an order into
SHOP_SETTABLE_STATUSES = {OrderStatus.CONFIRMED, OrderStatus.REJECTED, OrderStatus.DELIVERED}


def generate_order_code(order_id, placed_at: datetime) -> str:
    """``ORD-<epoch millis>-<first 8 chars of the id>``; unique because the id is."""
    millis = int(placed_at.timestamp() * 1000)
    suffix = str(order_id).replace("-", "")[:8].upper()
    return f"ORD-{millis}-{suffix}"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@bookmarket.aggregate
class Order:
    order_code = String(max_length=50, unique=True)

    # What was bought
    book_id = Identifier(required=True)
    book_name = String(required=True, max_length=255)
    shop_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)
    unit_price = Float(required=True)
    total_price = Float(required=True)

    # Who bought it (snapshot)
    student_id = Identifier()
    student_name = String(required=True, max_length=200)
    student_phone = String(required=True, max_length=20)
    student_address = Text(required=True)

    # Lifecycle
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.COD.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    upi_link = Text()
    qr_code = Text()
    transaction_id = String(max_length=100)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_match_quantity(self):
        if self.unit_price is not None and self.total_price is not None and self.quantity:
            if round(self.unit_price * self.quantity, 2) != round(self.total_price, 2):
                raise ValidationError({"total_price": ["Total must equal unit price times quantity"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        book,
        shop,
        student_name,
        student_phone,
        student_address,
        student_id=None,
        quantity=1,
        payment_method=PaymentMethod.COD.value,
    ):
        """Create a pending order for one book.

        ``book`` and ``shop`` are the live aggregates; price and names are
        copied off them. UPI orders get a payment link and QR code addressed
        to the shop's handle. Stock is the caller's concern.
        """
        method = PaymentMethod(payment_method)
        if method == PaymentMethod.UPI and not shop.accepts_upi():
            raise ValidationError({"payment_method": ["This shop does not accept UPI payments"]})

        now = datetime.now(UTC)
        total = round(book.price * quantity, 2)
        order = cls(
            book_id=str(book.id),
            book_name=book.book_name,
            shop_id=str(shop.id),
            quantity=quantity,
            unit_price=book.price,
            total_price=total,
            student_id=student_id,
            student_name=student_name,
            student_phone=student_phone,
            student_address=student_address,
            status=OrderStatus.PENDING.value,
            payment_method=method.value,
            payment_status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.order_code = generate_order_code(order.id, now)

        if method == PaymentMethod.UPI:
            order.upi_link = build_payment_link(shop.upi_id, shop.shop_name, total, order.order_code)
            order.qr_code = render_qr_data_url(order.upi_link)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_code=order.order_code,
                book_id=str(book.id),
                book_name=book.book_name,
                shop_id=str(shop.id),
                student_id=student_id,
                student_phone=student_phone,
                quantity=quantity,
                total_price=total,
                payment_method=method.value,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State machine helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS[current]:
            raise InvalidTransition(
                {"status": [f"Cannot transition from {current.value} to {target_status.value}"]}
            )

    def belongs_to_shop(self, shop_id) -> bool:
        return str(self.shop_id) == str(shop_id)

    def belongs_to_student(self, student_id) -> bool:
        return self.student_id is not None and str(self.student_id) == str(student_id)

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def confirm(self):
        self._assert_can_transition(OrderStatus.CONFIRMED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CONFIRMED.value
        self.updated_at = now

        self.raise_(
            OrderConfirmed(
                order_id=str(self.id),
                order_code=self.order_code,
                shop_id=str(self.shop_id),
                student_id=self.student_id,
                student_phone=self.student_phone,
                confirmed_at=now,
            )
        )

    def reject(self):
        """Turn the order down. The handler puts the copy back on the shelf."""
        self._assert_can_transition(OrderStatus.REJECTED)
        previous = self.status
        now = datetime.now(UTC)
        self.status = OrderStatus.REJECTED.value
        self.updated_at = now

        self.raise_(
            OrderRejected(
                order_id=str(self.id),
                order_code=self.order_code,
                book_id=str(self.book_id),
                shop_id=str(self.shop_id),
                student_id=self.student_id,
                student_phone=self.student_phone,
                previous_status=previous,
                rejected_at=now,
            )
        )

    def deliver(self):
        self._assert_can_transition(OrderStatus.DELIVERED)
        now = datetime.now(UTC)
        self.payment_status = PaymentStatus.PAID.value
        self.status = OrderStatus.DELIVERED.value
        self.updated_at = now

        self.raise_(
            OrderDelivered(
                order_id=str(self.id),
                order_code=self.order_code,
                shop_id=str(self.shop_id),
                student_id=self.student_id,
                student_phone=self.student_phone,
                total_price=self.total_price,
                delivered_at=now,
            )
        )

    def cancel(self):
        """Student withdraws a pending order. Stock is not restored."""
        self._assert_can_transition(OrderStatus.CANCELLED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                order_code=self.order_code,
                shop_id=str(self.shop_id),
                student_id=self.student_id,
                cancelled_at=now,
            )
        )

    def move_to(self, target_status):
        """Shop-initiated status change; cancellation is reserved for the student."""
        target = OrderStatus(target_status)
        if target not in SHOP_SETTABLE_STATUSES:
            raise InvalidTransition({"status": [f"A shop cannot move an order to {target.value}"]})

        {
            OrderStatus.CONFIRMED: self.confirm,
            OrderStatus.REJECTED: self.reject,
            OrderStatus.DELIVERED: self.deliver,
        }[target]()

    # -------------------------------------------------------------------
    # Payment
    # -------------------------------------------------------------------
    def set_payment_status(self, payment_status):
        """Set payment status directly, whatever the lifecycle state."""
        target = PaymentStatus(payment_status)
        self.payment_status = target.value
        self.updated_at = datetime.now(UTC)
        self.raise_(
            OrderPaymentStatusChanged(
                order_id=str(self.id),
                order_code=self.order_code,
                payment_status=target.value,
                transaction_id=self.transaction_id,
            )
        )

    def mark_paid(self):
        self.set_payment_status(PaymentStatus.PAID.value)

    def attach_transaction(self, transaction_id):
        """Record the student's UPI reference. Payment status is left to the shop."""
        self.transaction_id = transaction_id
        self.updated_at = datetime.now(UTC)
