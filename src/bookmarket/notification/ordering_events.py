"""Notifications react to Order events.

New and cancelled orders go to the shop; confirmations, rejections and
deliveries go to the student.
"""

import structlog
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket
from bookmarket.notification.helpers import notify, notify_student
from bookmarket.notification.notification import Notification, RecipientType
from bookmarket.order.events import OrderCancelled, OrderConfirmed, OrderDelivered, OrderPlaced, OrderRejected

logger = structlog.get_logger(__name__)


@bookmarket.event_handler(part_of=Notification, stream_category="bookmarket::order")
class OrderingEventsHandler:
    """Turns order lifecycle events into inbox messages."""

    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        notify(RecipientType.SHOP.value, event.shop_id, f"New order received: {event.order_code}")

    @handle(OrderCancelled)
    def on_order_cancelled(self, event: OrderCancelled) -> None:
        notify(RecipientType.SHOP.value, event.shop_id, f"Order {event.order_code} has been cancelled.")

    @handle(OrderConfirmed)
    def on_order_confirmed(self, event: OrderConfirmed) -> None:
        notify_student(event.student_id, event.student_phone, "Your order has been confirmed by the shop.")

    @handle(OrderRejected)
    def on_order_rejected(self, event: OrderRejected) -> None:
        notify_student(event.student_id, event.student_phone, "Your order has been rejected by the shop.")

    @handle(OrderDelivered)
    def on_order_delivered(self, event: OrderDelivered) -> None:
        notify_student(event.student_id, event.student_phone, "Your order has been delivered.")
