"""Payment bookkeeping on orders: UPI references and payment status."""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket
from bookmarket.order.order import Order, PaymentStatus


@bookmarket.command(part_of="Order")
class AttachTransaction:
    order_id = Identifier(required=True)
    transaction_id = String(required=True, max_length=100)


@bookmarket.command(part_of="Order")
class MarkOrderPaid:
    order_id = Identifier(required=True)


@bookmarket.command(part_of="Order")
class SetPaymentStatus:
    order_id = Identifier(required=True)
    payment_status = String(required=True, choices=PaymentStatus)


@bookmarket.command_handler(part_of=Order)
class OrderPaymentHandler:
    @handle(AttachTransaction)
    def attach_transaction(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.attach_transaction(command.transaction_id)
        repo.add(order)

    @handle(MarkOrderPaid)
    def mark_paid(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_paid()
        repo.add(order)

    @handle(SetPaymentStatus)
    def set_payment_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.set_payment_status(command.payment_status)
        repo.add(order)
