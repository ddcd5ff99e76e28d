"""CancelOrder: a student withdraws an order the shop has not acted on yet."""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket, logger
from bookmarket.exceptions import Unauthorized
from bookmarket.order.order import Order


@bookmarket.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    student_id = Identifier()


@bookmarket.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if command.student_id and not order.belongs_to_student(command.student_id):
            raise Unauthorized({"student_id": ["This order belongs to another student"]})

        order.cancel()
        repo.add(order)
        logger.info("Order cancelled", order_id=str(order.id), order_code=order.order_code)
