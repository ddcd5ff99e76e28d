"""UpdateOrderStatus: the shop confirms, rejects or delivers an order.

Rejection hands the copy back to the book's stock in the same unit of work.
If the book has since been removed from the catalogue there is nothing to
restock and the rejection still goes through.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.domain import bookmarket, logger
from bookmarket.exceptions import Unauthorized
from bookmarket.order.order import Order, OrderStatus


@bookmarket.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)
    shop_id = Identifier()


@bookmarket.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if command.shop_id and not order.belongs_to_shop(command.shop_id):
            raise Unauthorized({"shop_id": ["This order belongs to another shop"]})

        previous = order.status
        order.move_to(command.status)

        if order.status == OrderStatus.REJECTED.value:
            self._restock(order)

        repo.add(order)
        logger.info(
            "Order status changed",
            order_id=str(order.id),
            previous_status=previous,
            status=order.status,
        )

    def _restock(self, order):
        book_repo = current_domain.repository_for(Book)
        try:
            book = book_repo.get(order.book_id)
        except ObjectNotFoundError:
            logger.warning("Rejected order's book no longer listed", order_id=str(order.id), book_id=str(order.book_id))
            return

        book.restock_one()
        book_repo.add(book)
