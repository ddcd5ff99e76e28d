"""Notifications react to Shop approval and Book stock events."""

from protean.utils.mixins import handle

from bookmarket.book.events import BookSoldOut
from bookmarket.domain import bookmarket
from bookmarket.notification.helpers import notify
from bookmarket.notification.notification import Notification, RecipientType
from bookmarket.shop.events import ShopApproved


@bookmarket.event_handler(part_of=Notification, stream_category="bookmarket::shop")
class ShopEventsHandler:
    @handle(ShopApproved)
    def on_shop_approved(self, event: ShopApproved) -> None:
        notify(RecipientType.SHOP.value, event.shop_id, "Your shop has been approved by admin.")


@bookmarket.event_handler(part_of=Notification, stream_category="bookmarket::book")
class CatalogueEventsHandler:
    @handle(BookSoldOut)
    def on_book_sold_out(self, event: BookSoldOut) -> None:
        notify(RecipientType.SHOP.value, event.shop_id, f"'{event.book_name}' is now out of stock.")
