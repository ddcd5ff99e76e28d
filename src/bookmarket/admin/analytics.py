"""Revenue and volume figures for shops and for the marketplace as a whole.

Revenue counts only orders that are both delivered and paid, using the total
snapshotted on the order, so later price edits never change past revenue.
"""

from datetime import UTC, datetime

from protean.utils.globals import current_domain

from bookmarket.book.book import Book
from bookmarket.order.order import Order, OrderStatus, PaymentStatus
from bookmarket.review.ratings import rating_summary, summarize
from bookmarket.review.review import Review, TargetType
from bookmarket.shop.shop import Shop


def _is_revenue(order: Order) -> bool:
    return order.status == OrderStatus.DELIVERED.value and order.payment_status == PaymentStatus.PAID.value


def _revenue(orders) -> float:
    return round(sum(order.total_price for order in orders if _is_revenue(order)), 2)


def shop_analytics(shop_id: str, today=None) -> dict:
    """Order count, all-time revenue, revenue from orders placed today, average rating."""
    current_domain.repository_for(Shop).get(shop_id)
    today = today or datetime.now(UTC).date()

    orders = current_domain.repository_for(Order).find_all_for_shop(shop_id)
    todays_orders = [o for o in orders if o.created_at and o.created_at.date() == today]

    return {
        "total_orders": len(orders),
        "total_revenue": _revenue(orders),
        "today_revenue": _revenue(todays_orders),
        "avg_rating": rating_summary(TargetType.SHOP.value, str(shop_id)).average,
    }


def marketplace_analytics() -> dict:
    shops = current_domain.repository_for(Shop).find_all()
    orders = current_domain.repository_for(Order).find_all()
    shop_reviews = current_domain.repository_for(Review).find_by_target_type(TargetType.SHOP.value)

    return {
        "total_shops": len(shops),
        "verified_shops": sum(1 for shop in shops if shop.verified),
        "total_books": len(current_domain.repository_for(Book).find_all()),
        "total_orders": len(orders),
        "total_revenue": _revenue(orders),
        "avg_rating": summarize(shop_reviews).average,
    }
