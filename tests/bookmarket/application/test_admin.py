"""Application tests for admin access, analytics, listings and the purge."""

from datetime import UTC, datetime, timedelta

import pytest
from bookmarket.admin.access import authenticate_admin, require_admin
from bookmarket.admin.analytics import marketplace_analytics, shop_analytics
from bookmarket.admin.directory import list_cities, list_shops, list_students
from bookmarket.admin.purge import CONFIRMATION_PHRASE, purge_all
from bookmarket.book.management import UpdateBook
from bookmarket.exceptions import Unauthorized
from bookmarket.order.placement import PlaceOrder
from bookmarket.order.status import UpdateOrderStatus
from bookmarket.shop.shop import Shop
from protean import current_domain
from protean.exceptions import ValidationError


def _delivered_order(book_id, student_id):
    order_id = current_domain.process(PlaceOrder(book_id=book_id, student_id=student_id), asynchronous=False)
    for status in ("confirmed", "delivered"):
        current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)
    return order_id


class TestAdminAccess:
    def test_login_returns_token(self):
        assert authenticate_admin("admin", "admin123") == "test-admin-token"

    def test_bad_login(self):
        with pytest.raises(Unauthorized):
            authenticate_admin("admin", "guess")

    def test_token_check(self):
        require_admin("test-admin-token")
        with pytest.raises(Unauthorized):
            require_admin("")


class TestShopAnalytics:
    def test_revenue_counts_delivered_and_paid(self, book_id, shop_id, student_id):
        _delivered_order(book_id, student_id)
        current_domain.process(PlaceOrder(book_id=book_id, student_id=student_id), asynchronous=False)

        stats = shop_analytics(shop_id)
        assert stats["total_orders"] == 2
        assert stats["total_revenue"] == 250.0
        assert stats["today_revenue"] == 250.0
        assert stats["avg_rating"] == 0.0

    def test_revenue_uses_order_snapshot(self, book_id, shop_id, student_id):
        _delivered_order(book_id, student_id)
        current_domain.process(UpdateBook(book_id=book_id, shop_id=shop_id, price=999.0), asynchronous=False)
        assert shop_analytics(shop_id)["total_revenue"] == 250.0

    def test_today_revenue_for_another_day(self, book_id, shop_id, student_id):
        _delivered_order(book_id, student_id)
        tomorrow = datetime.now(UTC).date() + timedelta(days=1)
        assert shop_analytics(shop_id, today=tomorrow)["today_revenue"] == 0.0


class TestMarketplace:
    def test_analytics(self, book_id, register_shop, student_id):
        register_shop(phone="9800000008", verified=False)
        _delivered_order(book_id, student_id)
        stats = marketplace_analytics()
        assert stats["total_shops"] == 2
        assert stats["verified_shops"] == 1
        assert stats["total_books"] == 1
        assert stats["total_orders"] == 1
        assert stats["total_revenue"] == 250.0

    def test_listings(self, register_shop, student_id):
        register_shop(phone="9800000010", city="Pune")
        register_shop(phone="9800000011", city="Nashik")
        assert list_cities() == ["Nashik", "Pune"]
        assert {row["phone"] for row in list_shops()} == {"9800000010", "9800000011"}
        assert list_students()[0]["student_name"] == "Asha Rao"


class TestPurge:
    def test_requires_phrase(self, shop_id):
        with pytest.raises(ValidationError):
            purge_all("yes please")
        assert len(current_domain.repository_for(Shop).find_all()) == 1

    def test_removes_everything(self, book_id, student_id):
        current_domain.process(PlaceOrder(book_id=book_id, student_id=student_id), asynchronous=False)
        removed = purge_all(CONFIRMATION_PHRASE)
        assert removed["Order"] == 1
        assert removed["Book"] == 1
        assert removed["Shop"] == 1
        assert removed["Student"] == 1
        assert marketplace_analytics()["total_shops"] == 0
