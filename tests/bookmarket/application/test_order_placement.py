"""Application tests for PlaceOrder: order row and stock decrement in one unit of work."""

import pytest
from bookmarket.book.book import Book
from bookmarket.exceptions import OutOfStock
from bookmarket.notification.notification import Notification
from bookmarket.order.order import Order, OrderStatus
from bookmarket.order.placement import PlaceOrder
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _place(book_id, **kwargs):
    fields = {
        "student_name": "Guest Buyer",
        "student_phone": "9600000001",
        "student_address": "12 Lake View",
    }
    fields.update(kwargs)
    return current_domain.process(PlaceOrder(book_id=book_id, **fields), asynchronous=False)


class TestPlaceOrder:
    def test_creates_pending_order(self, book_id):
        order_id = _place(book_id)
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PENDING.value
        assert order.book_name == "NCERT Physics Part 1"
        assert order.total_price == 250.0

    def test_decrements_stock(self, book_id):
        _place(book_id)
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_quantity_scales_price_not_stock(self, book_id):
        order_id = _place(book_id, quantity=2)
        order = current_domain.repository_for(Order).get(order_id)
        assert order.total_price == 500.0
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_out_of_stock(self, list_book, shop_id):
        book_id = list_book(shop_id, stock=1)
        _place(book_id)
        with pytest.raises(OutOfStock):
            _place(book_id)
        assert current_domain.repository_for(Book).get(book_id).stock == 0
        assert len(current_domain.repository_for(Order).find_all()) == 1

    def test_unknown_book(self):
        with pytest.raises(ObjectNotFoundError):
            _place("no-such-book")

    def test_guest_needs_contact_details(self, book_id):
        with pytest.raises(ValidationError) as exc:
            _place(book_id, student_name=None, student_phone=None)
        assert "student_name" in exc.value.messages
        assert "student_phone" in exc.value.messages

    def test_registered_student_profile_fills_in(self, book_id, student_id):
        order_id = current_domain.process(PlaceOrder(book_id=book_id, student_id=student_id), asynchronous=False)
        order = current_domain.repository_for(Order).get(order_id)
        assert order.student_name == "Asha Rao"
        assert order.student_phone == "9700000001"
        assert order.student_address == "Hostel B, Room 12"

    def test_shop_is_notified(self, book_id, shop_id):
        order_id = _place(book_id)
        order = current_domain.repository_for(Order).get(order_id)
        inbox = current_domain.repository_for(Notification).find_for("shop", shop_id)
        assert any(n.message == f"New order received: {order.order_code}" for n in inbox)


class TestPaymentMethods:
    def test_upi_order_carries_link(self, book_id):
        order_id = _place(book_id, payment_method="upi")
        order = current_domain.repository_for(Order).get(order_id)
        assert order.upi_link.startswith("upi://pay?pa=booksville@upi")
        assert order.qr_code.startswith("data:image/png;base64,")

    def test_upi_without_handle(self, register_shop, list_book):
        shop_id = register_shop(phone="9800000002", upi_id=None)
        book_id = list_book(shop_id)
        with pytest.raises(ValidationError):
            _place(book_id, payment_method="upi")
        assert current_domain.repository_for(Book).get(book_id).stock == 3


class TestUnverifiedShop:
    def test_cannot_order_from_unverified_shop(self, register_shop, list_book):
        shop_id = register_shop(phone="9800000003", verified=False)
        book_id = list_book(shop_id)
        with pytest.raises(ValidationError):
            _place(book_id)
