"""Application tests for shop-driven status changes, cancellation and payment."""

import pytest
from bookmarket.book.book import Book
from bookmarket.book.management import RemoveBook
from bookmarket.exceptions import InvalidTransition, Unauthorized
from bookmarket.notification.notification import Notification
from bookmarket.order.cancellation import CancelOrder
from bookmarket.order.order import Order, OrderStatus, PaymentStatus
from bookmarket.order.payment import AttachTransaction, MarkOrderPaid, SetPaymentStatus
from bookmarket.order.placement import PlaceOrder
from bookmarket.order.status import UpdateOrderStatus
from protean import current_domain


def _place(book_id, student_id):
    return current_domain.process(PlaceOrder(book_id=book_id, student_id=student_id), asynchronous=False)


def _move(order_id, status, shop_id=None):
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=status, shop_id=shop_id), asynchronous=False)


def _student_inbox(student_id):
    return [n.message for n in current_domain.repository_for(Notification).find_for("student", student_id)]


class TestConfirmAndDeliver:
    def test_confirm_notifies_student(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        _move(order_id, "confirmed")
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CONFIRMED.value
        assert "Your order has been confirmed by the shop." in _student_inbox(student_id)

    def test_deliver_marks_paid(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        _move(order_id, "confirmed")
        _move(order_id, "delivered")
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.DELIVERED.value
        assert order.payment_status == PaymentStatus.PAID.value
        assert "Your order has been delivered." in _student_inbox(student_id)

    def test_deliver_pending_is_refused(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        with pytest.raises(InvalidTransition):
            _move(order_id, "delivered")
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.PENDING.value

    def test_other_shop_cannot_move_order(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        with pytest.raises(Unauthorized):
            _move(order_id, "confirmed", shop_id="someone-else")


class TestReject:
    def test_reject_restocks_and_notifies(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        assert current_domain.repository_for(Book).get(book_id).stock == 2

        _move(order_id, "rejected")

        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.REJECTED.value
        assert current_domain.repository_for(Book).get(book_id).stock == 3
        assert any("rejected" in message for message in _student_inbox(student_id))

    def test_reject_after_confirm_restocks(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        _move(order_id, "confirmed")
        _move(order_id, "rejected")
        assert current_domain.repository_for(Book).get(book_id).stock == 3

    def test_reject_when_book_was_removed(self, book_id, shop_id, student_id):
        order_id = _place(book_id, student_id)
        current_domain.process(RemoveBook(book_id=book_id, shop_id=shop_id), asynchronous=False)
        _move(order_id, "rejected")
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.REJECTED.value
        assert order.book_name == "NCERT Physics Part 1"

    def test_guest_order_notifies_account_with_same_phone(self, book_id, student_id):
        order_id = current_domain.process(
            PlaceOrder(
                book_id=book_id,
                student_name="Asha",
                student_phone="9700000001",
                student_address="Gate 2",
            ),
            asynchronous=False,
        )
        _move(order_id, "rejected")
        assert "Your order has been rejected by the shop." in _student_inbox(student_id)


class TestCancel:
    def test_cancel_does_not_restock(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        current_domain.process(CancelOrder(order_id=order_id, student_id=student_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.CANCELLED.value
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_cancel_notifies_shop(self, book_id, shop_id, student_id):
        order_id = _place(book_id, student_id)
        current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
        order = current_domain.repository_for(Order).get(order_id)
        inbox = [n.message for n in current_domain.repository_for(Notification).find_for("shop", shop_id)]
        assert f"Order {order.order_code} has been cancelled." in inbox

    def test_cannot_cancel_confirmed(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        _move(order_id, "confirmed")
        with pytest.raises(InvalidTransition):
            current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)

    def test_other_student_cannot_cancel(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        with pytest.raises(Unauthorized):
            current_domain.process(CancelOrder(order_id=order_id, student_id="intruder"), asynchronous=False)


class TestPayment:
    def test_attach_transaction(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        current_domain.process(AttachTransaction(order_id=order_id, transaction_id="UTR998877"), asynchronous=False)
        order = current_domain.repository_for(Order).get(order_id)
        assert order.transaction_id == "UTR998877"
        assert order.payment_status == PaymentStatus.PENDING.value

    def test_mark_paid(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).payment_status == PaymentStatus.PAID.value

    def test_admin_override_back_to_pending(self, book_id, student_id):
        order_id = _place(book_id, student_id)
        _move(order_id, "confirmed")
        _move(order_id, "delivered")
        current_domain.process(SetPaymentStatus(order_id=order_id, payment_status="pending"), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).payment_status == PaymentStatus.PENDING.value
