"""Application tests for cart commands and checkout."""

import pytest
from bookmarket.book.book import Book
from bookmarket.cart.cart import Cart
from bookmarket.cart.checkout import Checkout
from bookmarket.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from bookmarket.cart.summary import cart_summary
from bookmarket.exceptions import EmptyCart, OutOfStock
from bookmarket.order.order import Order
from bookmarket.order.placement import PlaceOrder
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _add(student_id, book_id, quantity=1):
    current_domain.process(AddToCart(student_id=student_id, book_id=book_id, quantity=quantity), asynchronous=False)


def _checkout(student_id, payment_method="cod"):
    return current_domain.process(
        Checkout(student_id=student_id, payment_method=payment_method),
        asynchronous=False,
    )


class TestCartCommands:
    def test_add_opens_cart(self, student_id, book_id):
        _add(student_id, book_id, quantity=2)
        cart = current_domain.repository_for(Cart).find_for_student(student_id)
        assert cart.line_for(book_id).quantity == 2

    def test_add_unknown_book(self, student_id):
        with pytest.raises(ObjectNotFoundError):
            _add(student_id, "no-such-book")

    def test_update_remove_clear(self, student_id, book_id, list_book, shop_id):
        other_book = list_book(shop_id, book_name="NCERT Chemistry Part 1")
        _add(student_id, book_id)
        _add(student_id, other_book)

        current_domain.process(
            UpdateCartQuantity(student_id=student_id, book_id=book_id, quantity=4), asynchronous=False
        )
        assert current_domain.repository_for(Cart).find_for_student(student_id).line_for(book_id).quantity == 4

        current_domain.process(RemoveFromCart(student_id=student_id, book_id=other_book), asynchronous=False)
        assert len(current_domain.repository_for(Cart).find_for_student(student_id).lines) == 1

        current_domain.process(ClearCart(student_id=student_id), asynchronous=False)
        assert current_domain.repository_for(Cart).find_for_student(student_id).is_empty()

    def test_summary(self, student_id, book_id):
        _add(student_id, book_id, quantity=2)
        summary = cart_summary(student_id)
        assert summary["total"] == 500.0
        line = summary["lines"][0]
        assert line["shop_name"] == "Booksville"
        assert line["line_total"] == 500.0
        assert line["available"] is True

    def test_summary_of_missing_cart(self, student_id):
        assert cart_summary(student_id) == {"student_id": student_id, "lines": [], "total": 0}


class TestCheckout:
    def test_one_order_per_line(self, student_id, book_id, list_book, shop_id):
        other_book = list_book(shop_id, book_name="NCERT Chemistry Part 1", price=180.0)
        _add(student_id, book_id, quantity=2)
        _add(student_id, other_book)

        order_ids = _checkout(student_id)

        assert len(order_ids) == 2
        orders = {o.book_id: o for o in (current_domain.repository_for(Order).get(i) for i in order_ids)}
        assert orders[book_id].quantity == 2
        assert orders[book_id].total_price == 500.0
        assert orders[other_book].total_price == 180.0

    def test_each_line_takes_one_copy(self, student_id, book_id):
        _add(student_id, book_id, quantity=2)
        _checkout(student_id)
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_cart_is_emptied(self, student_id, book_id):
        _add(student_id, book_id)
        _checkout(student_id)
        assert current_domain.repository_for(Cart).find_for_student(student_id).is_empty()

    def test_empty_cart(self, student_id):
        with pytest.raises(EmptyCart):
            _checkout(student_id)

    def test_failure_leaves_everything_untouched(self, student_id, book_id, list_book, shop_id):
        last_copy = list_book(shop_id, book_name="Old Atlas", stock=1)
        _add(student_id, book_id)
        _add(student_id, last_copy)
        # Someone else buys the last copy first
        current_domain.process(
            PlaceOrder(book_id=last_copy, student_name="Ravi", student_phone="9500000001", student_address="Gate 1"),
            asynchronous=False,
        )

        with pytest.raises(OutOfStock):
            _checkout(student_id)

        assert len(current_domain.repository_for(Cart).find_for_student(student_id).lines) == 2
        assert current_domain.repository_for(Book).get(book_id).stock == 3
        assert len(current_domain.repository_for(Order).find_for_student(student_id)) == 0

    def test_upi_needs_handle_on_every_shop(self, student_id, book_id, register_shop, list_book):
        cash_only = register_shop(phone="9800000009", upi_id=None, shop_name="Cash Only Books")
        _add(student_id, book_id)
        _add(student_id, list_book(cash_only))

        with pytest.raises(ValidationError):
            _checkout(student_id, payment_method="upi")
        assert current_domain.repository_for(Order).find_all() == []
