"""Tests for cart line management."""

import json

import pytest
from bookmarket.cart.cart import Cart
from bookmarket.cart.events import CartCheckedOut, CartLineRemoved, CartLineSet
from protean.exceptions import ValidationError


def _make_cart():
    return Cart.open_for("student-001")


class TestSetLine:
    def test_add_line(self):
        cart = _make_cart()
        cart.set_line("book-001", 2)
        assert len(cart.lines) == 1
        assert cart.line_for("book-001").quantity == 2

    def test_adding_again_replaces_quantity(self):
        cart = _make_cart()
        cart.set_line("book-001", 2)
        cart.set_line("book-001", 5)
        assert len(cart.lines) == 1
        assert cart.line_for("book-001").quantity == 5

    def test_raises_event(self):
        cart = _make_cart()
        cart.set_line("book-001", 1)
        events = [e for e in cart._events if isinstance(e, CartLineSet)]
        assert events[0].book_id == "book-001"

    @pytest.mark.parametrize("quantity", [0, -1, None])
    def test_quantity_must_be_positive(self, quantity):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.set_line("book-001", quantity)


class TestUpdateAndRemove:
    def test_update_quantity_of_missing_book(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.update_quantity("book-404", 1)

    def test_remove(self):
        cart = _make_cart()
        cart.set_line("book-001", 1)
        cart.set_line("book-002", 1)
        cart.remove_book("book-001")
        assert [line.book_id for line in cart.lines] == ["book-002"]
        assert isinstance(cart._events[-1], CartLineRemoved)

    def test_remove_absent_is_noop(self):
        cart = _make_cart()
        cart.remove_book("book-404")
        assert cart.is_empty()

    def test_clear(self):
        cart = _make_cart()
        cart.set_line("book-001", 1)
        cart.set_line("book-002", 3)
        cart.clear()
        assert cart.is_empty()


class TestCheckedOut:
    def test_mark_checked_out_empties_cart(self):
        cart = _make_cart()
        cart.set_line("book-001", 1)
        cart.mark_checked_out(["ord-1"])
        assert cart.is_empty()
        event = cart._events[-1]
        assert isinstance(event, CartCheckedOut)
        assert json.loads(event.order_ids) == ["ord-1"]
