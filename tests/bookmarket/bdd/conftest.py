"""Shared BDD fixtures and step definitions for the order lifecycle."""

import pytest
from bookmarket.book.book import Book
from bookmarket.book.management import AddBook
from bookmarket.order.order import Order
from bookmarket.order.placement import PlaceOrder
from bookmarket.shop.registration import RegisterShop
from bookmarket.shop.verification import VerifyShop
from bookmarket.student.registration import RegisterStudent
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def books():
    """Book ids keyed by title."""
    return {}


@pytest.fixture()
def error():
    """Container for an exception captured in a When step."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a verified shop with UPI handle "{upi_id}"'), target_fixture="shop_id")
def _(upi_id):
    shop_id = current_domain.process(
        RegisterShop(
            shop_name="Booksville",
            owner_name="Meera Joshi",
            phone="9800000001",
            password="shop-pass",
            city="Pune",
            upi_id=upi_id,
        ),
        asynchronous=False,
    )
    current_domain.process(VerifyShop(shop_id=shop_id, verified=True), asynchronous=False)
    return shop_id


@given(parsers.cfparse('the shop lists "{title}" at {price:g} with {stock:d} in stock'))
def _(shop_id, books, title, price, stock):
    books[title] = current_domain.process(
        AddBook(shop_id=shop_id, book_name=title, price=price, stock=stock),
        asynchronous=False,
    )


@given("a registered student", target_fixture="student_id")
def _():
    return current_domain.process(
        RegisterStudent(name="Asha Rao", phone="9700000001", password="student-pass", address="Hostel B"),
        asynchronous=False,
    )


@given("the student has ordered the book", target_fixture="order_id")
def _(books, student_id):
    return current_domain.process(
        PlaceOrder(book_id=books["NCERT Physics Part 1"], student_id=student_id),
        asynchronous=False,
    )


@given(parsers.cfparse('the student has ordered "{title}"'), target_fixture="order_id")
def _(books, student_id, title):
    return current_domain.process(PlaceOrder(book_id=books[title], student_id=student_id), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is "{status}"'))
def _(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status


@then("the order is paid")
def _(order_id):
    assert current_domain.repository_for(Order).get(order_id).payment_status == "paid"


@then(parsers.cfparse("the book has {stock:d} in stock"))
def _(books, stock):
    assert current_domain.repository_for(Book).get(books["NCERT Physics Part 1"]).stock == stock
