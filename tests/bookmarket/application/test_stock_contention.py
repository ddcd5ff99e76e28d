"""Application tests for competing writers on the last copy of a book.

A book is versioned; a writer holding an older copy cannot overwrite a newer
save, so two orders racing for one copy never both take it.
"""

import pytest
from bookmarket.book.book import Book
from bookmarket.exceptions import OutOfStock
from bookmarket.order.order import Order
from bookmarket.order.placement import PlaceOrder
from protean import current_domain
from protean.exceptions import ExpectedVersionError


def _place(book_id, phone="9600000001"):
    command = PlaceOrder(
        book_id=book_id,
        student_name="Guest Buyer",
        student_phone=phone,
        student_address="12 Lake View",
    )
    return current_domain.process(command, asynchronous=False)


class TestStaleBookCopies:
    def test_second_writer_of_last_copy_is_rejected(self, list_book, shop_id):
        book_id = list_book(shop_id, stock=1)
        repo = current_domain.repository_for(Book)

        first = repo.get(book_id)
        second = repo.get(book_id)
        first.withdraw_one()
        second.withdraw_one()

        repo.add(first)
        with pytest.raises(ExpectedVersionError):
            repo.add(second)

        assert repo.get(book_id).stock == 0

    def test_later_writer_with_fresh_copy_succeeds(self, list_book, shop_id):
        book_id = list_book(shop_id, stock=2)
        repo = current_domain.repository_for(Book)

        book = repo.get(book_id)
        book.withdraw_one()
        repo.add(book)

        fresh = repo.get(book_id)
        fresh.withdraw_one()
        repo.add(fresh)

        assert repo.get(book_id).stock == 0


class TestRacingOrders:
    def test_only_one_order_takes_the_last_copy(self, list_book, shop_id, serve_stale_book):
        book_id = list_book(shop_id, stock=1)
        stale = current_domain.repository_for(Book).get(book_id)

        _place(book_id)
        served = serve_stale_book(stale)

        # Whether the conflict surfaces or the handler retries and finds the shelf empty,
        # the second order is refused
        with pytest.raises((ExpectedVersionError, OutOfStock)):
            _place(book_id, phone="9600000002")

        assert served == [stale]
        assert current_domain.repository_for(Book).get(book_id).stock == 0
        assert len(current_domain.repository_for(Order).find_all()) == 1
