"""Application tests for wishlist commands."""

from bookmarket.wishlist.listing import wishlist_for
from bookmarket.wishlist.management import AddToWishlist, RemoveFromWishlist
from protean import current_domain


class TestWishlist:
    def test_add_is_idempotent(self, student_id, book_id):
        first = current_domain.process(AddToWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        second = current_domain.process(AddToWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        assert first == second
        assert len(wishlist_for(student_id)) == 1

    def test_listing_joins_book(self, student_id, book_id):
        current_domain.process(AddToWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        row = wishlist_for(student_id)[0]
        assert row["book_name"] == "NCERT Physics Part 1"
        assert row["price"] == 250.0

    def test_remove(self, student_id, book_id):
        current_domain.process(AddToWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        current_domain.process(RemoveFromWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        assert wishlist_for(student_id) == []

    def test_remove_missing_is_harmless(self, student_id, book_id):
        current_domain.process(RemoveFromWishlist(student_id=student_id, book_id=book_id), asynchronous=False)
        assert wishlist_for(student_id) == []
