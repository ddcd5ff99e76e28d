"""SubmitReview: rate a book or a shop, once per reviewer per target.

The one-review rule spans many Review aggregates, so it is enforced here
with a repository lookup rather than inside the aggregate.
"""

from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.book.book import Book
from bookmarket.domain import bookmarket
from bookmarket.exceptions import DuplicateReview
from bookmarket.review.review import Review, ReviewerType, TargetType
from bookmarket.shop.shop import Shop


@bookmarket.command(part_of="Review")
class SubmitReview:
    target_type = String(required=True, choices=TargetType)
    target_id = Identifier(required=True)
    reviewer_type = String(required=True, choices=ReviewerType)
    reviewer_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()


@bookmarket.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        target_cls = Book if command.target_type == TargetType.BOOK.value else Shop
        current_domain.repository_for(target_cls).get(command.target_id)

        repo = current_domain.repository_for(Review)
        existing = repo.find_existing(
            command.target_type,
            command.target_id,
            command.reviewer_type,
            command.reviewer_id,
        )
        if existing is not None:
            raise DuplicateReview({"review": ["You have already rated this"]})

        review = Review.submit(
            target_type=command.target_type,
            target_id=command.target_id,
            reviewer_type=command.reviewer_type,
            reviewer_id=command.reviewer_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(review)
        return str(review.id)
