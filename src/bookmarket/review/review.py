"""Review aggregate (CQRS): a star rating of a book or a shop.

Reviews are write-once: there is no editing and no moderation. Averages are
never stored; they are recomputed from the reviews on every read.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text, ValueObject

from bookmarket.domain import bookmarket
from bookmarket.review.events import ReviewSubmitted


class TargetType(Enum):
    BOOK = "book"
    SHOP = "shop"


class ReviewerType(Enum):
    STUDENT = "student"
    SHOP = "shop"


@bookmarket.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})


@bookmarket.aggregate
class Review:
    target_type = String(choices=TargetType, required=True)
    target_id = Identifier(required=True)
    reviewer_type = String(choices=ReviewerType, required=True)
    reviewer_id = Identifier(required=True)
    rating = ValueObject(Rating, required=True)
    comment = Text()
    created_at = DateTime()

    @classmethod
    def submit(cls, target_type, target_id, reviewer_type, reviewer_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            target_type=target_type,
            target_id=target_id,
            reviewer_type=reviewer_type,
            reviewer_id=reviewer_id,
            rating=Rating(score=rating),
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                target_type=target_type,
                target_id=str(target_id),
                reviewer_type=reviewer_type,
                reviewer_id=str(reviewer_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return review

    @property
    def score(self) -> int:
        return self.rating.score
