"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from bookmarket.domain import bookmarket


@bookmarket.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id = Identifier(required=True)
    target_type = String(required=True)
    target_id = Identifier(required=True)
    reviewer_type = String(required=True)
    reviewer_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)
