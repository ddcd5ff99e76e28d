"""Rating summaries and review listings, computed on every read."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from bookmarket.review.review import Review, ReviewerType
from bookmarket.shop.shop import Shop
from bookmarket.student.student import Student


@dataclass(frozen=True)
class RatingSummary:
    average: float
    count: int

    def as_dict(self) -> dict:
        return {"avg_rating": self.average, "review_count": self.count}


def summarize(reviews) -> RatingSummary:
    """Average score rounded to one decimal; 0.0 when there are no reviews."""
    scores = [review.score for review in reviews]
    if not scores:
        return RatingSummary(average=0.0, count=0)
    return RatingSummary(average=round(sum(scores) / len(scores), 1), count=len(scores))


def rating_summary(target_type: str, target_id: str) -> RatingSummary:
    return summarize(current_domain.repository_for(Review).find_for_target(target_type, target_id))


def rating_summaries(target_type: str, target_ids=None) -> dict[str, RatingSummary]:
    """Summaries keyed by target id, for every reviewed target of one type or just ``target_ids``."""
    grouped: dict[str, list[Review]] = {}
    for review in current_domain.repository_for(Review).find_by_target_type(target_type, target_ids):
        grouped.setdefault(str(review.target_id), []).append(review)
    return {target_id: summarize(reviews) for target_id, reviews in grouped.items()}


def reviewer_name(reviewer_type: str, reviewer_id: str) -> str | None:
    aggregate_cls = Student if reviewer_type == ReviewerType.STUDENT.value else Shop
    reviewer = current_domain.repository_for(aggregate_cls)._dao.query.filter(id=str(reviewer_id)).all().items
    if not reviewer:
        return None
    return reviewer[0].name if aggregate_cls is Student else reviewer[0].shop_name


def list_reviews(target_type: str, target_id: str) -> list[dict]:
    """Reviews of a target, newest first, with the reviewer's display name."""
    return [
        {
            "id": str(review.id),
            "target_type": review.target_type,
            "target_id": str(review.target_id),
            "reviewer_type": review.reviewer_type,
            "reviewer_id": str(review.reviewer_id),
            "reviewer_name": reviewer_name(review.reviewer_type, review.reviewer_id),
            "rating": review.score,
            "comment": review.comment,
            "created_at": review.created_at,
        }
        for review in current_domain.repository_for(Review).find_for_target(target_type, target_id)
    ]
