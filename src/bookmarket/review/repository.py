"""Repository for reviews."""

from bookmarket.domain import bookmarket
from bookmarket.review.review import Review


@bookmarket.repository(part_of=Review)
class ReviewRepository:
    def find_for_target(self, target_type: str, target_id: str) -> list[Review]:
        """Reviews of one book or shop, newest first."""
        return (
            self._dao.query.filter(target_type=target_type, target_id=str(target_id))
            .order_by("-created_at")
            .limit(None)
            .all()
            .items
        )

    def find_by_target_type(self, target_type: str, target_ids=None) -> list[Review]:
        """Every review of one target type, optionally narrowed to ``target_ids``."""
        query = self._dao.query.filter(target_type=target_type)
        if target_ids is not None:
            wanted = list({str(target_id) for target_id in target_ids})
            if not wanted:
                return []
            query = query.filter(target_id__in=wanted)
        return query.limit(None).all().items

    def find_existing(self, target_type, target_id, reviewer_type, reviewer_id) -> Review | None:
        reviews = (
            self._dao.query.filter(
                target_type=target_type,
                target_id=str(target_id),
                reviewer_type=reviewer_type,
                reviewer_id=str(reviewer_id),
            )
            .all()
            .items
        )
        return reviews[0] if reviews else None
