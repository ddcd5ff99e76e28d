"""Repository for notifications."""

from bookmarket.domain import bookmarket
from bookmarket.notification.notification import Notification


@bookmarket.repository(part_of=Notification)
class NotificationRepository:
    def find_for(self, recipient_type: str, recipient_id: str) -> list[Notification]:
        """A recipient's inbox, newest first."""
        return (
            self._dao.query.filter(recipient_type=recipient_type, recipient_id=str(recipient_id))
            .order_by("-created_at")
            .limit(None)
            .all()
            .items
        )
