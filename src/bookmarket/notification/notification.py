"""Notification aggregate (CQRS): an inbox message for a student or a shop.

Notifications are append-only apart from the read flag. Most are written by
the event handlers reacting to order and shop events; admins can also post
one directly.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, String, Text

from bookmarket.domain import bookmarket


class RecipientType(Enum):
    STUDENT = "student"
    SHOP = "shop"


@bookmarket.aggregate
class Notification:
    recipient_type: String(choices=RecipientType, required=True)
    recipient_id: Identifier(required=True)
    message: Text(required=True)
    is_read: Boolean(default=False)
    created_at: DateTime()
    read_at: DateTime()

    @classmethod
    def compose(cls, recipient_type, recipient_id, message):
        return cls(
            recipient_type=RecipientType(recipient_type).value,
            recipient_id=str(recipient_id),
            message=message,
            is_read=False,
            created_at=datetime.now(UTC),
        )

    def mark_read(self):
        if self.is_read:
            return
        self.is_read = True
        self.read_at = datetime.now(UTC)
