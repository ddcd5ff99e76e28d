"""Direct notification commands: post a message, mark one read."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket
from bookmarket.notification.helpers import notify
from bookmarket.notification.notification import Notification, RecipientType


@bookmarket.command(part_of="Notification")
class SendNotification:
    recipient_type = String(required=True, choices=RecipientType)
    recipient_id = Identifier(required=True)
    message = Text(required=True)


@bookmarket.command(part_of="Notification")
class MarkNotificationRead:
    notification_id = Identifier(required=True)


@bookmarket.command_handler(part_of=Notification)
class NotificationHandler:
    @handle(SendNotification)
    def send_notification(self, command):
        return notify(command.recipient_type, command.recipient_id, command.message)

    @handle(MarkNotificationRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)
        notification.mark_read()
        repo.add(notification)
