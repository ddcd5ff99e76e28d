"""Shared helpers for the notification event handlers."""

import structlog
from protean.utils.globals import current_domain

from bookmarket.notification.notification import Notification, RecipientType
from bookmarket.student.student import Student

logger = structlog.get_logger(__name__)


def notify(recipient_type: str, recipient_id: str, message: str) -> str:
    """Append a notification to the recipient's inbox and return its id."""
    notification = Notification.compose(recipient_type, recipient_id, message)
    current_domain.repository_for(Notification).add(notification)
    logger.info(
        "Notification created",
        recipient_type=recipient_type,
        recipient_id=str(recipient_id),
    )
    return str(notification.id)


def notify_student(student_id: str | None, student_phone: str | None, message: str) -> str | None:
    """Notify the student behind an order.

    Guest orders carry no student id; the phone number is used to find a
    matching account instead. With no account at all there is no inbox to
    write to, and the notification is skipped.
    """
    if not student_id and student_phone:
        student = current_domain.repository_for(Student).find_by_phone(student_phone)
        student_id = str(student.id) if student else None

    if not student_id:
        logger.info("No student account to notify", student_phone=student_phone)
        return None

    return notify(RecipientType.STUDENT.value, student_id, message)
