"""FastAPI routes for reviews and notifications."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from bookmarket.api.schemas import (
    NotificationIdResponse,
    NotificationResponse,
    RatingResponse,
    ReviewIdResponse,
    ReviewResponse,
    SendNotificationRequest,
    StatusResponse,
    SubmitReviewRequest,
)
from bookmarket.notification.management import MarkNotificationRead, SendNotification
from bookmarket.notification.notification import Notification
from bookmarket.review.ratings import list_reviews, rating_summary
from bookmarket.review.submission import SubmitReview

# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
review_router = APIRouter(prefix="/reviews", tags=["reviews"])


@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def submit_review(body: SubmitReviewRequest) -> ReviewIdResponse:
    command = SubmitReview(
        target_type=body.target_type,
        target_id=body.target_id,
        reviewer_type=body.reviewer_type,
        reviewer_id=body.reviewer_id,
        rating=body.rating,
        comment=body.comment,
    )
    result = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=result)


@review_router.get("/{target_type}/{target_id}", response_model=list[ReviewResponse])
async def get_reviews(target_type: str, target_id: str) -> list[ReviewResponse]:
    return [ReviewResponse(**row) for row in list_reviews(target_type, target_id)]


@review_router.get("/{target_type}/{target_id}/rating", response_model=RatingResponse)
async def get_rating(target_type: str, target_id: str) -> RatingResponse:
    return RatingResponse(**rating_summary(target_type, target_id).as_dict())


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------
notification_router = APIRouter(prefix="/notifications", tags=["notifications"])


@notification_router.get("/{user_type}/{user_id}", response_model=list[NotificationResponse])
async def list_notifications(user_type: str, user_id: str) -> list[NotificationResponse]:
    """A student's or shop's inbox, newest first."""
    notifications = current_domain.repository_for(Notification).find_for(user_type, user_id)
    return [
        NotificationResponse(
            id=str(n.id),
            recipient_type=n.recipient_type,
            recipient_id=str(n.recipient_id),
            message=n.message,
            is_read=n.is_read,
            created_at=n.created_at,
        )
        for n in notifications
    ]


@notification_router.post("", status_code=201, response_model=NotificationIdResponse)
async def send_notification(body: SendNotificationRequest) -> NotificationIdResponse:
    command = SendNotification(recipient_type=body.user_type, recipient_id=body.user_id, message=body.message)
    result = current_domain.process(command, asynchronous=False)
    return NotificationIdResponse(notification_id=result)


@notification_router.put("/{notification_id}/read", response_model=StatusResponse)
async def mark_read(notification_id: str) -> StatusResponse:
    current_domain.process(MarkNotificationRead(notification_id=notification_id), asynchronous=False)
    return StatusResponse()
