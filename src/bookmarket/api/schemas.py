"""Pydantic request/response schemas for the bookmarket API.

These are external contracts, kept separate from the Protean commands they
are translated into. Enumerated values are left as plain strings here; the
commands validate them so bad values surface as the same 400 error whether
they come over HTTP or not.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class RatingResponse(BaseModel):
    avg_rating: float
    review_count: int


# ---------------------------------------------------------------------------
# Shops
# ---------------------------------------------------------------------------
class RegisterShopRequest(BaseModel):
    shop_name: str
    owner_name: str
    phone: str
    password: str
    address: str | None = None
    city: str | None = None
    upi_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shop_name": "Sharma Book Depot",
                    "owner_name": "R. Sharma",
                    "phone": "+91 98765 43210",
                    "password": "s3cret",
                    "address": "12 College Road",
                    "city": "Pune",
                    "upi_id": "sharmabooks@upi",
                }
            ]
        }
    }


class ShopIdResponse(BaseModel):
    shop_id: str


class LoginRequest(BaseModel):
    phone: str
    password: str


class ShopLoginResponse(BaseModel):
    shop_id: str
    shop_name: str
    owner_name: str
    city: str | None = None


class UpdateShopProfileRequest(BaseModel):
    shop_name: str | None = None
    owner_name: str | None = None
    address: str | None = None
    city: str | None = None
    logo_url: str | None = None
    banner_url: str | None = None


class SetUpiRequest(BaseModel):
    upi_id: str | None = None


class ShopProfileResponse(BaseModel):
    id: str
    shop_name: str
    owner_name: str
    address: str | None = None
    city: str | None = None
    logo_url: str | None = None
    banner_url: str | None = None
    upi_id: str | None = None
    verified: bool
    phone: str | None = None
    avg_rating: float
    review_count: int


class ShopAnalyticsResponse(BaseModel):
    total_orders: int
    total_revenue: float
    today_revenue: float
    avg_rating: float


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------
class RegisterStudentRequest(BaseModel):
    name: str
    phone: str
    password: str
    address: str | None = None
    grade: str | None = None


class StudentIdResponse(BaseModel):
    student_id: str


class StudentLoginResponse(BaseModel):
    student_id: str
    student_name: str
    student_phone: str


class UpdateStudentRequest(BaseModel):
    name: str | None = None
    address: str | None = None
    grade: str | None = None


class StudentResponse(BaseModel):
    id: str
    name: str
    phone: str
    address: str | None = None
    grade: str | None = None


# ---------------------------------------------------------------------------
# Books
# ---------------------------------------------------------------------------
class AddBookRequest(BaseModel):
    shop_id: str
    book_name: str
    edition: str | None = None
    subject: str | None = None
    grade: str | None = None
    price: float
    condition: str = "new"
    stock: int = 1
    cover_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shop_id": "2f6c3c1e-...",
                    "book_name": "NCERT Physics Part 1",
                    "edition": "2024",
                    "subject": "Physics",
                    "grade": "11",
                    "price": 250.0,
                    "condition": "new",
                    "stock": 5,
                }
            ]
        }
    }


class UpdateBookRequest(BaseModel):
    shop_id: str
    book_name: str | None = None
    edition: str | None = None
    subject: str | None = None
    grade: str | None = None
    price: float | None = None
    condition: str | None = None
    stock: int | None = None
    cover_url: str | None = None


class BookIdResponse(BaseModel):
    book_id: str


class BookResponse(BaseModel):
    id: str
    shop_id: str
    book_name: str
    edition: str | None = None
    subject: str | None = None
    grade: str | None = None
    price: float
    condition: str
    stock: int
    cover_url: str | None = None
    created_at: datetime | None = None
    shop_name: str
    city: str | None = None
    address: str | None = None
    book_rating: float
    book_reviews: int
    shop_rating: float
    shop_reviews: int
    phone: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    book_id: str
    student_id: str | None = None
    student_name: str | None = None
    student_phone: str | None = None
    student_address: str | None = None
    quantity: int = 1
    payment_method: str = "cod"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "book_id": "9b1d...",
                    "student_name": "Asha",
                    "student_phone": "9876500000",
                    "student_address": "Hostel B, Room 12",
                    "payment_method": "upi",
                }
            ]
        }
    }


class CheckoutRequest(BaseModel):
    student_id: str
    student_address: str | None = None
    payment_method: str = "cod"


class OrderPlacedResponse(BaseModel):
    order_id: str
    order_code: str
    total_price: float
    upi_link: str | None = None
    qr_code: str | None = None


class CheckoutResponse(BaseModel):
    orders: list[OrderPlacedResponse]


class OrderResponse(BaseModel):
    id: str
    order_code: str
    book_id: str
    book_name: str
    shop_id: str
    quantity: int
    unit_price: float
    total_price: float
    student_id: str | None = None
    student_name: str
    student_phone: str
    student_address: str
    status: str
    payment_method: str
    payment_status: str
    upi_link: str | None = None
    qr_code: str | None = None
    transaction_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CancelOrderRequest(BaseModel):
    student_id: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    status: str
    shop_id: str | None = None


class AttachTransactionRequest(BaseModel):
    transaction_id: str


class SetPaymentStatusRequest(BaseModel):
    payment_status: str


# ---------------------------------------------------------------------------
# Cart & wishlist
# ---------------------------------------------------------------------------
class CartLineRequest(BaseModel):
    student_id: str
    book_id: str
    quantity: int = 1


class CartLineResponse(BaseModel):
    book_id: str
    quantity: int
    book_name: str | None = None
    price: float | None = None
    stock: int | None = None
    shop_id: str | None = None
    shop_name: str | None = None
    line_total: float | None = None
    available: bool


class CartResponse(BaseModel):
    student_id: str
    lines: list[CartLineResponse]
    total: float


class WishlistRequest(BaseModel):
    student_id: str
    book_id: str


class WishlistEntryResponse(BaseModel):
    book_id: str
    added_at: datetime | None = None
    book_name: str | None = None
    price: float | None = None
    stock: int | None = None
    shop_id: str | None = None


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
class SubmitReviewRequest(BaseModel):
    target_type: str
    target_id: str
    reviewer_type: str
    reviewer_id: str
    rating: int
    comment: str | None = None


class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewResponse(BaseModel):
    id: str
    target_type: str
    target_id: str
    reviewer_type: str
    reviewer_id: str
    reviewer_name: str | None = None
    rating: int
    comment: str | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------
class SendNotificationRequest(BaseModel):
    user_type: str
    user_id: str
    message: str


class NotificationIdResponse(BaseModel):
    notification_id: str


class NotificationResponse(BaseModel):
    id: str
    recipient_type: str
    recipient_id: str
    message: str
    is_read: bool
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
class AdminLoginRequest(BaseModel):
    username: str
    password: str


class AdminLoginResponse(BaseModel):
    token: str


class VerifyShopRequest(BaseModel):
    verified: bool
    admin_note: str | None = None


class AdminShopResponse(BaseModel):
    id: str
    shop_name: str
    owner_name: str
    phone: str
    city: str | None = None
    verified: bool
    admin_note: str | None = None
    created_at: datetime | None = None
    avg_rating: float
    review_count: int


class AdminStudentResponse(BaseModel):
    id: str
    student_name: str
    phone: str
    grade: str | None = None


class MarketplaceAnalyticsResponse(BaseModel):
    total_shops: int
    verified_shops: int
    total_books: int
    total_orders: int
    total_revenue: float
    avg_rating: float


class ClearDatabaseRequest(BaseModel):
    confirm: str


class ClearDatabaseResponse(BaseModel):
    removed: dict[str, int]
