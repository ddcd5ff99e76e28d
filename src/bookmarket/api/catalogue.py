"""FastAPI routes for the catalogue: books, grade/subject lookups and shops.

Thin adapters: schema → command or query → response.
"""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from bookmarket.admin.analytics import shop_analytics
from bookmarket.api.schemas import (
    AddBookRequest,
    BookIdResponse,
    BookResponse,
    LoginRequest,
    RatingResponse,
    RegisterShopRequest,
    SetUpiRequest,
    ShopAnalyticsResponse,
    ShopIdResponse,
    ShopLoginResponse,
    ShopProfileResponse,
    StatusResponse,
    UpdateBookRequest,
    UpdateShopProfileRequest,
)
from bookmarket.book.catalogue import BookFilters, get_book, search_books, shop_profile
from bookmarket.book.management import AddBook, RemoveBook, UpdateBook
from bookmarket.book.taxonomy import list_grades, list_subjects
from bookmarket.review.ratings import rating_summary
from bookmarket.review.review import TargetType
from bookmarket.shop.access import authenticate_shop
from bookmarket.shop.profile import SetUpiHandle, UpdateShopProfile
from bookmarket.shop.registration import RegisterShop

# ---------------------------------------------------------------------------
# Books
# ---------------------------------------------------------------------------
book_router = APIRouter(prefix="/books", tags=["books"])


@book_router.get("", response_model=list[BookResponse])
async def list_books(
    query: str | None = None,
    shop_id: str | None = None,
    grade: str | None = None,
    subject: str | None = None,
    city: str | None = None,
    condition: str | None = None,
    price_min: float | None = None,
    price_max: float | None = None,
    sort: str | None = None,
) -> list[BookResponse]:
    filters = BookFilters(
        query=query,
        shop_id=shop_id,
        grade=grade,
        subject=subject,
        city=city,
        condition=condition,
        price_min=price_min,
        price_max=price_max,
        sort=sort,
    )
    return [BookResponse(**row) for row in search_books(filters)]


@book_router.get("/{book_id}", response_model=BookResponse)
async def book_detail(book_id: str, student_id: str | None = None) -> BookResponse:
    return BookResponse(**get_book(book_id, student_id=student_id))


@book_router.post("", status_code=201, response_model=BookIdResponse)
async def add_book(body: AddBookRequest) -> BookIdResponse:
    command = AddBook(
        shop_id=body.shop_id,
        book_name=body.book_name,
        edition=body.edition,
        subject=body.subject,
        grade=body.grade,
        price=body.price,
        condition=body.condition,
        stock=body.stock,
        cover_url=body.cover_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return BookIdResponse(book_id=result)


@book_router.put("/{book_id}", response_model=StatusResponse)
async def update_book(book_id: str, body: UpdateBookRequest) -> StatusResponse:
    command = UpdateBook(
        book_id=book_id,
        shop_id=body.shop_id,
        book_name=body.book_name,
        edition=body.edition,
        subject=body.subject,
        grade=body.grade,
        price=body.price,
        condition=body.condition,
        stock=body.stock,
        cover_url=body.cover_url,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@book_router.delete("/{book_id}", response_model=StatusResponse)
async def remove_book(book_id: str, shop_id: str) -> StatusResponse:
    current_domain.process(RemoveBook(book_id=book_id, shop_id=shop_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Grades & subjects
# ---------------------------------------------------------------------------
taxonomy_router = APIRouter(tags=["taxonomy"])


@taxonomy_router.get("/grades", response_model=list[str])
async def grades() -> list[str]:
    return list_grades()


@taxonomy_router.get("/subjects", response_model=list[str])
async def subjects(grade: str | None = Query(default=None)) -> list[str]:
    return list_subjects(grade)


# ---------------------------------------------------------------------------
# Shops
# ---------------------------------------------------------------------------
shop_router = APIRouter(prefix="/shops", tags=["shops"])


@shop_router.post("/register", status_code=201, response_model=ShopIdResponse)
async def register_shop(body: RegisterShopRequest) -> ShopIdResponse:
    command = RegisterShop(
        shop_name=body.shop_name,
        owner_name=body.owner_name,
        phone=body.phone,
        password=body.password,
        address=body.address,
        city=body.city,
        upi_id=body.upi_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return ShopIdResponse(shop_id=result)


@shop_router.post("/login", response_model=ShopLoginResponse)
async def login_shop(body: LoginRequest) -> ShopLoginResponse:
    shop = authenticate_shop(body.phone, body.password)
    return ShopLoginResponse(
        shop_id=str(shop.id),
        shop_name=shop.shop_name,
        owner_name=shop.owner_name,
        city=shop.city,
    )


@shop_router.get("/{shop_id}/profile", response_model=ShopProfileResponse)
async def get_shop_profile(shop_id: str, student_id: str | None = None) -> ShopProfileResponse:
    return ShopProfileResponse(**shop_profile(shop_id, student_id=student_id))


@shop_router.put("/{shop_id}/profile", response_model=StatusResponse)
async def update_shop_profile(shop_id: str, body: UpdateShopProfileRequest) -> StatusResponse:
    command = UpdateShopProfile(
        shop_id=shop_id,
        shop_name=body.shop_name,
        owner_name=body.owner_name,
        address=body.address,
        city=body.city,
        logo_url=body.logo_url,
        banner_url=body.banner_url,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@shop_router.put("/{shop_id}/upi", response_model=StatusResponse)
async def set_upi(shop_id: str, body: SetUpiRequest) -> StatusResponse:
    current_domain.process(SetUpiHandle(shop_id=shop_id, upi_id=body.upi_id), asynchronous=False)
    return StatusResponse()


@shop_router.get("/{shop_id}/analytics", response_model=ShopAnalyticsResponse)
async def get_shop_analytics(shop_id: str) -> ShopAnalyticsResponse:
    return ShopAnalyticsResponse(**shop_analytics(shop_id))


@shop_router.get("/{shop_id}/rating", response_model=RatingResponse)
async def get_shop_rating(shop_id: str) -> RatingResponse:
    return RatingResponse(**rating_summary(TargetType.SHOP.value, shop_id).as_dict())
