"""FastAPI routes for the admin console.

Everything except login requires the ``X-Admin-Token`` header.
"""

from fastapi import APIRouter, Depends, Header
from fastapi.responses import Response
from protean.utils.globals import current_domain

from bookmarket.admin.access import authenticate_admin, require_admin
from bookmarket.admin.analytics import marketplace_analytics
from bookmarket.admin.directory import list_cities, list_orders, list_shops, list_students
from bookmarket.admin.export import orders_csv, shops_csv
from bookmarket.admin.purge import purge_all
from bookmarket.api.ordering import order_response
from bookmarket.api.schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminShopResponse,
    AdminStudentResponse,
    ClearDatabaseRequest,
    ClearDatabaseResponse,
    MarketplaceAnalyticsResponse,
    OrderResponse,
    SetPaymentStatusRequest,
    StatusResponse,
    VerifyShopRequest,
)
from bookmarket.order.payment import SetPaymentStatus
from bookmarket.shop.verification import VerifyShop
from bookmarket.student.registration import RemoveStudent


async def admin_guard(x_admin_token: str = Header(default="")) -> None:
    require_admin(x_admin_token)


admin_auth_router = APIRouter(prefix="/admin", tags=["admin"])
admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(admin_guard)])


@admin_auth_router.post("/login", response_model=AdminLoginResponse)
async def admin_login(body: AdminLoginRequest) -> AdminLoginResponse:
    return AdminLoginResponse(token=authenticate_admin(body.username, body.password))


# ---------------------------------------------------------------------------
# Shops
# ---------------------------------------------------------------------------
@admin_router.get("/shops", response_model=list[AdminShopResponse])
async def shops() -> list[AdminShopResponse]:
    return [AdminShopResponse(**row) for row in list_shops()]


@admin_router.put("/shops/{shop_id}/verify", response_model=StatusResponse)
async def verify_shop(shop_id: str, body: VerifyShopRequest) -> StatusResponse:
    command = VerifyShop(shop_id=shop_id, verified=body.verified, admin_note=body.admin_note)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_router.get("/cities", response_model=list[str])
async def cities() -> list[str]:
    return list_cities()


@admin_router.get("/analytics", response_model=MarketplaceAnalyticsResponse)
async def analytics() -> MarketplaceAnalyticsResponse:
    return MarketplaceAnalyticsResponse(**marketplace_analytics())


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------
@admin_router.get("/students", response_model=list[AdminStudentResponse])
async def students() -> list[AdminStudentResponse]:
    return [AdminStudentResponse(**row) for row in list_students()]


@admin_router.delete("/students/{student_id}", response_model=StatusResponse)
async def delete_student(student_id: str) -> StatusResponse:
    current_domain.process(RemoveStudent(student_id=student_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@admin_router.get("/orders", response_model=list[OrderResponse])
async def orders() -> list[OrderResponse]:
    return [order_response(order) for order in list_orders()]


@admin_router.put("/orders/{order_id}/status", response_model=StatusResponse)
async def set_payment_status(order_id: str, body: SetPaymentStatusRequest) -> StatusResponse:
    command = SetPaymentStatus(order_id=order_id, payment_status=body.payment_status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Exports
# ---------------------------------------------------------------------------
def _csv_attachment(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@admin_router.get("/export/shops", response_class=Response)
async def export_shops() -> Response:
    return _csv_attachment(shops_csv(), "shops.csv")


@admin_router.get("/export/orders", response_class=Response)
async def export_orders() -> Response:
    return _csv_attachment(orders_csv(), "orders.csv")


# ---------------------------------------------------------------------------
# Maintenance
# ---------------------------------------------------------------------------
@admin_router.delete("/clear-database", response_model=ClearDatabaseResponse)
async def clear_database(body: ClearDatabaseRequest) -> ClearDatabaseResponse:
    return ClearDatabaseResponse(removed=purge_all(body.confirm))
