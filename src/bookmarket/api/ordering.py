"""FastAPI routes for ordering: orders, carts and wishlists."""

from fastapi import APIRouter
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookmarket.api.schemas import (
    AttachTransactionRequest,
    CancelOrderRequest,
    CartLineRequest,
    CartResponse,
    CheckoutRequest,
    CheckoutResponse,
    OrderPlacedResponse,
    OrderResponse,
    PlaceOrderRequest,
    StatusResponse,
    UpdateOrderStatusRequest,
    WishlistEntryResponse,
    WishlistRequest,
)
from bookmarket.cart.checkout import Checkout
from bookmarket.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from bookmarket.cart.summary import cart_summary
from bookmarket.order.cancellation import CancelOrder
from bookmarket.order.order import Order
from bookmarket.order.payment import AttachTransaction, MarkOrderPaid
from bookmarket.order.placement import PlaceOrder
from bookmarket.order.status import UpdateOrderStatus
from bookmarket.wishlist.listing import wishlist_for
from bookmarket.wishlist.management import AddToWishlist, RemoveFromWishlist


def order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        order_code=order.order_code,
        book_id=str(order.book_id),
        book_name=order.book_name,
        shop_id=str(order.shop_id),
        quantity=order.quantity,
        unit_price=order.unit_price,
        total_price=order.total_price,
        student_id=str(order.student_id) if order.student_id else None,
        student_name=order.student_name,
        student_phone=order.student_phone,
        student_address=order.student_address,
        status=order.status,
        payment_method=order.payment_method,
        payment_status=order.payment_status,
        upi_link=order.upi_link,
        qr_code=order.qr_code,
        transaction_id=order.transaction_id,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _placed_response(order_id: str) -> OrderPlacedResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderPlacedResponse(
        order_id=str(order.id),
        order_code=order.order_code,
        total_price=order.total_price,
        upi_link=order.upi_link,
        qr_code=order.qr_code,
    )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderPlacedResponse)
async def place_order(body: PlaceOrderRequest) -> OrderPlacedResponse:
    command = PlaceOrder(
        book_id=body.book_id,
        student_id=body.student_id,
        student_name=body.student_name,
        student_phone=body.student_phone,
        student_address=body.student_address,
        quantity=body.quantity,
        payment_method=body.payment_method,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _placed_response(order_id)


@order_router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(body: CheckoutRequest) -> CheckoutResponse:
    command = Checkout(
        student_id=body.student_id,
        student_address=body.student_address,
        payment_method=body.payment_method,
    )
    order_ids = current_domain.process(command, asynchronous=False)
    return CheckoutResponse(orders=[_placed_response(order_id) for order_id in order_ids])


@order_router.get("", response_model=list[OrderResponse])
async def orders_by_phone(phone: str | None = None) -> list[OrderResponse]:
    if not phone:
        raise ValidationError({"phone": ["Phone required"]})
    orders = current_domain.repository_for(Order).find_for_student_phone(phone)
    return [order_response(order) for order in orders]


@order_router.get("/student/{student_id}", response_model=list[OrderResponse])
async def orders_for_student(student_id: str) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).find_for_student(student_id)
    return [order_response(order) for order in orders]


@order_router.get("/shop/{shop_id}", response_model=list[OrderResponse])
async def orders_for_shop(shop_id: str, status: str | None = None) -> list[OrderResponse]:
    """Without ``status``, delivered orders are left out of the shop's working list."""
    orders = current_domain.repository_for(Order).find_for_shop(shop_id, status=status)
    return [order_response(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return order_response(current_domain.repository_for(Order).get(order_id))


@order_router.put("/{order_id}", response_model=StatusResponse)
@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status, shop_id=body.shop_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/cancel", response_model=StatusResponse)
async def cancel_order(order_id: str, body: CancelOrderRequest | None = None) -> StatusResponse:
    student_id = body.student_id if body else None
    current_domain.process(CancelOrder(order_id=order_id, student_id=student_id), asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/transaction", response_model=StatusResponse)
async def attach_transaction(order_id: str, body: AttachTransactionRequest) -> StatusResponse:
    command = AttachTransaction(order_id=order_id, transaction_id=body.transaction_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/pay", response_model=StatusResponse)
async def mark_paid(order_id: str) -> StatusResponse:
    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/add", response_model=StatusResponse)
async def add_to_cart(body: CartLineRequest) -> StatusResponse:
    command = AddToCart(student_id=body.student_id, book_id=body.book_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.get("/{student_id}", response_model=CartResponse)
async def get_cart(student_id: str) -> CartResponse:
    return CartResponse(**cart_summary(student_id))


@cart_router.put("/update", response_model=StatusResponse)
async def update_cart(body: CartLineRequest) -> StatusResponse:
    command = UpdateCartQuantity(student_id=body.student_id, book_id=body.book_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/remove", response_model=StatusResponse)
async def remove_from_cart(student_id: str, book_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(student_id=student_id, book_id=book_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/clear/{student_id}", response_model=StatusResponse)
async def clear_cart(student_id: str) -> StatusResponse:
    current_domain.process(ClearCart(student_id=student_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Wishlist
# ---------------------------------------------------------------------------
wishlist_router = APIRouter(prefix="/wishlists", tags=["wishlists"])


@wishlist_router.post("", status_code=201, response_model=StatusResponse)
async def add_to_wishlist(body: WishlistRequest) -> StatusResponse:
    current_domain.process(AddToWishlist(student_id=body.student_id, book_id=body.book_id), asynchronous=False)
    return StatusResponse()


@wishlist_router.delete("", response_model=StatusResponse)
async def remove_from_wishlist(student_id: str, book_id: str) -> StatusResponse:
    command = RemoveFromWishlist(student_id=student_id, book_id=book_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@wishlist_router.get("/{student_id}", response_model=list[WishlistEntryResponse])
async def get_wishlist(student_id: str) -> list[WishlistEntryResponse]:
    return [WishlistEntryResponse(**row) for row in wishlist_for(student_id)]
