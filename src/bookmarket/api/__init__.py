from bookmarket.api.accounts import student_router
from bookmarket.api.admin import admin_auth_router, admin_router
from bookmarket.api.catalogue import book_router, shop_router, taxonomy_router
from bookmarket.api.community import notification_router, review_router
from bookmarket.api.errors import register_exception_handlers
from bookmarket.api.ordering import cart_router, order_router, wishlist_router

ROUTERS = [
    book_router,
    taxonomy_router,
    shop_router,
    student_router,
    order_router,
    cart_router,
    wishlist_router,
    review_router,
    notification_router,
    admin_auth_router,
    admin_router,
]

__all__ = [
    "ROUTERS",
    "admin_auth_router",
    "admin_router",
    "book_router",
    "cart_router",
    "notification_router",
    "order_router",
    "register_exception_handlers",
    "review_router",
    "shop_router",
    "student_router",
    "taxonomy_router",
    "wishlist_router",
]
