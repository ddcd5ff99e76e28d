"""Repository for the Order aggregate."""

from bookmarket.domain import bookmarket
from bookmarket.order.order import Order, OrderStatus


@bookmarket.repository(part_of=Order)
class OrderRepository:
    def find_by_code(self, order_code: str) -> Order | None:
        orders = self._dao.query.filter(order_code=order_code).all().items
        return orders[0] if orders else None

    def find_for_student_phone(self, phone: str) -> list[Order]:
        return self._dao.query.filter(student_phone=phone).order_by("-created_at").limit(None).all().items

    def find_for_student(self, student_id: str) -> list[Order]:
        return self._dao.query.filter(student_id=str(student_id)).order_by("-created_at").limit(None).all().items

    def find_for_shop(self, shop_id: str, status: str | None = None) -> list[Order]:
        """Orders for a shop, newest first. Without ``status``, delivered orders are left out."""
        query = self._dao.query.filter(shop_id=str(shop_id))
        if status:
            query = query.filter(status=status)
        else:
            query = query.exclude(status=OrderStatus.DELIVERED.value)
        return query.order_by("-created_at").limit(None).all().items

    def find_all(self) -> list[Order]:
        return self._dao.query.order_by("-created_at").limit(None).all().items

    def find_all_for_shop(self, shop_id: str) -> list[Order]:
        return self._dao.query.filter(shop_id=str(shop_id)).limit(None).all().items

    def has_live_order(self, shop_id: str, student_id: str) -> bool:
        """True when the student has any non-cancelled order with the shop."""
        live = (
            self._dao.query.filter(shop_id=str(shop_id), student_id=str(student_id))
            .exclude(status=OrderStatus.CANCELLED.value)
            .limit(1)
            .all()
        )
        return bool(live.items)
