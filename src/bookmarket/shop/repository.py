"""Repository for the Shop aggregate."""

from bookmarket.domain import bookmarket
from bookmarket.shop.shop import Shop


@bookmarket.repository(part_of=Shop)
class ShopRepository:
    def find_by_phone(self, phone: str) -> Shop | None:
        shops = self._dao.query.filter(phone=phone).all().items
        return shops[0] if shops else None

    def find_all(self) -> list[Shop]:
        return self._dao.query.order_by("-created_at").limit(None).all().items

    def find_verified(self) -> list[Shop]:
        return self._dao.query.filter(verified=True).limit(None).all().items
