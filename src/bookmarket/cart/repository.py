"""Repository for the Cart aggregate."""

from bookmarket.cart.cart import Cart
from bookmarket.domain import bookmarket


@bookmarket.repository(part_of=Cart)
class CartRepository:
    def find_for_student(self, student_id: str) -> Cart | None:
        carts = self._dao.query.filter(student_id=str(student_id)).all().items
        return carts[0] if carts else None

    def find_containing(self, book_id: str) -> list[Cart]:
        # Lines live inside the cart aggregate, so the match happens after loading
        carts = self._dao.query.limit(None).all().items
        return [cart for cart in carts if cart.line_for(book_id) is not None]
