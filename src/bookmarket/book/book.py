"""Book aggregate (CQRS): one listing in one shop's inventory.

Stock is the number of copies on hand. It only moves through
``withdraw_one`` (an order took a copy) and ``restock_one`` (a rejected order
gave it back), plus explicit edits by the owning shop. It never goes below
zero: ``withdraw_one`` refuses at zero instead of clamping.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from bookmarket.book.events import BookListed, BookSoldOut
from bookmarket.domain import bookmarket
from bookmarket.exceptions import OutOfStock


class BookCondition(Enum):
    NEW = "new"
    USED = "used"


@bookmarket.aggregate
class Book:
    shop_id = Identifier(required=True)
    book_name = String(required=True, max_length=255)
    edition = String(max_length=100)
    subject = String(max_length=100)
    grade = String(max_length=20)
    price = Float(required=True)
    condition = String(choices=BookCondition, default=BookCondition.NEW.value)
    stock = Integer(default=1)
    cover_url = String(max_length=500)
    created_at = DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is None or self.price <= 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is None or self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @classmethod
    def list_for_sale(cls, shop_id, book_name, price, edition=None, subject=None, grade=None,
                      condition=None, stock=1, cover_url=None):
        now = datetime.now(UTC)
        book = cls(
            shop_id=shop_id,
            book_name=book_name,
            edition=edition,
            subject=subject,
            grade=grade,
            price=price,
            condition=condition or BookCondition.NEW.value,
            stock=stock if stock is not None else 1,
            cover_url=cover_url,
            created_at=now,
        )
        book.raise_(
            BookListed(
                book_id=str(book.id),
                shop_id=str(shop_id),
                book_name=book_name,
                price=price,
                stock=book.stock,
                listed_at=now,
            )
        )
        return book

    def is_owned_by(self, shop_id) -> bool:
        return str(self.shop_id) == str(shop_id)

    def in_stock(self) -> bool:
        return self.stock > 0

    def revise(self, **changes):
        """Apply listing edits from the owning shop; ``None`` values are skipped."""
        for field in ("book_name", "edition", "subject", "grade", "price", "condition", "stock", "cover_url"):
            value = changes.get(field)
            if value is not None:
                setattr(self, field, value)

    def withdraw_one(self):
        """Take one copy off the shelf for an order."""
        if self.stock <= 0:
            raise OutOfStock({"stock": [f"'{self.book_name}' is out of stock"]})

        self.stock -= 1
        if self.stock == 0:
            self.raise_(BookSoldOut(book_id=str(self.id), shop_id=str(self.shop_id), book_name=self.book_name))

    def restock_one(self):
        self.stock += 1
