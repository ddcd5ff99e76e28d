"""Cart aggregate (CQRS): one per student, a staging area for checkout.

Lines are keyed by book: a book appears at most once, and adding it again
replaces the quantity rather than adding to it. Prices are not stored on the
cart; they are read from the book at checkout time.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from bookmarket.cart.events import CartCheckedOut, CartLineRemoved, CartLineSet
from bookmarket.domain import bookmarket


@bookmarket.entity(part_of="Cart")
class CartLine:
    book_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@bookmarket.aggregate
class Cart:
    student_id = Identifier(required=True, unique=True)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def open_for(cls, student_id):
        now = datetime.now(UTC)
        return cls(student_id=student_id, created_at=now, updated_at=now)

    def line_for(self, book_id) -> CartLine | None:
        return next((line for line in self.lines if str(line.book_id) == str(book_id)), None)

    def is_empty(self) -> bool:
        return not self.lines

    def set_line(self, book_id, quantity):
        """Put ``book_id`` in the cart with exactly ``quantity`` copies."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        line = self.line_for(book_id)
        if line is None:
            self.add_lines(CartLine(book_id=book_id, quantity=quantity, added_at=now))
        else:
            line.quantity = quantity
        self.updated_at = now

        self.raise_(
            CartLineSet(
                cart_id=str(self.id),
                student_id=str(self.student_id),
                book_id=str(book_id),
                quantity=quantity,
            )
        )

    def update_quantity(self, book_id, quantity):
        if self.line_for(book_id) is None:
            raise ValidationError({"book_id": ["Book is not in the cart"]})
        self.set_line(book_id, quantity)

    def remove_book(self, book_id):
        """Drop the line for ``book_id``. Removing an absent book is a no-op."""
        line = self.line_for(book_id)
        if line is None:
            return

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartLineRemoved(
                cart_id=str(self.id),
                student_id=str(self.student_id),
                book_id=str(book_id),
            )
        )

    def clear(self):
        for line in list(self.lines):
            self.remove_lines(line)
        self.updated_at = datetime.now(UTC)

    def mark_checked_out(self, order_ids):
        self.clear()
        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                student_id=str(self.student_id),
                order_ids=json.dumps([str(order_id) for order_id in order_ids]),
            )
        )
