"""Domain events for the Book aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bookmarket.domain import bookmarket


@bookmarket.event(part_of="Book")
class BookListed:
    """A shop put a new title up for sale."""

    __version__ = 1

    book_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    book_name = String(required=True)
    price = Float(required=True)
    stock = Integer(required=True)
    listed_at = DateTime(required=True)


@bookmarket.event(part_of="Book")
class BookSoldOut:
    """The last copy of a book was sold."""

    __version__ = 1

    book_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    book_name = String(required=True)
