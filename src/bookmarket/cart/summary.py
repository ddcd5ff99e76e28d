"""Read-side view of a student's cart with current prices and availability."""

from protean.utils.globals import current_domain

from bookmarket.book.book import Book
from bookmarket.cart.cart import Cart
from bookmarket.shop.shop import Shop


def cart_summary(student_id: str) -> dict:
    """Lines priced from the live catalogue; books removed since adding show as unavailable."""
    cart = current_domain.repository_for(Cart).find_for_student(student_id)
    lines = list(cart.lines) if cart else []

    books = current_domain.repository_for(Book).find_by_ids(line.book_id for line in lines)
    shop_names = {}

    rows = []
    for line in lines:
        book = books.get(str(line.book_id))
        if book is None:
            rows.append({"book_id": str(line.book_id), "quantity": line.quantity, "available": False})
            continue

        shop_id = str(book.shop_id)
        if shop_id not in shop_names:
            shops = current_domain.repository_for(Shop)._dao.query.filter(id=shop_id).all().items
            shop_names[shop_id] = shops[0].shop_name if shops else None

        rows.append(
            {
                "book_id": str(book.id),
                "quantity": line.quantity,
                "book_name": book.book_name,
                "price": book.price,
                "stock": book.stock,
                "shop_id": shop_id,
                "shop_name": shop_names[shop_id],
                "line_total": round(book.price * line.quantity, 2),
                "available": book.in_stock(),
            }
        )

    return {
        "student_id": str(student_id),
        "lines": rows,
        "total": round(sum(row.get("line_total") or 0 for row in rows), 2),
    }
