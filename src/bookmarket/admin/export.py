"""CSV exports of the admin listings."""

import csv
import io

from bookmarket.admin.directory import list_orders, list_shops

SHOP_COLUMNS = (
    "id",
    "shop_name",
    "owner_name",
    "phone",
    "city",
    "verified",
    "admin_note",
    "avg_rating",
    "review_count",
    "created_at",
)

ORDER_COLUMNS = (
    "order_code",
    "created_at",
    "book_name",
    "shop_id",
    "student_name",
    "student_phone",
    "student_address",
    "quantity",
    "total_price",
    "status",
    "payment_method",
    "payment_status",
    "transaction_id",
)


def _to_csv(columns, rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(columns)
    for row in rows:
        writer.writerow(["" if row.get(column) is None else row[column] for column in columns])
    return buffer.getvalue()


def shops_csv() -> str:
    return _to_csv(SHOP_COLUMNS, list_shops())


def orders_csv() -> str:
    """Every order, newest first, one line each."""
    rows = [{column: getattr(order, column) for column in ORDER_COLUMNS} for order in list_orders()]
    return _to_csv(ORDER_COLUMNS, rows)
