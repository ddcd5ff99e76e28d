"""Admin listings: shops with ratings, students, orders and cities."""

from protean.utils.globals import current_domain

from bookmarket.order.order import Order
from bookmarket.review.ratings import RatingSummary, rating_summaries
from bookmarket.review.review import TargetType
from bookmarket.shop.shop import Shop
from bookmarket.student.student import Student


def list_shops() -> list[dict]:
    ratings = rating_summaries(TargetType.SHOP.value)
    unrated = RatingSummary(average=0.0, count=0)
    rows = []
    for shop in current_domain.repository_for(Shop).find_all():
        rating = ratings.get(str(shop.id), unrated)
        rows.append(
            {
                "id": str(shop.id),
                "shop_name": shop.shop_name,
                "owner_name": shop.owner_name,
                "phone": shop.phone,
                "city": shop.city,
                "verified": shop.verified,
                "admin_note": shop.admin_note,
                "created_at": shop.created_at,
                "avg_rating": rating.average,
                "review_count": rating.count,
            }
        )
    return rows


def list_students() -> list[dict]:
    return [
        {
            "id": str(student.id),
            "student_name": student.name,
            "phone": student.phone,
            "grade": student.grade,
        }
        for student in current_domain.repository_for(Student).find_all()
    ]


def list_orders() -> list[Order]:
    return current_domain.repository_for(Order).find_all()


def list_cities() -> list[str]:
    cities = {shop.city for shop in current_domain.repository_for(Shop).find_all() if shop.city}
    return sorted(cities)
