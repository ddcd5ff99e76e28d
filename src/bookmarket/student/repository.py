"""Repository for the Student aggregate."""

from bookmarket.domain import bookmarket
from bookmarket.student.student import Student


@bookmarket.repository(part_of=Student)
class StudentRepository:
    def find_by_phone(self, phone: str) -> Student | None:
        students = self._dao.query.filter(phone=phone).all().items
        return students[0] if students else None

    def find_all(self) -> list[Student]:
        return self._dao.query.order_by("-created_at").limit(None).all().items
