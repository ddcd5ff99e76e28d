"""Student login."""

from protean.utils.globals import current_domain

from bookmarket.exceptions import Unauthorized
from bookmarket.student.student import Student


def authenticate_student(phone: str, password: str) -> Student:
    student = current_domain.repository_for(Student).find_by_phone(phone)
    if student is None or not student.check_password(password):
        raise Unauthorized({"credentials": ["Invalid credentials"]})
    return student
