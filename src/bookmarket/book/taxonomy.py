"""Grade and subject lookups that drive the catalogue filters.

Grades 9–12 come with a built-in subject list per stream. Grades that only
exist because a shop listed a book under them fall back to the subjects
actually in the catalogue for that grade.
"""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookmarket.book.book import Book

_JUNIOR_STREAMS = {
    "Science": ["English", "Math", "Science", "Social Studies"],
    "Commerce": ["English", "Math", "Business Studies"],
}
_SENIOR_STREAMS = {
    "Science": ["Physics", "Chemistry", "Biology", "Math", "English"],
    "Commerce": ["Accounts", "Economics", "Business Studies", "English"],
}

TAXONOMY = {
    "9": _JUNIOR_STREAMS,
    "10": _JUNIOR_STREAMS,
    "11": _SENIOR_STREAMS,
    "12": _SENIOR_STREAMS,
}

DEFAULT_GRADES = ["9", "10", "11", "12"]
DEFAULT_SUBJECTS = ["English", "Math", "Science", "Social Studies"]


def _unique(values):
    return list(dict.fromkeys(v for v in values if v))


def list_grades() -> list[str]:
    """Built-in grades first, then any extra grades shops have listed books under."""
    books = current_domain.repository_for(Book).find_all()
    catalogue_grades = sorted({b.grade for b in books if b.grade})
    return _unique([*TAXONOMY.keys(), *catalogue_grades]) or list(DEFAULT_GRADES)


def list_subjects(grade: str | None) -> list[str]:
    if not grade:
        raise ValidationError({"grade": ["Grade required"]})

    streams = TAXONOMY.get(grade)
    if streams:
        return _unique(subject for subjects in streams.values() for subject in subjects)

    books = current_domain.repository_for(Book).find_by_grade(grade)
    subjects = sorted({b.subject for b in books if b.subject})
    return subjects or list(DEFAULT_SUBJECTS)
