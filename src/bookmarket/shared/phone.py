"""Phone number format shared by students and shops."""

import re

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


def is_valid_phone(number: str | None) -> bool:
    """Digits, spaces, hyphens, parentheses and an optional leading +, with at least one digit."""
    if not number:
        return False
    return bool(re.search(r"\d", number)) and bool(_PHONE_PATTERN.match(number))
