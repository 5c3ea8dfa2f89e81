"""
Field validation shared by every person and course constructor.

All checks run once, when a record is built. A failing check raises
``ValidationError`` before any state is touched.
"""

from typing import Any

from .enums import MIN_AGE, MAX_AGE, MIN_CREDITS, MAX_CREDITS
from .exceptions import ValidationError


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_text(value: Any, field: str, label: str) -> str:
    """Reject empty or all-whitespace text."""
    if _is_blank(value):
        raise ValidationError(f"{label} must not be empty", field=field)
    return value


def require_range(value: Any, low: int, high: int, field: str, label: str) -> int:
    """Reject non-integers and integers outside ``[low, high]``."""
    if not _is_int(value) or not low <= value <= high:
        raise ValidationError(f"{label} must be between {low} and {high}", field=field)
    return value


def require_email(value: Any) -> str:
    if _is_blank(value) or "@" not in value:
        raise ValidationError("Invalid email address", field="email")
    return value


def validate_person(name: Any, age: Any, email: Any, phone: Any) -> None:
    """Validate the identity fields shared by students and teachers."""
    require_text(name, "name", "Name")
    require_range(age, MIN_AGE, MAX_AGE, "age", "Age")
    require_email(email)
    require_text(phone, "phone", "Phone")


def validate_specialization(specialization: Any) -> None:
    require_text(specialization, "specialization", "Specialization")


def validate_course(course_code: Any, course_name: Any, credits: Any, description: Any = None) -> None:
    """Validate the fields of a course record. The description may be absent or empty."""
    require_text(course_code, "course_code", "Course code")
    require_text(course_name, "course_name", "Course name")
    require_range(credits, MIN_CREDITS, MAX_CREDITS, "credits", "Credits")
    if description is not None and not isinstance(description, str):
        raise ValidationError("Description must be text", field="description")
