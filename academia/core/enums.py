"""
Enumerations and constants for the Academia records manager.
"""

from enum import Enum


class EntityKind(Enum):
    """Kinds of records held by the registry."""
    STUDENT = "student"
    TEACHER = "teacher"
    COURSE = "course"


class PersonType(Enum):
    """Types of persons in the system."""
    STUDENT = "student"
    TEACHER = "teacher"


MIN_AGE = 1
MAX_AGE = 120
MIN_CREDITS = 1
MAX_CREDITS = 10
