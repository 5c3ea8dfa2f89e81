"""
Core module containing the entity model, validation and exceptions.
"""

from .entities import *
from .exceptions import *
from .enums import *
from .validation import validate_course, validate_person, validate_specialization

__all__ = [
    # Entities
    "AbstractEntity",
    "EntityId",
    "Person",
    "Student",
    "Teacher",
    "Course",
    
    # Enums
    "EntityKind",
    "PersonType",
    
    # Validation
    "validate_person",
    "validate_specialization",
    "validate_course",
    
    # Exceptions
    "AcademiaException",
    "ValidationError",
    "NullReferenceError",
    "NotFoundError",
    "ConfigurationError",
]
