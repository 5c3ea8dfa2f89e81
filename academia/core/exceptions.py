"""
Custom exceptions for the Academia records manager.
"""

from typing import Optional, Any, Dict


class AcademiaException(Exception):
    """Base exception for all Academia-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(AcademiaException):
    """Raised when an entity field fails validation at construction."""
    
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, error_code=kwargs.pop("error_code", "validation_error"), **kwargs)
        if field is not None:
            self.details.setdefault("field", field)


class NullReferenceError(AcademiaException):
    """Raised when a relationship operation receives an absent entity."""
    
    def __init__(self, argument: str, **kwargs):
        super().__init__(f"{argument} must not be None", error_code="null_reference", **kwargs)
        self.details.setdefault("argument", argument)


class NotFoundError(AcademiaException):
    """Raised when a lookup by id or code yields no match."""
    
    def __init__(self, entity: str, key: Any, **kwargs):
        label = "code" if entity == "course" else "ID"
        super().__init__(f"{entity.capitalize()} with {label} {key} not found",
                         error_code="not_found", **kwargs)
        self.details.setdefault("entity", entity)
        self.details.setdefault("key", key)

    @property
    def entity(self) -> str:
        return self.details["entity"]


class ConfigurationError(AcademiaException):
    """Raised when configuration is invalid."""
    pass
