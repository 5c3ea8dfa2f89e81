"""
API module for the REST adapter.
"""

from .rest_api import AcademiaRestAPI

__all__ = [
    "AcademiaRestAPI",
]
