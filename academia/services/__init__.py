"""
Services module containing the university registry.
"""

from .university_manager import UniversityManager

__all__ = [
    "UniversityManager",
]
