"""
Academia: an in-memory academic records manager.

Tracks students, teachers and courses together with student enrollment and
teacher assignment, and keeps both sides of every relationship consistent.
"""

__version__ = "1.0.0"
__author__ = "Academia Development Team"
__description__ = "In-memory academic records manager"
