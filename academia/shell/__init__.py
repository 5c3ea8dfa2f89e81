"""
Interactive text menu.
"""

from .menu import MenuShell

__all__ = [
    "MenuShell",
]
