"""Shared fixtures."""

import logging

import pytest

from academia.services import UniversityManager
from academia.utils.logger import logger


@pytest.fixture
def manager():
    return UniversityManager()


@pytest.fixture
def populated(manager):
    """Registry with two students, two teachers and two courses."""
    manager.add_student("Ana", 20, "a@x.com", "555")
    manager.add_student("Ben", 22, "b@x.com", "556")
    manager.add_teacher("Turing", 41, "t@x.com", "557", "Computer Science")
    manager.add_teacher("Noether", 45, "n@x.com", "558", "Mathematics")
    manager.create_course("CS101", "Algorithms", "", 4)
    manager.create_course("MATH101", "Calculus", "Limits and derivatives", 3)
    return manager


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop console handlers bound to a test's captured stream."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
