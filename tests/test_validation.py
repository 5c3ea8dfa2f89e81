"""Tests for field validation."""

import pytest

from academia.core import Course, Student, Teacher, ValidationError
from academia.core.validation import validate_course, validate_person


@pytest.mark.parametrize("age", [1, 20, 120])
def test_valid_person_ages(age):
    validate_person("Ana", age, "a@x.com", "555")


@pytest.mark.parametrize(
    "name, age, email, phone, field",
    [
        ("", 20, "a@x.com", "555", "name"),
        ("   ", 20, "a@x.com", "555", "name"),
        ("Ana", 0, "a@x.com", "555", "age"),
        ("Ana", 121, "a@x.com", "555", "age"),
        ("Ana", -5, "a@x.com", "555", "age"),
        ("Ana", "20", "a@x.com", "555", "age"),
        ("Ana", True, "a@x.com", "555", "age"),
        ("Ana", 20, "", "555", "email"),
        ("Ana", 20, "ax.com", "555", "email"),
        ("Ana", 20, "a@x.com", " ", "phone"),
        (None, 20, "a@x.com", "555", "name"),
    ],
)
def test_invalid_person_fields(name, age, email, phone, field):
    with pytest.raises(ValidationError) as exc_info:
        validate_person(name, age, email, phone)
    assert exc_info.value.details["field"] == field
    assert exc_info.value.error_code == "validation_error"


def test_name_checked_before_age():
    with pytest.raises(ValidationError) as exc_info:
        Student(1, "", 500, "bad", "")
    assert exc_info.value.details["field"] == "name"


def test_teacher_requires_specialization():
    with pytest.raises(ValidationError) as exc_info:
        Teacher(1, "Turing", 41, "t@x.com", "557", "  ")
    assert exc_info.value.details["field"] == "specialization"


@pytest.mark.parametrize("credits", [1, 10])
def test_valid_credit_bounds(credits):
    validate_course("CS101", "Algorithms", credits)


@pytest.mark.parametrize(
    "code, name, credits, field",
    [
        ("", "Algorithms", 4, "course_code"),
        ("CS101", " ", 4, "course_name"),
        ("CS101", "Algorithms", 0, "credits"),
        ("CS101", "Algorithms", 11, "credits"),
    ],
)
def test_invalid_course_fields(code, name, credits, field):
    with pytest.raises(ValidationError) as exc_info:
        Course(code, name, "", credits)
    assert exc_info.value.details["field"] == field


def test_course_description_defaults_to_empty():
    assert Course("CS101", "Algorithms", None, 4).description == ""


@pytest.mark.parametrize("description", [5, ["intro"], b"text"])
def test_course_description_must_be_text(description):
    with pytest.raises(ValidationError) as exc_info:
        Course("CS101", "Algorithms", description, 4)
    assert exc_info.value.details["field"] == "description"


def test_invalid_description_is_not_stored(manager):
    with pytest.raises(ValidationError):
        manager.create_course("CS101", "Algorithms", 5, 4)
    assert not manager.course_exists("CS101")
