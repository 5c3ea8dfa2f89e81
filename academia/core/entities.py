"""
Core entities for the Academia records manager.

Students and teachers share the identity fields of ``Person``. Enrollment
(Student <-> Course) and assignment (Teacher <-> Course) are always written on
both sides in a single step by the link helpers at the bottom of this module,
whichever entity the call starts from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .enums import EntityKind, PersonType
from .exceptions import NullReferenceError
from .validation import validate_course, validate_person, validate_specialization


@dataclass(frozen=True)
class EntityId:
    """Type-qualified identifier.

    Student and teacher ids are drawn from separate counters and may be
    numerically equal; the kind keeps them apart.
    """
    kind: EntityKind
    value: Union[int, str]

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


class AbstractEntity(ABC):
    """Base abstract entity identified by a type-qualified key."""

    @property
    @abstractmethod
    def key(self) -> EntityId:
        """Get the type-qualified identifier."""

    @abstractmethod
    def display_info(self) -> str:
        """Render the entity for the operator."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {'key': str(self.key)}

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.key})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!s})"


class Person(AbstractEntity):
    """Abstract base class for students and teachers."""

    def __init__(self, entity_id: int, name: str, age: int, email: str, phone: str):
        validate_person(name, age, email, phone)
        self._id = entity_id
        self._name = name
        self._age = age
        self._email = email
        self._phone = phone
        self._courses: List['Course'] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    @property
    @abstractmethod
    def person_type(self) -> PersonType:
        """Get the person type."""

    @property
    def key(self) -> EntityId:
        return EntityId(EntityKind(self.person_type.value), self._id)

    def _contact_line(self) -> str:
        return f"Age: {self._age}, Email: {self._email}, Phone: {self._phone}"

    def _format_courses(self, title: str, empty: str) -> str:
        lines = [f"{title} {self._name}:"]
        if not self._courses:
            lines.append(empty)
        lines.extend(f"- {course.course_name} ({course.course_code})" for course in self._courses)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'id': self._id,
            'person_type': self.person_type.value,
            'name': self._name,
            'age': self._age,
            'email': self._email,
            'phone': self._phone,
            'courses': [course.course_code for course in self._courses],
        })
        return base_dict


class Student(Person):
    """Student entity owning its list of enrolled courses."""

    @property
    def person_type(self) -> PersonType:
        return PersonType.STUDENT

    def enroll_in_course(self, course: 'Course') -> bool:
        """Enroll in a course.

        Returns False when already enrolled; the call is then a no-op.
        """
        if course is None:
            raise NullReferenceError("course")
        return _link_enrollment(self, course)

    def get_enrolled_courses(self) -> List['Course']:
        """Get a copy of the enrolled courses in enrollment order."""
        return self._courses.copy()

    def display_enrolled_courses(self) -> str:
        return self._format_courses("Courses of student", "No enrolled courses")

    def display_info(self) -> str:
        return "\n".join([
            f"Student: {self._name} (ID: {self._id})",
            self._contact_line(),
            f"Enrolled courses: {len(self._courses)}",
        ])


class Teacher(Person):
    """Teacher entity owning its list of taught courses."""

    def __init__(self, entity_id: int, name: str, age: int, email: str, phone: str,
                 specialization: str):
        super().__init__(entity_id, name, age, email, phone)
        validate_specialization(specialization)
        self._specialization = specialization

    @property
    def person_type(self) -> PersonType:
        return PersonType.TEACHER

    @property
    def specialization(self) -> str:
        return self._specialization

    def assign_to_course(self, course: 'Course') -> bool:
        """Become the instructor of a course.

        Any previous instructor loses the course. Returns False when this
        teacher already teaches it.
        """
        if course is None:
            raise NullReferenceError("course")
        return _link_assignment(self, course)

    def get_taught_courses(self) -> List['Course']:
        """Get a copy of the taught courses in assignment order."""
        return self._courses.copy()

    def display_taught_courses(self) -> str:
        return self._format_courses("Courses of teacher", "No taught courses")

    def display_info(self) -> str:
        return "\n".join([
            f"Teacher: {self._name} (ID: {self._id})",
            f"Specialization: {self._specialization}",
            self._contact_line(),
            f"Taught courses: {len(self._courses)}",
        ])

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict['specialization'] = self._specialization
        return base_dict


class Course(AbstractEntity):
    """Course entity with at most one instructor and its enrolled students."""

    def __init__(self, course_code: str, course_name: str, description: Optional[str], credits: int):
        validate_course(course_code, course_name, credits, description)
        self._course_code = course_code
        self._course_name = course_name
        self._description = description or ""
        self._credits = credits
        self._instructor: Optional[Teacher] = None
        self._students: List[Student] = []

    @property
    def course_code(self) -> str:
        return self._course_code

    @property
    def course_name(self) -> str:
        return self._course_name

    @property
    def description(self) -> str:
        return self._description

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def instructor(self) -> Optional[Teacher]:
        return self._instructor

    @property
    def key(self) -> EntityId:
        return EntityId(EntityKind.COURSE, self._course_code)

    def has_instructor(self) -> bool:
        return self._instructor is not None

    def enroll_student(self, student: Student) -> bool:
        """Enroll a student; the student's course list is updated too."""
        if student is None:
            raise NullReferenceError("student")
        return _link_enrollment(student, self)

    def get_enrolled_students(self) -> List[Student]:
        """Get a copy of the enrolled students in enrollment order."""
        return self._students.copy()

    def display_enrolled_students(self) -> str:
        lines = [f"Students of course {self._course_name} ({self._course_code}):"]
        if not self._students:
            lines.append("No enrolled students")
        lines.extend(f"- {student.name} (ID: {student.id})" for student in self._students)
        return "\n".join(lines)

    def display_info(self) -> str:
        instructor = self._instructor.name if self._instructor else "not assigned"
        lines = [f"Course: {self._course_name} ({self._course_code})"]
        if self._description:
            lines.append(f"Description: {self._description}")
        lines.extend([
            f"Credits: {self._credits}",
            f"Instructor: {instructor}",
            f"Enrolled students: {len(self._students)}",
        ])
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'course_code': self._course_code,
            'course_name': self._course_name,
            'description': self._description,
            'credits': self._credits,
            'instructor': self._instructor.id if self._instructor else None,
            'students': [student.id for student in self._students],
        })
        return base_dict


def _link_enrollment(student: Student, course: Course) -> bool:
    if course in student._courses and student in course._students:
        return False
    if course not in student._courses:
        student._courses.append(course)
    if student not in course._students:
        course._students.append(student)
    return True


def _link_assignment(teacher: Teacher, course: Course) -> bool:
    previous = course._instructor
    if previous is teacher and course in teacher._courses:
        return False
    if previous is not None and previous is not teacher and course in previous._courses:
        previous._courses.remove(course)
    course._instructor = teacher
    if course not in teacher._courses:
        teacher._courses.append(course)
    return True
