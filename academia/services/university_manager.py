"""
University registry owning every student, teacher and course record.
"""

import threading
from typing import Any, Dict, List, Optional

from ..core.entities import Course, Student, Teacher
from ..core.exceptions import NotFoundError, ValidationError
from ..utils.logger import logger


class UniversityManager:
    """Single owner of the entity collections and of id assignment.

    Student and teacher ids come from two independent counters starting at 1.
    A counter only advances once the record has been built and stored.
    Enrollment and assignment run as one step under the registry lock so the
    two sides of a relationship are never observed half-updated.
    """

    def __init__(self):
        self._students: List[Student] = []
        self._teachers: List[Teacher] = []
        self._courses: List[Course] = []
        self._next_student_id = 1
        self._next_teacher_id = 1
        self._lock = threading.RLock()

    # Factories

    def add_student(self, name: str, age: int, email: str, phone: str) -> Student:
        """Create, validate and store a student."""
        with self._lock:
            try:
                student = Student(self._next_student_id, name, age, email, phone)
            except ValidationError as e:
                logger.warning(f"Rejected student {name!r}: {e.message}")
                raise
            self._students.append(student)
            self._next_student_id += 1
            logger.info(f"Added student {student.name} (ID: {student.id})")
            return student

    def add_teacher(self, name: str, age: int, email: str, phone: str,
                    specialization: str) -> Teacher:
        """Create, validate and store a teacher."""
        with self._lock:
            try:
                teacher = Teacher(self._next_teacher_id, name, age, email, phone, specialization)
            except ValidationError as e:
                logger.warning(f"Rejected teacher {name!r}: {e.message}")
                raise
            self._teachers.append(teacher)
            self._next_teacher_id += 1
            logger.info(f"Added teacher {teacher.name} (ID: {teacher.id})")
            return teacher

    def create_course(self, course_code: str, course_name: str, description: Optional[str],
                      credits: int) -> Course:
        """Create, validate and store a course.

        Course codes are not required to be unique; lookups resolve to the
        first course stored under a code.
        """
        with self._lock:
            try:
                course = Course(course_code, course_name, description, credits)
            except ValidationError as e:
                logger.warning(f"Rejected course {course_code!r}: {e.message}")
                raise
            if self.find_course(course_code) is not None:
                logger.warning(f"Course code {course_code} already exists; lookups keep the first one")
            self._courses.append(course)
            logger.info(f"Created course {course.course_name} ({course.course_code})")
            return course

    # Relationships

    def enroll_student_in_course(self, student_id: int, course_code: str) -> bool:
        """Enroll a student in a course.

        Returns False when the student was already enrolled.
        """
        with self._lock:
            student = self.get_student(student_id)
            course = self.get_course(course_code)
            enrolled = student.enroll_in_course(course)
            if enrolled:
                logger.info(f"Enrolled student {student.id} in {course.course_code}")
            else:
                logger.debug(f"Student {student.id} already enrolled in {course.course_code}")
            return enrolled

    def assign_teacher_to_course(self, teacher_id: int, course_code: str) -> bool:
        """Make a teacher the instructor of a course, replacing any previous one.

        Returns False when the teacher already teaches the course.
        """
        with self._lock:
            teacher = self.get_teacher(teacher_id)
            course = self.get_course(course_code)
            previous = course.instructor
            assigned = teacher.assign_to_course(course)
            if not assigned:
                logger.debug(f"Teacher {teacher.id} already assigned to {course.course_code}")
            elif previous is not None:
                logger.info(f"Reassigned {course.course_code} from teacher {previous.id} to teacher {teacher.id}")
            else:
                logger.info(f"Assigned teacher {teacher.id} to {course.course_code}")
            return assigned

    # Lookups

    def find_student(self, student_id: int) -> Optional[Student]:
        with self._lock:
            return next((s for s in self._students if s.id == student_id), None)

    def find_teacher(self, teacher_id: int) -> Optional[Teacher]:
        with self._lock:
            return next((t for t in self._teachers if t.id == teacher_id), None)

    def find_course(self, course_code: str) -> Optional[Course]:
        """Find the first course stored under an exact, case-sensitive code."""
        with self._lock:
            return next((c for c in self._courses if c.course_code == course_code), None)

    def get_student(self, student_id: int) -> Student:
        student = self.find_student(student_id)
        if student is None:
            logger.warning(f"Student {student_id} not found")
            raise NotFoundError("student", student_id)
        return student

    def get_teacher(self, teacher_id: int) -> Teacher:
        teacher = self.find_teacher(teacher_id)
        if teacher is None:
            logger.warning(f"Teacher {teacher_id} not found")
            raise NotFoundError("teacher", teacher_id)
        return teacher

    def get_course(self, course_code: str) -> Course:
        course = self.find_course(course_code)
        if course is None:
            logger.warning(f"Course {course_code} not found")
            raise NotFoundError("course", course_code)
        return course

    def student_exists(self, student_id: int) -> bool:
        return self.find_student(student_id) is not None

    def teacher_exists(self, teacher_id: int) -> bool:
        return self.find_teacher(teacher_id) is not None

    def course_exists(self, course_code: str) -> bool:
        return self.find_course(course_code) is not None

    def get_all_students(self) -> List[Student]:
        with self._lock:
            return self._students.copy()

    def get_all_teachers(self) -> List[Teacher]:
        with self._lock:
            return self._teachers.copy()

    def get_all_courses(self) -> List[Course]:
        with self._lock:
            return self._courses.copy()

    # Rendering

    def display_student_courses(self, student_id: int) -> str:
        return self.get_student(student_id).display_enrolled_courses()

    def display_teacher_courses(self, teacher_id: int) -> str:
        return self.get_teacher(teacher_id).display_taught_courses()

    def display_course_students(self, course_code: str) -> str:
        return self.get_course(course_code).display_enrolled_students()

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        with self._lock:
            return {
                'students': len(self._students),
                'teachers': len(self._teachers),
                'courses': len(self._courses),
                'enrollments': sum(len(c.get_enrolled_students()) for c in self._courses),
                'assigned_courses': sum(1 for c in self._courses if c.has_instructor()),
                'next_student_id': self._next_student_id,
                'next_teacher_id': self._next_teacher_id,
            }
