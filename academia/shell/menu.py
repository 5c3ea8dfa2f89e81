"""
Interactive text menu over the university registry.
"""

import sys
from typing import Callable, List, Optional, TextIO, Tuple

from ..core.exceptions import AcademiaException
from ..services.university_manager import UniversityManager


MENU_OPTIONS: List[Tuple[str, str]] = [
    ("1", "Add student"),
    ("2", "Add teacher"),
    ("3", "Create course"),
    ("4", "Enroll student in course"),
    ("5", "Assign teacher to course"),
    ("6", "List students"),
    ("7", "List teachers"),
    ("8", "List courses"),
    ("9", "Show a student's courses"),
    ("10", "Show a course's students"),
    ("11", "Show a teacher's courses"),
]

EXIT_CHOICES = ("0", "q", "quit")


class MenuShell:
    """Reads operator input, calls the registry and prints results.

    Errors raised by the registry are reported and the loop carries on.
    """

    def __init__(self, manager: UniversityManager, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self._manager = manager
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._actions = {
            "1": self._add_student,
            "2": self._add_teacher,
            "3": self._create_course,
            "4": self._enroll_student,
            "5": self._assign_teacher,
            "6": self._list_students,
            "7": self._list_teachers,
            "8": self._list_courses,
            "9": self._show_student_courses,
            "10": self._show_course_students,
            "11": self._show_teacher_courses,
        }

    def _print(self, text: str = "") -> None:
        print(text, file=self._stdout)

    def _read(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._read(prompt)
            try:
                return int(raw)
            except ValueError:
                self._print("Please enter a whole number")

    def print_menu(self) -> None:
        self._print("\n=== University Management ===")
        for code, label in MENU_OPTIONS:
            self._print(f"{code}. {label}")
        self._print("0. Exit")

    def run(self) -> None:
        """Run the menu loop until the operator exits or input ends."""
        while True:
            self.print_menu()
            try:
                choice = self._read("Choose an option: ")
            except EOFError:
                break
            if choice.lower() in EXIT_CHOICES:
                break
            action: Optional[Callable[[], None]] = self._actions.get(choice)
            if action is None:
                self._print("Invalid option.")
                continue
            try:
                action()
            except AcademiaException as e:
                self._print(f"Error: {e.message}")
            except EOFError:
                break
        self._print("Goodbye!")

    def _add_student(self) -> None:
        name = self._read("Name: ")
        age = self._read_int("Age: ")
        email = self._read("Email: ")
        phone = self._read("Phone: ")
        student = self._manager.add_student(name, age, email, phone)
        self._print(f"Student added with ID {student.id}")

    def _add_teacher(self) -> None:
        name = self._read("Name: ")
        age = self._read_int("Age: ")
        email = self._read("Email: ")
        phone = self._read("Phone: ")
        specialization = self._read("Specialization: ")
        teacher = self._manager.add_teacher(name, age, email, phone, specialization)
        self._print(f"Teacher added with ID {teacher.id}")

    def _create_course(self) -> None:
        code = self._read("Course code: ")
        name = self._read("Course name: ")
        description = self._read("Description: ")
        credits = self._read_int("Credits: ")
        course = self._manager.create_course(code, name, description, credits)
        self._print(f"Course {course.course_code} created")

    def _enroll_student(self) -> None:
        student_id = self._read_int("Student ID: ")
        code = self._read("Course code: ")
        if self._manager.enroll_student_in_course(student_id, code):
            self._print("Student enrolled")
        else:
            self._print("Student is already enrolled in this course")

    def _assign_teacher(self) -> None:
        teacher_id = self._read_int("Teacher ID: ")
        code = self._read("Course code: ")
        if self._manager.assign_teacher_to_course(teacher_id, code):
            self._print("Teacher assigned")
        else:
            self._print("Teacher already teaches this course")

    def _list_entities(self, entities, empty: str) -> None:
        if not entities:
            self._print(empty)
        for entity in entities:
            self._print(entity.display_info())
            self._print("---")

    def _list_students(self) -> None:
        self._list_entities(self._manager.get_all_students(), "No students")

    def _list_teachers(self) -> None:
        self._list_entities(self._manager.get_all_teachers(), "No teachers")

    def _list_courses(self) -> None:
        self._list_entities(self._manager.get_all_courses(), "No courses")

    def _show_student_courses(self) -> None:
        student_id = self._read_int("Student ID: ")
        self._print(self._manager.display_student_courses(student_id))

    def _show_course_students(self) -> None:
        code = self._read("Course code: ")
        self._print(self._manager.display_course_students(code))

    def _show_teacher_courses(self) -> None:
        teacher_id = self._read_int("Teacher ID: ")
        self._print(self._manager.display_teacher_courses(teacher_id))
