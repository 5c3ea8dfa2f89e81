"""Tests for the interactive menu."""

import io

from academia.shell import MenuShell


def run_menu(manager, script):
    stdout = io.StringIO()
    MenuShell(manager, stdin=io.StringIO(script), stdout=stdout).run()
    return stdout.getvalue()


def test_add_student_and_exit(manager):
    output = run_menu(manager, "1\nAna\n20\na@x.com\n555\n0\n")
    assert "Student added with ID 1" in output
    assert output.rstrip().endswith("Goodbye!")
    assert manager.get_student(1).name == "Ana"


def test_validation_error_is_reported_and_loop_continues(manager):
    output = run_menu(manager, "1\nAna\n200\na@x.com\n555\n1\nAna\n20\na@x.com\n555\nq\n")
    assert "Error: Age must be between 1 and 120" in output
    assert "Student added with ID 1" in output
    assert len(manager.get_all_students()) == 1


def test_non_integer_input_is_asked_again(manager):
    output = run_menu(manager, "1\nAna\nabc\n20\na@x.com\n555\n0\n")
    assert "Please enter a whole number" in output
    assert manager.student_exists(1)


def test_invalid_option(manager):
    output = run_menu(manager, "42\n0\n")
    assert "Invalid option." in output


def test_enroll_and_show_courses(populated):
    script = "4\n1\nCS101\n4\n1\nCS101\n9\n1\n10\nCS101\n0\n"
    output = run_menu(populated, script)
    assert "Student enrolled" in output
    assert "Student is already enrolled in this course" in output
    assert "- Algorithms (CS101)" in output
    assert "- Ana (ID: 1)" in output


def test_not_found_is_reported(populated):
    output = run_menu(populated, "4\n99\nCS101\n0\n")
    assert "Error: Student with ID 99 not found" in output


def test_assign_and_list(populated):
    output = run_menu(populated, "5\n2\nMATH101\n11\n2\n8\n0\n")
    assert "Teacher assigned" in output
    assert "- Calculus (MATH101)" in output
    assert "Instructor: Noether" in output


def test_create_course_and_list_people(manager):
    output = run_menu(manager, "3\nCS101\nAlgorithms\n\n4\n6\n7\n0\n")
    assert "Course CS101 created" in output
    assert "No students" in output
    assert "No teachers" in output


def test_end_of_input_exits_cleanly(manager):
    output = run_menu(manager, "1\nAna\n")
    assert output.rstrip().endswith("Goodbye!")
    assert manager.get_all_students() == []
