"""
REST API implementation for the Academia records manager using FastAPI.
"""

from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field, StrictInt

from fastapi import FastAPI, HTTPException, Query, status

from .. import __version__
from ..core.entities import Student, Teacher, Course
from ..core.exceptions import AcademiaException, NotFoundError
from ..services import UniversityManager


# Pydantic models for API
class StudentCreate(BaseModel):
    name: str
    age: StrictInt
    email: str
    phone: str


class StudentResponse(BaseModel):
    id: int
    name: str
    age: int
    email: str
    phone: str
    courses: List[str] = []


class TeacherCreate(StudentCreate):
    specialization: str


class TeacherResponse(StudentResponse):
    specialization: str


class CourseCreate(BaseModel):
    course_code: str
    course_name: str
    description: str = ""
    credits: StrictInt


class CourseResponse(BaseModel):
    course_code: str
    course_name: str
    description: str
    credits: int
    instructor: Optional[int] = None
    students: List[int] = []


class EnrollmentRequest(BaseModel):
    student_id: StrictInt = Field(..., description="Registry ID of the student")
    course_code: str


class AssignmentRequest(BaseModel):
    teacher_id: StrictInt = Field(..., description="Registry ID of the teacher")
    course_code: str


class RelationshipResponse(BaseModel):
    success: bool
    changed: bool
    message: str


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


def _to_http_error(error: AcademiaException) -> HTTPException:
    code = status.HTTP_404_NOT_FOUND if isinstance(error, NotFoundError) else status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=error.message)


class AcademiaRestAPI:
    """REST API exposing the university registry."""

    def __init__(self, manager: UniversityManager):
        self._manager = manager

        # Create FastAPI app
        self.app = FastAPI(
            title="Academia Records API",
            description="Students, teachers, courses and their relationships",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        # Setup routes
        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""
        manager = self._manager

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            try:
                student = manager.add_student(student_data.name, student_data.age,
                                              student_data.email, student_data.phone)
            except AcademiaException as e:
                raise _to_http_error(e)
            return self._student_to_response(student)

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = Query(0, ge=0), limit: int = Query(100, ge=1)):
            """List all students."""
            students = manager.get_all_students()[skip:skip + limit]
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: int):
            """Get a student by ID."""
            try:
                return self._student_to_response(manager.get_student(student_id))
            except AcademiaException as e:
                raise _to_http_error(e)

        @self.app.get("/students/{student_id}/courses", response_model=List[CourseResponse])
        async def get_student_courses(student_id: int):
            """Get the courses a student is enrolled in."""
            try:
                student = manager.get_student(student_id)
            except AcademiaException as e:
                raise _to_http_error(e)
            return [self._course_to_response(course) for course in student.get_enrolled_courses()]

        # Teacher endpoints
        @self.app.post("/teachers", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
        async def create_teacher(teacher_data: TeacherCreate):
            """Create a new teacher."""
            try:
                teacher = manager.add_teacher(teacher_data.name, teacher_data.age, teacher_data.email,
                                              teacher_data.phone, teacher_data.specialization)
            except AcademiaException as e:
                raise _to_http_error(e)
            return self._teacher_to_response(teacher)

        @self.app.get("/teachers", response_model=List[TeacherResponse])
        async def list_teachers(skip: int = Query(0, ge=0), limit: int = Query(100, ge=1)):
            """List all teachers."""
            teachers = manager.get_all_teachers()[skip:skip + limit]
            return [self._teacher_to_response(teacher) for teacher in teachers]

        @self.app.get("/teachers/{teacher_id}", response_model=TeacherResponse)
        async def get_teacher(teacher_id: int):
            """Get a teacher by ID."""
            try:
                return self._teacher_to_response(manager.get_teacher(teacher_id))
            except AcademiaException as e:
                raise _to_http_error(e)

        @self.app.get("/teachers/{teacher_id}/courses", response_model=List[CourseResponse])
        async def get_teacher_courses(teacher_id: int):
            """Get the courses a teacher is assigned to."""
            try:
                teacher = manager.get_teacher(teacher_id)
            except AcademiaException as e:
                raise _to_http_error(e)
            return [self._course_to_response(course) for course in teacher.get_taught_courses()]

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create a new course."""
            try:
                course = manager.create_course(course_data.course_code, course_data.course_name,
                                               course_data.description, course_data.credits)
            except AcademiaException as e:
                raise _to_http_error(e)
            return self._course_to_response(course)

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses(skip: int = Query(0, ge=0), limit: int = Query(100, ge=1)):
            """List all courses."""
            courses = manager.get_all_courses()[skip:skip + limit]
            return [self._course_to_response(course) for course in courses]

        @self.app.get("/courses/{course_code}", response_model=CourseResponse)
        async def get_course(course_code: str):
            """Get a course by code."""
            try:
                return self._course_to_response(manager.get_course(course_code))
            except AcademiaException as e:
                raise _to_http_error(e)

        @self.app.get("/courses/{course_code}/students", response_model=List[StudentResponse])
        async def get_course_students(course_code: str):
            """Get the students enrolled in a course."""
            try:
                course = manager.get_course(course_code)
            except AcademiaException as e:
                raise _to_http_error(e)
            return [self._student_to_response(student) for student in course.get_enrolled_students()]

        # Relationship endpoints
        @self.app.post("/enrollments", response_model=RelationshipResponse)
        async def enroll_student(enrollment_data: EnrollmentRequest):
            """Enroll a student in a course."""
            try:
                changed = manager.enroll_student_in_course(enrollment_data.student_id,
                                                           enrollment_data.course_code)
            except AcademiaException as e:
                raise _to_http_error(e)
            message = "Student enrolled successfully" if changed else "Student already enrolled"
            return RelationshipResponse(success=True, changed=changed, message=message)

        @self.app.post("/assignments", response_model=RelationshipResponse)
        async def assign_teacher(assignment_data: AssignmentRequest):
            """Assign a teacher to a course."""
            try:
                changed = manager.assign_teacher_to_course(assignment_data.teacher_id,
                                                           assignment_data.course_code)
            except AcademiaException as e:
                raise _to_http_error(e)
            message = "Teacher assigned successfully" if changed else "Teacher already assigned"
            return RelationshipResponse(success=True, changed=changed, message=message)

        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get registry statistics."""
            return StatisticsResponse(
                success=True,
                message="Statistics retrieved successfully",
                statistics=manager.get_statistics()
            )

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(**student.to_dict())

    def _teacher_to_response(self, teacher: Teacher) -> TeacherResponse:
        """Convert Teacher entity to response model."""
        return TeacherResponse(**teacher.to_dict())

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(**course.to_dict())
