"""
API routes - Student CRUD endpoints.

This module defines the HTTP endpoints:
- POST   /api/students       - Create a student
- GET    /api/students       - List all students
- GET    /api/students/{id}  - Fetch one student
- PATCH  /api/students/{id}  - Merge-update a student
- DELETE /api/students/{id}  - Remove a student

Endpoints are plain functions, so FastAPI runs each request on a
worker thread. Failures are raised as domain exceptions and rendered
by the handlers in src.api.errors.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import get_student_service
from src.api.models import (
    MAX_INT64,
    ErrorResponse,
    MessageResponse,
    StudentCreatedResponse,
    StudentCreateRequest,
    StudentResponse,
    StudentUpdateRequest,
)
from src.domain.students import StudentService

router = APIRouter(tags=["students"])

StudentId = Annotated[int, Path(le=MAX_INT64, description="Student id")]

_BAD_REQUEST = {"model": ErrorResponse, "description": "Invalid id or request body"}
_NOT_FOUND = {"model": ErrorResponse, "description": "Student not found"}
_STORAGE_ERROR = {"model": ErrorResponse, "description": "Storage failure"}


@router.post(
    "/students",
    response_model=StudentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: _BAD_REQUEST, 500: _STORAGE_ERROR},
    summary="Create a student",
    description="Submit name, email and age. The id is assigned by the server.",
)
def create_student(
    request_data: StudentCreateRequest,
    service: StudentService = Depends(get_student_service),
) -> StudentCreatedResponse:
    """
    Create a new student record.

    - **name**: Non-empty name
    - **email**: Valid email address
    - **age**: Positive integer
    """
    student_id = service.create(request_data.name, request_data.email, request_data.age)
    return StudentCreatedResponse(id=student_id)


@router.get(
    "/students/{student_id}",
    response_model=StudentResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _STORAGE_ERROR},
    summary="Get a student by id",
)
def get_student(
    student_id: StudentId,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    return StudentResponse.from_student(service.get(student_id))


@router.get(
    "/students",
    response_model=list[StudentResponse],
    responses={500: _STORAGE_ERROR},
    summary="List all students",
)
def list_students(
    service: StudentService = Depends(get_student_service),
) -> list[StudentResponse]:
    """Return every student. An empty table yields an empty list."""
    return [StudentResponse.from_student(student) for student in service.list_all()]


@router.patch(
    "/students/{student_id}",
    response_model=MessageResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _STORAGE_ERROR},
    summary="Update a student",
    description="Only non-empty strings and positive integers overwrite stored values.",
)
def update_student(
    student_id: StudentId,
    request_data: StudentUpdateRequest,
    service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    """
    Merge the given fields over an existing student.

    - **name**, **email**, **age**: all optional
    """
    service.update(student_id, request_data.to_patch())
    return MessageResponse(message="Student updated successfully")


@router.delete(
    "/students/{student_id}",
    response_model=MessageResponse,
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND, 500: _STORAGE_ERROR},
    summary="Delete a student",
)
def remove_student(
    student_id: StudentId,
    service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    service.remove(student_id)
    return MessageResponse(message="Student deleted successfully")
