"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the domain
service and its storage adapter into routes.
"""

from fastapi import Request

from src.domain.ports import StudentRepository
from src.domain.students import StudentService


def get_repository(request: Request) -> StudentRepository:
    """
    Get the storage adapter from app state.

    The adapter is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_student_service(request: Request) -> StudentService:
    """Create student service wired to the shared storage adapter."""
    return StudentService(repository=get_repository(request))
