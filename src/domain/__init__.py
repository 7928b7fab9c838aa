"""
Domain layer - Pure record logic with zero framework imports.

This package contains the student record model, the storage port the
adapters implement, and the service that orchestrates them.
"""

from .exceptions import StorageError, StudentError, StudentNotFound
from .models import Student, StudentPatch
from .ports import StudentRepository
from .students import StudentService

__all__ = [
    "StorageError",
    "Student",
    "StudentError",
    "StudentNotFound",
    "StudentPatch",
    "StudentRepository",
    "StudentService",
]
