"""
Domain exceptions - Semantic error types for student records.

This module defines domain-specific exceptions that communicate
storage outcomes without leaking driver details to the HTTP layer.
"""


class StudentError(Exception):
    """Base class for student domain errors."""

    pass


class StudentNotFound(StudentError):
    """No stored student matches the requested id."""

    def __init__(self, student_id: int) -> None:
        self.student_id = student_id
        super().__init__(f"no student found with id: {student_id}")


class StorageError(StudentError):
    """Underlying store failed (connection, statement or constraint error)."""

    pass
