"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the storage interface the domain requires.
Adapters implement it through structural subtyping.
"""

from typing import Protocol

from .models import Student


class StudentRepository(Protocol):
    """Port interface for student persistence."""

    def create_student(self, name: str, email: str, age: int) -> int:
        """
        Insert a new student row.

        Args:
            name: Student name
            email: Student email address
            age: Student age

        Returns:
            Storage-assigned id of the new row

        Raises:
            StorageError: If the write fails
        """
        ...

    def get_student_by_id(self, student_id: int) -> Student:
        """
        Fetch a single student.

        Raises:
            StudentNotFound: If no row matches ``student_id``
            StorageError: If the query fails
        """
        ...

    def get_students(self) -> list[Student]:
        """
        Fetch every student in the store's natural order.

        Returns an empty list when the table is empty.
        """
        ...

    def update_student(self, student: Student) -> None:
        """
        Overwrite a stored row with an already merged record.

        Raises:
            StudentNotFound: If no row matches ``student.id``
            StorageError: If the write fails
        """
        ...

    def remove_student(self, student_id: int) -> None:
        """
        Delete a student row.

        Raises:
            StudentNotFound: If no row matches ``student_id``
            StorageError: If the write fails
        """
        ...

    def ping(self) -> None:
        """Round-trip the store; raise StorageError if it is unreachable."""
        ...
