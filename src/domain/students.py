"""
Student domain service - Orchestrates record operations.

The service owns the merge-patch step of updates so that the
repository only ever receives complete records to write.

Note: fetch-then-write in ``update`` is not atomic. Two concurrent
updates to the same id resolve as last-write-wins.
"""

import logging
from dataclasses import dataclass

from .models import Student, StudentPatch
from .ports import StudentRepository

logger = logging.getLogger(__name__)


@dataclass
class StudentService:
    """Domain service for student records."""

    repository: StudentRepository

    def create(self, name: str, email: str, age: int) -> int:
        """Persist a new student and return its id."""
        student_id = self.repository.create_student(name, email, age)
        logger.info("Student created: id=%s", student_id)
        return student_id

    def get(self, student_id: int) -> Student:
        """
        Fetch a student by id.

        Raises:
            StudentNotFound: If the id is unknown
        """
        logger.info("Getting student: id=%s", student_id)
        return self.repository.get_student_by_id(student_id)

    def list_all(self) -> list[Student]:
        return self.repository.get_students()

    def update(self, student_id: int, patch: StudentPatch) -> Student:
        """
        Merge ``patch`` over the stored record and write the result.

        The existing record is fetched first so an unknown id fails
        before any merge happens.

        Args:
            student_id: Id of the record to update
            patch: Incoming partial fields

        Returns:
            The merged record as written

        Raises:
            StudentNotFound: If the id is unknown
        """
        existing = self.repository.get_student_by_id(student_id)
        merged = existing.merge(patch)
        self.repository.update_student(merged)
        logger.info("Student updated: id=%s", student_id)
        return merged

    def remove(self, student_id: int) -> None:
        self.repository.remove_student(student_id)
        logger.info("Student removed: id=%s", student_id)
