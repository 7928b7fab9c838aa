"""
In-memory repository adapter - Implements StudentRepository protocol.

Keeps records in a dict guarded by a lock. Used by tests and by the
``memory`` storage backend for local development; nothing survives a
restart.
"""

import threading
from itertools import count

from src.domain.exceptions import StudentNotFound
from src.domain.models import Student


class InMemoryStudentRepository:
    """
    Implements StudentRepository protocol with a plain dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Ids start at 1 and are never reused, like an AUTOINCREMENT column.
    """

    def __init__(self) -> None:
        self._students: dict[int, Student] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def create_student(self, name: str, email: str, age: int) -> int:
        with self._lock:
            student_id = next(self._ids)
            self._students[student_id] = Student(student_id, name, email, age)
        return student_id

    def get_student_by_id(self, student_id: int) -> Student:
        with self._lock:
            student = self._students.get(student_id)
        if student is None:
            raise StudentNotFound(student_id)
        return student

    def get_students(self) -> list[Student]:
        with self._lock:
            return list(self._students.values())

    def update_student(self, student: Student) -> None:
        with self._lock:
            if student.id not in self._students:
                raise StudentNotFound(student.id)
            self._students[student.id] = student

    def remove_student(self, student_id: int) -> None:
        with self._lock:
            if self._students.pop(student_id, None) is None:
                raise StudentNotFound(student_id)

    def ping(self) -> None:
        pass
