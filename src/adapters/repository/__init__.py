"""Repository adapters - Storage implementations."""

from .memory import InMemoryStudentRepository
from .postgres import PostgresStudentRepository
from .sqlite import SqliteStudentRepository

__all__ = [
    "InMemoryStudentRepository",
    "PostgresStudentRepository",
    "SqliteStudentRepository",
]
