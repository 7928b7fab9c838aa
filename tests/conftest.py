"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory and SQLite-backed repositories
- Sample student payloads
"""

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest

from src.adapters.repository import sqlite
from src.adapters.repository.memory import InMemoryStudentRepository
from src.adapters.repository.sqlite import SqliteStudentRepository


@pytest.fixture
def memory_repository() -> InMemoryStudentRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryStudentRepository()


@pytest.fixture
def sqlite_connection(tmp_path: Path) -> Generator[sqlite3.Connection, None, None]:
    """SQLite connection on a temp file with the students table created."""
    connection = sqlite.connect(str(tmp_path / "students.db"))
    sqlite.run_migrations(connection)
    yield connection
    connection.close()


@pytest.fixture
def sqlite_repository(sqlite_connection: sqlite3.Connection) -> SqliteStudentRepository:
    """SQLite repository over the temp database."""
    return SqliteStudentRepository(sqlite_connection)


@pytest.fixture
def ann() -> dict:
    """A valid creation payload."""
    return {"name": "Ann", "email": "ann@x.com", "age": 30}
