"""
Shared fixtures for adversarial tests.

Provides a SQLite repository on a temp file so concurrent workers
share one real connection, as they do in the running service.
"""

import pytest

from src.adapters.repository.sqlite import SqliteStudentRepository

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def repository(sqlite_repository: SqliteStudentRepository) -> SqliteStudentRepository:
    """Repository shared by every concurrent worker in a test."""
    return sqlite_repository
