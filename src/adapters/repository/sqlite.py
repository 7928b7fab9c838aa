"""
SQLite repository adapter - Implements StudentRepository protocol.

This module provides the embedded, file-backed implementation of the
domain's storage port using the standard library sqlite3 driver with
raw, parameterized SQL.

A single connection is shared by every worker thread. The connection
is opened with ``check_same_thread=False`` and all access goes through
one lock, which gives the single-writer semantics of the embedded store.
"""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from src.domain.exceptions import StorageError, StudentNotFound
from src.domain.models import Student

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations" / "sqlite"


class SqliteStudentRepository:
    """
    Implements StudentRepository protocol via sqlite3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Every operation is a single statement; nothing spans transactions.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        """
        Initialize repository with an open connection.

        Args:
            connection: sqlite3 connection opened by ``connect()``
        """
        self._conn = connection
        self._lock = threading.Lock()

    @contextmanager
    def _cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        """Run one statement under the lock, committing on success."""
        with self._lock:
            try:
                cursor = self._conn.cursor()
                try:
                    yield cursor
                    self._conn.commit()
                finally:
                    cursor.close()
            except sqlite3.Error as e:
                logger.error(f"SQLite {operation} failed: {e}")
                raise StorageError(f"{operation}: {e}") from e

    def create_student(self, name: str, email: str, age: int) -> int:
        sql = "INSERT INTO students (name, email, age) VALUES (?, ?, ?)"

        with self._cursor("create student") as cursor:
            cursor.execute(sql, (name, email, age))
            student_id = cursor.lastrowid

        if student_id is None:
            raise StorageError("create student: no id assigned")
        return student_id

    def get_student_by_id(self, student_id: int) -> Student:
        sql = "SELECT id, name, email, age FROM students WHERE id = ? LIMIT 1"

        with self._cursor("get student") as cursor:
            cursor.execute(sql, (student_id,))
            row = cursor.fetchone()

        if row is None:
            raise StudentNotFound(student_id)
        return Student(*row)

    def get_students(self) -> list[Student]:
        sql = "SELECT id, name, email, age FROM students"

        with self._cursor("list students") as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()

        return [Student(*row) for row in rows]

    def update_student(self, student: Student) -> None:
        """
        Overwrite name, email and age of an existing row.

        Raises:
            StudentNotFound: If the UPDATE matched no row
        """
        sql = "UPDATE students SET name = ?, email = ?, age = ? WHERE id = ?"

        with self._cursor("update student") as cursor:
            cursor.execute(sql, (student.name, student.email, student.age, student.id))
            updated = cursor.rowcount

        if updated == 0:
            raise StudentNotFound(student.id)

    def remove_student(self, student_id: int) -> None:
        sql = "DELETE FROM students WHERE id = ?"

        with self._cursor("delete student") as cursor:
            cursor.execute(sql, (student_id,))
            deleted = cursor.rowcount

        if deleted == 0:
            raise StudentNotFound(student_id)

    def ping(self) -> None:
        with self._cursor("ping") as cursor:
            cursor.execute("SELECT 1")


def connect(storage_path: str) -> sqlite3.Connection:
    """
    Open the database file, creating its parent directory if needed.

    Args:
        storage_path: Filesystem path of the database, or ``:memory:``

    Raises:
        StorageError: If the file cannot be opened
    """
    if storage_path != ":memory:":
        Path(storage_path).parent.mkdir(parents=True, exist_ok=True)

    try:
        return sqlite3.connect(storage_path, check_same_thread=False)
    except sqlite3.Error as e:
        raise StorageError(f"open storage {storage_path}: {e}") from e


def run_migrations(connection: sqlite3.Connection) -> None:
    """
    Execute all SQL migration files for SQLite.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration is idempotent (CREATE TABLE IF NOT EXISTS).

    Args:
        connection: Open sqlite3 connection
    """
    sql_files = sorted(MIGRATIONS_DIR.glob("*.sql"))

    if not sql_files:
        logger.warning(f"No migration files found in {MIGRATIONS_DIR}")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            connection.executescript(sql_file.read_text())
            connection.commit()
            logger.info(f"Migration complete: {sql_file.name}")
        except sqlite3.Error as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
