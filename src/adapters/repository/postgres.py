"""
PostgreSQL repository adapter - Implements StudentRepository protocol.

This module provides the PostgreSQL implementation of the domain's
storage port using psycopg3 with raw SQL.

Every method borrows one connection from the pool and issues exactly
one statement. Driver errors are wrapped in StorageError with the
operation name so the HTTP layer can report them without knowing
about psycopg.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import StorageError, StudentNotFound
from src.domain.models import Student

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations" / "postgres"


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Translate psycopg errors (including pool timeouts) to StorageError."""
    try:
        yield
    except psycopg.Error as e:
        logger.error(f"PostgreSQL {operation} failed: {e}")
        raise StorageError(f"{operation}: {e}") from e


class PostgresStudentRepository:
    """
    Implements StudentRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create_student(self, name: str, email: str, age: int) -> int:
        """
        Insert a student and return the id assigned by BIGSERIAL.

        Uses INSERT ... RETURNING so the id comes back in the same round trip.
        """
        sql = "INSERT INTO students (name, email, age) VALUES (%s, %s, %s) RETURNING id"

        with _storage_errors("create student"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (name, email, age))
                row = cursor.fetchone()
                conn.commit()

        if row is None:
            raise StorageError("create student: no id returned")
        return row[0]

    def get_student_by_id(self, student_id: int) -> Student:
        sql = "SELECT id, name, email, age FROM students WHERE id = %s LIMIT 1"

        with _storage_errors("get student"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (student_id,))
                row = cursor.fetchone()

        if row is None:
            raise StudentNotFound(student_id)
        return Student(*row)

    def get_students(self) -> list[Student]:
        sql = "SELECT id, name, email, age FROM students"

        with _storage_errors("list students"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql)
                rows = cursor.fetchall()

        return [Student(*row) for row in rows]

    def update_student(self, student: Student) -> None:
        """
        Overwrite name, email and age of an existing row.

        Returns normally only if exactly one row matched the id.

        Raises:
            StudentNotFound: If the UPDATE matched no row
        """
        sql = "UPDATE students SET name = %s, email = %s, age = %s WHERE id = %s"

        with _storage_errors("update student"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (student.name, student.email, student.age, student.id))
                updated = cursor.rowcount
                conn.commit()

        if updated == 0:
            raise StudentNotFound(student.id)

    def remove_student(self, student_id: int) -> None:
        sql = "DELETE FROM students WHERE id = %s"

        with _storage_errors("delete student"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (student_id,))
                deleted = cursor.rowcount
                conn.commit()

        if deleted == 0:
            raise StudentNotFound(student_id)

    def ping(self) -> None:
        with _storage_errors("ping"):
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files for PostgreSQL.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    sql_files = sorted(MIGRATIONS_DIR.glob("*.sql"))

    if not sql_files:
        logger.warning(f"No migration files found in {MIGRATIONS_DIR}")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)
                # pool.connection() commits on clean exit

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
