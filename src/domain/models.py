"""
Record model - The Student entity and its merge-patch rules.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class StudentPatch:
    """
    Partial update for a student.

    A field counts as present only when it carries a non-empty string
    or a positive integer. Anything else leaves the stored value alone.
    """

    name: str | None = None
    email: str | None = None
    age: int | None = None


@dataclass(frozen=True)
class Student:
    """A persisted student record. ``id`` is assigned by storage."""

    id: int
    name: str
    email: str
    age: int

    def merge(self, patch: StudentPatch) -> "Student":
        """
        Apply a merge-patch and return the resulting record.

        The id never changes; present patch fields overwrite stored ones.
        """
        return replace(
            self,
            name=patch.name if patch.name else self.name,
            email=patch.email if patch.email else self.email,
            age=patch.age if patch.age is not None and patch.age > 0 else self.age,
        )
