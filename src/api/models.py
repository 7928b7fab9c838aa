"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from src.domain.models import Student, StudentPatch

# Largest value an INTEGER column (SQLite, BIGINT) can hold
MAX_INT64 = 2**63 - 1


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the client's spelling as sent."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(check_email)]
Age = Annotated[int, Field(strict=True, le=MAX_INT64, description="Student age")]


class StudentCreateRequest(BaseModel):
    """Request model for student creation. Every field is required."""

    name: str = Field(..., description="Student name")
    email: EmailAddress
    age: Age = Field(..., gt=0)

    @field_validator("name", "email", mode="before")
    @classmethod
    def reject_blank(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise PydanticCustomError("blank", "Field must not be blank")
        return value


class StudentUpdateRequest(BaseModel):
    """
    Request model for partial student update.

    Missing, blank or non-positive values are treated as absent and
    leave the stored field unchanged.
    """

    name: str | None = None
    email: EmailAddress | None = None
    age: Age | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def blank_as_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_patch(self) -> StudentPatch:
        return StudentPatch(name=self.name, email=self.email, age=self.age)


class StudentResponse(BaseModel):
    """Response model for a stored student."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int

    @classmethod
    def from_student(cls, student: Student) -> "StudentResponse":
        return cls.model_validate(student)


class StudentCreatedResponse(BaseModel):
    """Response model for successful creation."""

    id: int


class MessageResponse(BaseModel):
    """Response model for successful update or removal."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    status: str = "Error"
    error: str
