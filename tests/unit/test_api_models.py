"""
Unit tests for API request/response models.

Tests Pydantic model validation for creation and update payloads.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ErrorResponse,
    StudentCreateRequest,
    StudentResponse,
    StudentUpdateRequest,
)
from src.domain.models import Student, StudentPatch


class TestStudentCreateRequest:
    """Tests for StudentCreateRequest model."""

    def test_valid_create_request(self) -> None:
        request = StudentCreateRequest(name="Ann", email="ann@x.com", age=30)
        assert request.name == "Ann"
        assert request.email == "ann@x.com"
        assert request.age == 30

    def test_name_kept_as_sent(self) -> None:
        request = StudentCreateRequest(name="  Ann  ", email="ann@x.com", age=30)
        assert request.name == "  Ann  "

    def test_email_kept_as_sent(self) -> None:
        """The address is checked, not normalized."""
        request = StudentCreateRequest(name="Ann", email="Ann@X.COM", age=30)
        assert request.email == "Ann@X.COM"

    def test_blank_email_reported_as_blank(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="Ann", email="  ", age=30)
        assert exc_info.value.errors()[0]["type"] == "blank"

    @pytest.mark.parametrize("age", [True, 30.0, "30"])
    def test_non_integer_age_rejected(self, age: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="Ann", email="ann@x.com", age=age)  # type: ignore[arg-type]
        assert exc_info.value.errors()[0]["loc"] == ("age",)

    def test_age_above_int64_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="Ann", email="ann@x.com", age=10**20)
        assert exc_info.value.errors()[0]["type"] == "less_than_equal"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="   ", email="ann@x.com", age=30)
        assert "name" in str(exc_info.value)

    def test_invalid_email_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="Ann", email="not-an-email", age=30)
        assert "email" in str(exc_info.value)

    @pytest.mark.parametrize("age", [0, -5])
    def test_non_positive_age_rejected(self, age: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest(name="Ann", email="ann@x.com", age=age)
        assert "age" in str(exc_info.value)

    def test_missing_fields_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            StudentCreateRequest()  # type: ignore[call-arg]
        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"name", "email", "age"}

    def test_client_id_ignored(self) -> None:
        """An id in the payload is dropped; ids are assigned by storage."""
        request = StudentCreateRequest.model_validate(
            {"id": 99, "name": "Ann", "email": "ann@x.com", "age": 30}
        )
        assert not hasattr(request, "id")


class TestStudentUpdateRequest:
    """Tests for StudentUpdateRequest model."""

    def test_all_fields_optional(self) -> None:
        assert StudentUpdateRequest().to_patch() == StudentPatch()

    def test_partial_fields_to_patch(self) -> None:
        request = StudentUpdateRequest(age=31)
        assert request.to_patch() == StudentPatch(age=31)

    def test_blank_strings_become_absent(self) -> None:
        request = StudentUpdateRequest(name="  ", email="")
        assert request.name is None
        assert request.email is None

    def test_present_email_still_validated(self) -> None:
        with pytest.raises(ValidationError):
            StudentUpdateRequest(email="nope")

    def test_email_kept_as_sent(self) -> None:
        assert StudentUpdateRequest(email="Bob@Y.ORG").email == "Bob@Y.ORG"

    @pytest.mark.parametrize("age", [True, 31.0, 2**63])
    def test_bad_age_rejected(self, age: object) -> None:
        with pytest.raises(ValidationError):
            StudentUpdateRequest(age=age)  # type: ignore[arg-type]


class TestResponses:
    def test_student_response_from_student(self) -> None:
        response = StudentResponse.from_student(Student(1, "Ann", "ann@x.com", 30))
        assert response.model_dump() == {
            "id": 1,
            "name": "Ann",
            "email": "ann@x.com",
            "age": 30,
        }

    def test_error_response_defaults_status(self) -> None:
        assert ErrorResponse(error="boom").model_dump() == {"status": "Error", "error": "boom"}
