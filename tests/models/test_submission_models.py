"""
tests/models/test_submission_models.py

Tests for the inbound DTOs: which fields are enforced and which are
passed through untouched.
"""

import pytest
from pydantic import ValidationError

from formrelay.models.submission_models import ApplicationSubmission, ContactSubmission

REQUIRED = {"fullName": "Jane Doe", "email": "jane@example.com", "positionWanted": "Accountant"}


class TestEmailShape:

    @pytest.mark.parametrize(
        "email",
        ["a@b.c", "jane.doe+jobs@mail.example.co.uk", "x@y.z.w", "ünï@cödé.fr"],
    )
    def test_accepted(self, email: str) -> None:
        assert ContactSubmission(name="A", email=email, message="m").email == email

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "a@b", "@b.c", "a@.c", "a@b.", "a b@c.d", "a@b@c.d", "a@b.c\n", " a@b.c"],
    )
    def test_rejected(self, email: str) -> None:
        with pytest.raises(ValidationError):
            ContactSubmission(name="A", email=email, message="m")


class TestApplicationSubmission:

    def test_camel_case_aliases(self) -> None:
        submission = ApplicationSubmission.model_validate(
            {**REQUIRED, "birthDate": "1990-01-01", "hasLicense": "yes", "gradYear": "2012"}
        )

        assert submission.full_name == "Jane Doe"
        assert submission.position_wanted == "Accountant"
        assert submission.birth_date == "1990-01-01"
        assert submission.has_license == "yes"
        assert submission.grad_year == "2012"

    def test_optional_fields_default_to_none(self) -> None:
        submission = ApplicationSubmission.model_validate(REQUIRED)

        assert submission.phone is None
        assert submission.motivation is None

    def test_whitespace_only_required_text_is_accepted(self) -> None:
        """Presence is all that is checked; content is the recruiter's call."""
        assert ApplicationSubmission.model_validate({**REQUIRED, "fullName": " "}).full_name == " "

    def test_required_text_is_not_coerced(self) -> None:
        with pytest.raises(ValidationError):
            ApplicationSubmission.model_validate({**REQUIRED, "positionWanted": 7})

    @pytest.mark.parametrize(
        ("raw", "rendered"),
        [
            (True, "true"),
            (False, "false"),
            (2015, "2015"),
            (3.5, "3.5"),
            ("free text", "free text"),
            (["fr", "en"], '["fr", "en"]'),
            ({"level": "B2"}, '{"level": "B2"}'),
        ],
    )
    def test_optional_json_values_become_json_text(self, raw, rendered: str) -> None:
        submission = ApplicationSubmission.model_validate({**REQUIRED, "hasLicense": raw, "gradYear": raw})

        assert submission.has_license == rendered
        assert submission.grad_year == rendered


    def test_snake_case_names_are_not_accepted(self) -> None:
        with pytest.raises(ValidationError):
            ApplicationSubmission.model_validate(
                {"full_name": "Jane Doe", "email": "jane@example.com", "position_wanted": "Accountant"}
            )

class TestContactSubmission:

    @pytest.mark.parametrize("field", ["name", "email", "message"])
    def test_required(self, field: str) -> None:
        payload = {"name": "Alice", "email": "alice@example.com", "message": "Hello"}
        del payload[field]

        with pytest.raises(ValidationError):
            ContactSubmission.model_validate(payload)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContactSubmission.model_validate({"name": "Alice", "email": "alice@example.com", "message": ["Hello"]})
