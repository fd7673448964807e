"""
formrelay/models/submission_models.py

Pydantic DTOs for the two inbound forms.

Only the fields the recipient cannot do without are validated:
  - applications: fullName, email, positionWanted
  - contact:      name, email, message

Every other application field is opaque free text and is forwarded into
the email as submitted.  Tightening any of them is a behaviour change.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from formrelay.core.constants import EMAIL_PATTERN

# Must be a real string (no number/bool coercion) and non-empty.
RequiredText = Annotated[str, Field(min_length=1, strict=True)]


def _check_email_shape(value: str) -> str:
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValueError("Email address is malformed.")
    return value


class ApplicationSubmission(BaseModel):
    """
    A job application as posted to POST /api/applications.

    Field names are exposed in camelCase to match the web form:
        { "fullName": "Jane Doe", "email": "jane@example.com",
          "positionWanted": "Accountant", "motivation": "...", ... }
    """

    model_config = ConfigDict(alias_generator=to_camel)

    # ── Personal information ───────────────────────────────────────────────────
    full_name: RequiredText
    email: RequiredText
    phone: Optional[str] = None
    birth_date: Optional[str] = None
    marital_status: Optional[str] = None
    address: Optional[str] = None

    # ── Education ──────────────────────────────────────────────────────────────
    diploma: Optional[str] = None
    school: Optional[str] = None
    grad_year: Optional[str] = None

    # ── Work experience ────────────────────────────────────────────────────────
    last_job: Optional[str] = None
    company: Optional[str] = None
    job_duration: Optional[str] = None
    job_description: Optional[str] = None

    # ── Position details ───────────────────────────────────────────────────────
    position_wanted: RequiredText
    contract_type: Optional[str] = None
    availability: Optional[str] = None
    languages: Optional[str] = None
    has_license: Optional[str] = None

    motivation: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_must_look_like_an_address(cls, v: str) -> str:
        return _check_email_shape(v)

    @field_validator(
        "phone", "birth_date", "marital_status", "address",
        "diploma", "school", "grad_year",
        "last_job", "company", "job_duration", "job_description",
        "contract_type", "availability", "languages", "has_license",
        "motivation",
        mode="before",
    )
    @classmethod
    def pass_through_as_text(cls, v: Any) -> Optional[str]:
        # JSON clients may send numbers, booleans, lists or objects; render them as JSON.
        if v is None or isinstance(v, str):
            return v
        return json.dumps(v, ensure_ascii=False)


class ContactSubmission(BaseModel):
    """
    JSON body for POST /api/contact.

        { "name": "Alice", "email": "alice@example.com", "message": "Hello" }
    """

    name: RequiredText
    email: RequiredText
    message: RequiredText

    @field_validator("email")
    @classmethod
    def email_must_look_like_an_address(cls, v: str) -> str:
        return _check_email_shape(v)
