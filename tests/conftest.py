"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
The required SMTP variables are seeded up front so anything that calls
``create_app()`` or ``load_settings()`` without arguments finds them.
"""

import io
import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

os.environ.setdefault("SMTP_HOST", "smtp.test.local")
os.environ.setdefault("SMTP_PORT", "465")
os.environ.setdefault("SMTP_USER", "relay@example.com")
os.environ.setdefault("SMTP_PASS", "secret")
os.environ.setdefault("RECIPIENT_EMAIL", "jobs@example.com")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from formrelay.api.dependencies import get_mail_dispatcher  # noqa: E402
from formrelay.core.config import Settings  # noqa: E402
from formrelay.main import create_app  # noqa: E402


# ── Settings & collaborators ───────────────────────────────────────────────────

@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    """Settings built explicitly; no .env file is read."""
    return Settings(
        _env_file=None,
        smtp_host="smtp.test.local",
        smtp_port=465,
        smtp_user="relay@example.com",
        smtp_pass="secret",
        recipient_email="jobs@example.com",
        upload_dir=str(upload_dir),
    )


@pytest.fixture
def dispatcher() -> MagicMock:
    """Stand-in MailDispatcher; ``deliver`` succeeds unless a test says otherwise."""
    mock = MagicMock()
    mock.deliver = AsyncMock(return_value=None)
    return mock


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture
def app(settings: Settings, dispatcher: MagicMock) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_mail_dispatcher] = lambda: dispatcher
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    The lifespan context (startup/shutdown events) is entered automatically.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Sample payload fixtures ────────────────────────────────────────────────────

@pytest.fixture
def application_fields() -> dict:
    """The three required application fields plus a couple of optional ones."""
    return {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "positionWanted": "Accountant",
        "phone": "+33 6 12 34 56 78",
        "motivation": "I love numbers.",
    }


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Minimal PDF header bytes; only the declared content type is checked."""
    return b"%PDF-1.4\n%%EOF"


@pytest.fixture
def sample_pdf_file(sample_pdf_bytes) -> tuple:
    """
    A (field_name, (filename, file_obj, content_type)) tuple ready for
    use with TestClient's `files=` parameter.
    """
    return ("resume", ("cv.pdf", io.BytesIO(sample_pdf_bytes), "application/pdf"))


@pytest.fixture
def sample_txt_file() -> tuple:
    """A non-PDF upload tuple for negative-case tests."""
    return ("resume", ("cv.txt", io.BytesIO(b"hello world"), "text/plain"))
