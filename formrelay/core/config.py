"""
formrelay/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; Docker Compose injects these at runtime.

The SMTP relay settings and the recipient address have no defaults: the
process must not start without them.  Call ``load_settings()`` rather than
instantiating ``Settings`` directly so a missing variable surfaces as a
``ConfigurationError`` naming it.
"""

from __future__ import annotations

from typing import List

from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from formrelay.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Form Relay API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── HTTP server ────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: List[str] = ["*"]

    # ── SMTP relay (required) ──────────────────────────────────────────────────
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_pass: SecretStr

    # ── Delivery ───────────────────────────────────────────────────────────────
    recipient_email: str

    # ── Uploads ────────────────────────────────────────────────────────────────
    upload_dir: str = "uploads"   # scratch directory for in-flight résumés

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings(env_file: str | None = ".env") -> Settings:
    """
    Build the settings from the environment, failing fast on bad input.

    Args:
        env_file: Optional dotenv file to read in addition to the process
                  environment.  ``None`` reads the environment only.

    Returns:
        A fully populated Settings instance.

    Raises:
        ConfigurationError: If a required variable is missing or a value
                            cannot be parsed.  The message names the
                            offending environment variable(s).
    """
    try:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    except ValidationError as exc:
        missing: List[str] = []
        invalid: List[str] = []
        for error in exc.errors():
            name = str(error["loc"][0]).upper() if error["loc"] else "?"
            if error["type"] == "missing":
                missing.append(name)
            else:
                invalid.append(f"{name} ({error['msg']})")

        if missing:
            raise ConfigurationError(
                "Missing required environment variable(s): " + ", ".join(missing)
            ) from exc
        raise ConfigurationError(
            "Invalid environment variable(s): " + ", ".join(invalid)
        ) from exc
