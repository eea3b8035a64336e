"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with no configuration at all; in a production deployment
you must at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_SECRET_KEY = "change_me"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Sweet Shop API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Key used to sign access tokens.  The default is only suitable for
    # local development; ``create_app`` logs a warning while it is in use.
    secret_key: str = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    # Tokens are valid for one day unless configured otherwise.
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` lets the
    # development frontend talk to the API from any port.
    cors_origins: List[str] = field(default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
