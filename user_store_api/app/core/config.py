"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match the behaviour of the reference service: listen on port 3333
and start with a single demo user.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3333"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # When enabled the store starts with ``{"id": 1, "name": "Test User1"}``
    # and the next auto-assigned id is 2.
    seed_demo_user: bool = _env_flag("SEED_DEMO_USER", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
