"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service runs out of the box on port 3000 with interactive docs under
``/api-docs``.  Values are read when a ``Settings`` instance is
created, which lets tests build their own settings after adjusting
the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Any


def _env(name: str, default: str) -> Any:
    return field(default_factory=lambda: os.getenv(name, default))


def _env_flag(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Student CRUD API")
    api_version: str = _env("API_VERSION", "1.0.0")
    description: str = _env(
        "API_DESCRIPTION", "Manage student records with full CRUD operations"
    )
    debug: bool = field(default_factory=lambda: _env_flag(os.getenv("DEBUG", "false")))
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is installed.  The file is rotated once it reaches
    # ``log_max_bytes``, keeping ``log_backup_count`` old files.
    log_file: str = _env("LOG_FILE", "")
    log_max_bytes: int = field(default_factory=lambda: int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024))))
    log_backup_count: int = field(default_factory=lambda: int(os.getenv("LOG_BACKUP_COUNT", "3")))

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Path of the Swagger UI page.  The OpenAPI document itself is always
    # served at ``/openapi.json``.
    docs_url: str = _env("DOCS_URL", "/api-docs")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
