"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  ``APP_ENV`` selects
between ``development`` and ``production``; per-request access logging
is only enabled in development.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Directorio de Usuarios"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "development").lower())
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Listening address for ``run.py``.  PORT mirrors the conventional
    # variable used by most hosting platforms.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 3000))

    # Directory with static assets served at the site root.  Relative
    # paths are resolved against the current working directory.
    public_dir: str = field(default_factory=lambda: os.getenv("PUBLIC_DIR", "public"))

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests that need different
# values construct their own ``Settings()`` after patching the
# environment.
settings = Settings()
