"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on every
interface on port 8080.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"Invalid {name} value {raw!r}; must be an integer.") from None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Backend API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address and port for the HTTP listener.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _env_int("PORT", "8080")

    # Seed the process‑wide store with three demo users at startup.
    seed_demo_users: bool = _env_flag("SEED_DEMO_USERS", "true")

    # Value sent in ``Access-Control-Allow-Origin`` on every response.
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
