"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no environment at all.  Override values via
environment variables before importing this module, or pass an explicit
``Settings`` instance to ``create_app`` (this is what the tests do).
"""

import os
from dataclasses import dataclass
from typing import Optional


# Ids are unsigned 16-bit integers, so the id space holds 65536 keys.
MAX_TODO_ID = 0xFFFF
ID_SPACE_SIZE = MAX_TODO_ID + 1


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "")
    return value or None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  When unset only the console handler is used.
    log_file: Optional[str] = _optional_env("LOG_FILE")

    # Number of items returned by one ``read_all`` page.
    page_size: int = int(os.getenv("TODO_PAGE_SIZE", "10"))

    # Maximum number of todos held at once.  Values larger than the id
    # space are clamped by ``Settings.__post_init__``.
    capacity: int = int(os.getenv("TODO_CAPACITY", str(ID_SPACE_SIZE)))

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def __post_init__(self) -> None:
        self.capacity = min(self.capacity, ID_SPACE_SIZE)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
