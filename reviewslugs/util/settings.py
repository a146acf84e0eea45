"""
Runtime settings, read from the environment.

- REVIEWSLUGS_LOG_LEVEL: logging level name (default INFO; unknown names fall back to INFO)
- REVIEWSLUGS_TRACE_PATTERNS: log every pattern tried during extraction ("1"/"true")
- REVIEWSLUGS_UPLOAD_DIR: where the Streamlit page stores uploaded files

A `.env` file in the working directory is loaded first, if there is one.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """
    Single source of truth for configurable values.

    Usage:
        from reviewslugs.util.settings import get_settings
        settings = get_settings()
        print(settings.log_level)
    """

    log_level: str = field(
        default_factory=lambda: os.getenv("REVIEWSLUGS_LOG_LEVEL", "INFO").strip().upper()
    )
    trace_patterns: bool = field(
        default_factory=lambda: _env_flag("REVIEWSLUGS_TRACE_PATTERNS")
    )
    upload_dir: Path = field(
        default_factory=lambda: Path(os.getenv("REVIEWSLUGS_UPLOAD_DIR", ".tmp_uploads"))
    )

    @property
    def effective_log_level(self) -> str:
        """`log_level` if logging knows it, otherwise INFO."""
        return self.log_level if self.log_level in LOG_LEVELS else "INFO"

    def validate(self) -> List[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if self.log_level not in LOG_LEVELS:
            issues.append(
                f"WARNING: REVIEWSLUGS_LOG_LEVEL={self.log_level!r} is not one of "
                f"{', '.join(LOG_LEVELS)}. Using INFO."
            )

        if self.upload_dir.exists() and not self.upload_dir.is_dir():
            issues.append(f"WARNING: REVIEWSLUGS_UPLOAD_DIR is not a directory: {self.upload_dir}")

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached so every module sees the same settings for the life of the process."""
    return Settings()
