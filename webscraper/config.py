"""Centralised settings for webscraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from webscraper import __version__

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = f"webscraper/{__version__} (Python)"


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("WEBSCRAPER_USER_AGENT", DEFAULT_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # Politeness
    # ------------------------------------------------------------------
    delay_ms: int = field(
        default_factory=lambda: int(os.environ.get("WEBSCRAPER_DELAY_MS", "1000"))
    )
    respect_robots: bool = field(
        default_factory=lambda: _env_flag("WEBSCRAPER_RESPECT_ROBOTS", True)
    )

    # ------------------------------------------------------------------
    # Timeouts (seconds)
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WEBSCRAPER_REQUEST_TIMEOUT", "30.0"))
    )
    robots_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WEBSCRAPER_ROBOTS_TIMEOUT", "10.0"))
    )

    # ------------------------------------------------------------------
    # Output / diagnostics
    # ------------------------------------------------------------------
    output_format: str = field(
        default_factory=lambda: os.environ.get("WEBSCRAPER_OUTPUT_FORMAT", "text")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("WEBSCRAPER_LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton, import this everywhere:
#   from webscraper.config import settings
settings = Settings()
