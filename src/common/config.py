"""
Configuration loader for the community board UI.

Loads all settings from environment variables (.env file).
Validates settings and provides type-safe access.
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Config:
    """
    Centralized configuration for the UI and its remote API clients.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== Remote community API =====
    COMMUNITY_API_URL: str = os.getenv(
        "COMMUNITY_API_URL", "https://code-veda-backend.onrender.com"
    ).rstrip("/")
    # No timeout unless explicitly configured
    COMMUNITY_API_TIMEOUT: Optional[float] = _optional_float("COMMUNITY_API_TIMEOUT")
    HEALTH_CHECK_TIMEOUT: float = float(os.getenv("HEALTH_CHECK_TIMEOUT", "3"))

    # ===== Owner identity =====
    # There is no login; these stand in for the authenticated user's id.
    # Both must look like MongoDB ObjectIds for the remote schema to accept them.
    POSTER_ID: str = os.getenv("POSTER_ID", "60d5f2f5c7b9e10015f4e2a0")
    ORGANIZER_ID: str = os.getenv("ORGANIZER_ID", "60d7bbf96e7e8b2e2c5e8b1c")

    # ===== Home page carousel =====
    CAROUSEL_INTERVAL_MS: int = int(os.getenv("CAROUSEL_INTERVAL_MS", "3000"))

    # ===== Flask =====
    FLASK_SECRET_KEY: str = os.getenv("FLASK_SECRET_KEY", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if a setting is unusable.
        """
        if not cls.COMMUNITY_API_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"COMMUNITY_API_URL must be an http(s) URL, got: {cls.COMMUNITY_API_URL!r}. "
                f"Please check your .env file."
            )

        if cls.COMMUNITY_API_TIMEOUT is not None and cls.COMMUNITY_API_TIMEOUT <= 0:
            raise ValueError("COMMUNITY_API_TIMEOUT must be a positive number of seconds.")

        if cls.CAROUSEL_INTERVAL_MS <= 0:
            raise ValueError("CAROUSEL_INTERVAL_MS must be a positive number of milliseconds.")

        missing = [
            name for name, value in {
                "POSTER_ID": cls.POSTER_ID,
                "ORGANIZER_ID": cls.ORGANIZER_ID,
            }.items() if not value
        ]
        if missing:
            raise ValueError(
                f"Missing required configuration: {', '.join(missing)}. "
                f"Please check your .env file."
            )

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        timeout = f"{cls.COMMUNITY_API_TIMEOUT}s" if cls.COMMUNITY_API_TIMEOUT else "none"
        return f"""
Configuration Summary:
  Community API: {cls.COMMUNITY_API_URL}
  Request timeout: {timeout}
  Poster id: {cls.POSTER_ID}
  Organizer id: {cls.ORGANIZER_ID}
  Carousel interval: {cls.CAROUSEL_INTERVAL_MS}ms
  Flask secret: {'✓ Configured' if cls.FLASK_SECRET_KEY else '✗ Random per process'}
        """.strip()


# Validate configuration on import (fail fast if misconfigured)
# Left to the app factory so tests can override environment first
# Config.validate()
