"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

VERSION = "0.3.0"

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str | None = os.getenv("LOG_DIR") or None

    # API
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "9196"))

    # Expose {{metrics}} / {{metric_count}} when callers don't say otherwise
    INCLUDE_METRICS: bool = _env_bool("LABEL_INCLUDE_METRICS", False)

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        cls.LOG_DIR = os.getenv("LOG_DIR") or None
        cls.API_HOST = os.getenv("API_HOST", "0.0.0.0")
        cls.API_PORT = int(os.getenv("API_PORT", "9196"))
        cls.INCLUDE_METRICS = _env_bool("LABEL_INCLUDE_METRICS", False)
