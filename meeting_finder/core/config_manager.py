# File: meeting_finder/core/config_manager.py
"""
Centralized configuration management for Meeting Finder.
Loads settings from environment variables and an optional .env file.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ['1', 'true', 'yes', 'y', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from meeting_finder/core/
    LOGS_DIR = Path(os.getenv("MEETING_FINDER_LOGS_DIR", str(BASE_DIR / "logs")))

    # Logging
    LOG_LEVEL = os.getenv("MEETING_FINDER_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("MEETING_FINDER_LOG_TO_FILE")
    LOGGER_NAME = "meeting_finder"

    VALID_LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']

    @classmethod
    def get_log_level(cls) -> int:
        """Map the configured level name to a logging constant."""
        if cls.LOG_LEVEL not in cls.VALID_LOG_LEVELS:
            return logging.INFO
        return getattr(logging, cls.LOG_LEVEL)

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured settings are usable."""
        logger = logging.getLogger(__name__)
        errors = []

        if cls.LOG_LEVEL not in cls.VALID_LOG_LEVELS:
            errors.append(f"MEETING_FINDER_LOG_LEVEL '{cls.LOG_LEVEL}' is not one of {cls.VALID_LOG_LEVELS}")

        if cls.LOG_TO_FILE and cls.LOGS_DIR.exists() and not cls.LOGS_DIR.is_dir():
            errors.append(f"Logs path is not a directory: {cls.LOGS_DIR}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
