"""Environment configuration utilities."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_environment(dotenv_path: Optional[Path] = None) -> None:
    """Load environment variables from a .env file if present."""
    default_path = Path.cwd() / ".env"
    target = dotenv_path or default_path
    loaded = load_dotenv(dotenv_path=target, override=False)
    if loaded:
        logger.debug("Loaded environment variables from %s", target)
    else:
        logger.debug("No .env file found at %s (skipping)", target)


def get_encoding() -> str:
    return os.getenv("PIGLATIN_ENCODING") or DEFAULT_ENCODING


def get_log_level() -> str:
    level = (os.getenv("PIGLATIN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        logger.warning(
            "Unknown PIGLATIN_LOG_LEVEL %r; using %s", level, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level
