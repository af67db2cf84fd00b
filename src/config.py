"""Centralized configuration for the Obsidian/Foundry journal bridge.

This module provides:
- PROJECT_ROOT and SRC_DIR paths
- Environment variable access with get_env()
- Automatic .env loading

Usage:
    from config import PROJECT_ROOT, get_env

    level = get_log_level()
"""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from exceptions import ConfigurationError

# Calculate paths once at import time
SRC_DIR = Path(__file__).parent.resolve()
PROJECT_ROOT = SRC_DIR.parent.resolve()

# Load .env from project root
_env_path = PROJECT_ROOT / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_env(key: str, default: Optional[str] = None) -> str:
    """Get environment variable value.

    Args:
        key: Environment variable name
        default: Default value if not set. If None and key not found, raises KeyError.

    Returns:
        Environment variable value or default

    Raises:
        KeyError: If key not found and no default provided
    """
    value = os.environ.get(key)
    if value is not None:
        return value
    if default is not None:
        return default
    raise KeyError(f"Environment variable '{key}' not set and no default provided")


def get_log_level() -> int:
    """Get the logging level from OBSIDIAN_BRIDGE_LOG_LEVEL (default: INFO).

    Raises:
        ConfigurationError: If the value is not a known logging level name
    """
    name = get_env("OBSIDIAN_BRIDGE_LOG_LEVEL", default="INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def get_preserve_line_breaks() -> bool:
    """Whether single newlines in imported Markdown become <br /> tags."""
    value = get_env("OBSIDIAN_BRIDGE_PRESERVE_LINE_BREAKS", default="true")
    return value.strip().lower() in _TRUE_VALUES
