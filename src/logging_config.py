"""
Logger setup for the bridge's command-line entry point.

Library modules only create loggers with logging.getLogger(__name__); handlers
are attached here, once, by whatever runs the conversion. Messages by level:
    DEBUG: Callout and reference counts per document, header near-misses
    INFO: One line per converted page
    WARNING: Frontmatter merge conflicts and unparseable frontmatter
    ERROR: Failed conversions reported by the CLI

Usage:
    from logging_config import setup_logging

    setup_logging("foundry_converters", log_file=Path("bridge.log"))
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from config import get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    console_output: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach console and file handlers to the named logger.

    Calling it again for the same name replaces the handlers rather than
    adding more.

    Args:
        name: Logger name; a package name covers all of its modules
        level: Logging level (default: OBSIDIAN_BRIDGE_LOG_LEVEL, else INFO)
        log_file: Also append to this file, creating parent directories
        console_output: Write to a console stream
        stream: Console stream (default: sys.stdout)

    Returns:
        The configured logger
    """
    if level is None:
        level = get_log_level()

    handlers: List[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(stream or sys.stdout))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
