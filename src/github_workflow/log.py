"""Logging configuration for github-workflow.

User-facing messages go through click.echo; this module only wires the
diagnostic log that `--verbose` exposes.
"""

from __future__ import annotations

import logging
import re
import sys

ROOT_LOGGER = "github_workflow"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SECRET_PATTERNS = [
    (r"gh[pousr]_[A-Za-z0-9]{20,}", "[GITHUB_TOKEN]"),
    (r"github_pat_[A-Za-z0-9_]{20,}", "[GITHUB_TOKEN]"),
    (r"Bearer [A-Za-z0-9._-]+", "Bearer [REDACTED]"),
]


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to WARNING.
        stream: Stream for the handler. Defaults to sys.stderr.

    Returns:
        The package root logger.
    """
    log_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s)", logging.getLevelName(log_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. get_logger("gh_cli")."""
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_for_log(text: str) -> str:
    """Redact GitHub tokens from text before it is logged."""
    result = text
    for pattern, replacement in _SECRET_PATTERNS:
        result = re.sub(pattern, replacement, result)
    return result
