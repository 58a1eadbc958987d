"""Logging setup for the KubeView TUI.

The terminal belongs to Textual while the dashboard runs, so records go to
a log file when one is configured and to the Textual devtools console
otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from kubeview.constants.defaults import (
    LOG_DATE_FORMAT_DEFAULT,
    LOG_FORMAT_DEFAULT,
    LOG_LEVEL_DEFAULT,
)


def resolve_log_level(level: str | int | None) -> int:
    """Map a level name (or number) to a logging level, defaulting to WARNING."""
    if isinstance(level, int):
        return level
    name = (level or LOG_LEVEL_DEFAULT).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | int | None = None, log_file: str | Path | None = None) -> None:
    """Configure the root logger for the application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file path to write logs to.
    """
    handlers: list[logging.Handler]
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(path, encoding="utf-8")]
    else:
        handlers = [TextualHandler()]

    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT_DEFAULT,
        datefmt=LOG_DATE_FORMAT_DEFAULT,
        handlers=handlers,
        force=True,
    )
