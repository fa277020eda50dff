"""Logging configuration for hosts that embed the structured data engine."""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from schema_markup.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that only add noise to markup rendering
QUIET_LOGGERS = ("jinja2",)


def _resolve_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    resolved = getattr(logging, (level or settings.LOG_LEVEL).upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[str, int, None] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """Route engine logs to stdout, and to ``log_file`` when given.

    ``level`` is a level name or number and defaults to ``LOG_LEVEL``;
    unknown names mean INFO. Replaces any handlers already on the root
    logger.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=_resolve_level(level),
        format=format_string or LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
