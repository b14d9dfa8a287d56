"""
Logging hooks for todo_state.

The package only names loggers (`todo_state.*`) and never installs handlers
on import. An embedding app that wants the package's output either configures
logging itself or calls setup_logging() once at startup:

    from todo_state.log import setup_logging
    setup_logging(config["logging"]["level"])
"""
from __future__ import annotations
from typing import Optional, Union
import logging
import os

PACKAGE_LOGGER = "todo_state"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ENV_LEVEL = "TODO_STATE_LOG_LEVEL"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Numeric level for a name like "debug"; `default` when the name is unknown."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level or "").strip().upper(), None)
    return value if isinstance(value, int) else default


def is_level_name(level: Union[int, str, None]) -> bool:
    if isinstance(level, int):
        return True
    return isinstance(getattr(logging, str(level or "").strip().upper(), None), int)


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Root handler + format for apps; level from `level`, else $TODO_STATE_LOG_LEVEL."""
    if level is None:
        level = os.getenv(ENV_LEVEL, "INFO")
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
