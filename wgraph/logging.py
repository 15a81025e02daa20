"""Centralized logging configuration for wgraph.

All package modules log through ``get_logger(__name__)``; records propagate to
the ``wgraph`` root logger, which owns the only handler. The handler writes to
stderr because stdout carries command output such as graph dumps.

The default level is INFO unless the ``WGRAPH_LOG_LEVEL`` environment variable
names another one (``DEBUG``, ``warning``, ``10``, ...).
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "wgraph"
LOG_LEVEL_ENV = "WGRAPH_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package root logger has its handler installed
_ROOT_LOGGER_CONFIGURED = False


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level name or number into a ``logging`` level.

    Args:
        level: ``logging.DEBUG``, ``"debug"``, ``"10"``, ... When None, the
            ``WGRAPH_LOG_LEVEL`` environment variable is used, falling back to
            INFO if it is unset or not a known level.

    Returns:
        The numeric level.

    Raises:
        ValueError: If an explicit ``level`` is not a known level name.
    """
    if level is None:
        env_level = os.getenv(LOG_LEVEL_ENV)
        if not env_level:
            return logging.INFO
        try:
            return resolve_level(env_level)
        except ValueError:
            return logging.INFO

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install a single handler on the ``wgraph`` root logger.

    Later calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level; see ``resolve_level`` for the default.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(resolve_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``wgraph`` root, configuring it on first use.

    The returned logger has level NOTSET, so its effective level is the
    package root's.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the package root logger and its handlers.

    Args:
        level: Level number or name, e.g. ``logging.DEBUG`` or ``"warning"``.
    """
    setup_root_logger()

    value = resolve_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(value)
    for handler in root_logger.handlers:
        handler.setLevel(value)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return the whole package to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler so the next call configures from scratch."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
