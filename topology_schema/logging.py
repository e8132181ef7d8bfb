"""Logging configuration for topology-schema using Loguru.

Provides consistent logging across the package with support for:
- Multiple output formats (console, structured, JSON, rich)
- Package records disabled until logging is configured
- Idempotent configuration

Examples
--------
Basic usage:

>>> from topology_schema.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Generating schema for {exchange_type}", exchange_type="topic")

Configure logging globally::

    from topology_schema.logging import configure_logging
    configure_logging(level="DEBUG", format="json")
"""

import sys
from contextlib import suppress
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich.logging import RichHandler

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["console", "json", "structured", "rich"]

_CURRENT_CONFIG: dict | None = None
_HANDLER_IDS: list[int] = []

# Library records stay silent for host applications until configure_logging() runs
logger.disable("topology_schema")


def configure_logging(
    level: LogLevel = "INFO",
    format: LogFormat = "structured",
    use_color: bool = True,
    include_timestamp: bool = True,
    force_reconfigure: bool = False,
) -> None:
    """Configure global logging for topology-schema.

    Calling this function again with the same settings is a no-op. Only
    handlers added by this function are removed on reconfiguration, so
    handlers installed by pytest or the host application are left alone.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum log level to output
    format : LogFormat, default="structured"
        Output format:
        - "console": Plain single-line output
        - "structured": Loguru format with optional colors
        - "json": Serialized records for log aggregation
        - "rich": Rich console handler
    use_color : bool, default=True
        Use ANSI colors in structured format (disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output
    force_reconfigure : bool, default=False
        Reconfigure even if the settings did not change
    """
    global _CURRENT_CONFIG

    current_config = {
        "level": level,
        "format": format,
        "use_color": use_color,
        "include_timestamp": include_timestamp,
    }

    if not force_reconfigure and current_config == _CURRENT_CONFIG:
        return

    if _CURRENT_CONFIG is None:
        # Loguru's import-time handler logs everything at DEBUG to stderr
        with suppress(ValueError):
            logger.remove(0)

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    if format == "rich":
        rich_handler = RichHandler(
            rich_tracebacks=True,
            markup=True,
            show_time=include_timestamp,
            show_level=True,
            show_path=True,
        )
        handler_id = logger.add(sink=rich_handler, level=level, format="{message}")

    elif format == "json":
        handler_id = logger.add(sink=sys.stderr, level=level, serialize=True)

    elif format == "structured":
        colorize = use_color and sys.stderr.isatty()
        timestamp_fmt = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> " if include_timestamp else ""
        color_level = "<level>{level: <8}</level>" if colorize else "{level: <8}"
        structured_format = (
            f"{timestamp_fmt}[{color_level}]"
            "<cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>"
        )
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=structured_format,
            colorize=colorize,
        )

    else:  # console
        timestamp_fmt = "{time:YYYY-MM-DD HH:mm:ss} " if include_timestamp else ""
        handler_id = logger.add(
            sink=sys.stderr,
            level=level,
            format=f"{timestamp_fmt}{{level: <8}} | {{name}} | {{message}}",
            colorize=False,
        )

    _HANDLER_IDS.append(handler_id)
    logger.enable("topology_schema")
    _CURRENT_CONFIG = current_config


@lru_cache(maxsize=64)
def get_logger(name: str) -> "Logger":
    """Get a logger bound with the given module name.

    Getting a logger never touches handlers. Records from this package stay
    disabled until configure_logging() is called, so importing the library
    leaves the host application's logging untouched.

    Parameters
    ----------
    name : str
        Logger name, typically ``__name__`` of the calling module

    Returns
    -------
    loguru.Logger
        Logger instance bound with the module name
    """
    return logger.bind(module=name)


__all__ = ["LogFormat", "LogLevel", "configure_logging", "get_logger"]
