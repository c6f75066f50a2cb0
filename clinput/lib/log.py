"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for application-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent and customizable logging format.

Example:
    from clinput.lib.log import LOG
    LOG("This is a debug message.")

Environment:
- Set `CLINPUT_BEQUIET=True` to suppress detailed logging output.

Library use:
- The package is disabled in loguru on import, so importing clinput never
  writes to the host program's sinks. Call `logger.enable("clinput")` to
  see its records; the `clinput` console script does so.
"""

from loguru import logger
from typing import Any
import sys

# Distinct logger instance for the package
app_logger = logger.bind(app="CLINPUT")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)


def record_isOwn(record: dict) -> bool:
    """True for records emitted through `app_logger`."""
    return record["extra"].get("app") == "CLINPUT"


# Host handlers are left in place; this one only prints clinput records
app_logger.add(sys.stderr, format=logger_format, filter=record_isOwn)
logger.disable("clinput")


def LOG(*args: Any, level: str = "DEBUG", **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Logs the message only if `beQuiet` is not set in `appsettings`.

    :param args: Positional arguments for the log message.
    :param level: Loguru level name, DEBUG unless stated.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from clinput.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).log(level, *args, **kwargs)
