import logging
from functools import lru_cache
from typing import cast

from colorama import init

from .components import AppLogger, ColorFormatter, LogStatusFilter
from .constants import PRINT_LEVEL, SUCCESS_LEVEL

LOGGER_NAME = "opsgenie_sync"


@lru_cache(maxsize=1)
def get_app_logger() -> AppLogger:
    """Get the app logger. Cache the result for reuse across the app."""
    # Register the success and print log levels
    logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")
    logging.addLevelName(PRINT_LEVEL, "PRINT")

    # Only the app logger gets the custom class, the global default is restored
    default_class = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        app_logger = logging.getLogger(LOGGER_NAME)
    finally:
        logging.setLoggerClass(default_class)

    # Colorama: ensures reset after each print and force keep ANSI for colors
    init(autoreset=True, strip=False)

    # Color handler for the logger
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("[%(levelname)s] %(message)s"))

    if app_logger.hasHandlers():
        app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(PRINT_LEVEL)

    # Add the filter to the logger
    app_logger.addFilter(LogStatusFilter())

    # Return the app logger
    return cast("AppLogger", app_logger)


def get_log_status_filter() -> LogStatusFilter | None:
    """Return the status filter attached to the app logger, if any."""
    return next(
        (f for f in get_app_logger().filters if isinstance(f, LogStatusFilter)),
        None,
    )
