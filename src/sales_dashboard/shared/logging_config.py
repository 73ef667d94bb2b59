"""Logging configuration for structured logging."""
import logging
import sys

PACKAGE_LOGGER = "sales_dashboard"


def _numeric_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    return numeric_level


def configure_structured_logging(level: str = "INFO"):
    """Configure structured logging for the dashboard core."""
    numeric_level = _numeric_level(level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",  # JSON already formatted
        stream=sys.stdout,
    )
    set_package_log_level(level)

    # Quiet third-party loggers
    logging.getLogger("pandas").setLevel(logging.WARNING)


def set_package_log_level(level: str):
    """Set the level on the sales_dashboard logger tree only."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(_numeric_level(level))
