# language_filter/logging_config.py

"""Structured logging configuration for the filter and its demo app."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

FILTER_LOGGER = "language_filter"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        current_time = datetime.now(timezone.utc).isoformat()

        log_data: Dict[str, Any] = {
            "timestamp": current_time,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def configure_logging(level: str = "INFO", filter_level: Optional[str] = None) -> None:
    """Configure JSON logging for the filter and its demo app.

    The filter logs configuration changes (list sizes, replacement policy) at
    INFO and per-text scanning details at DEBUG, so ``filter_level="DEBUG"``
    traces matching without raising the level of every other library.

    Args:
        level: Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        filter_level: Level for the ``language_filter`` logger; defaults to
            inheriting the root level
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger.addHandler(handler)

    filter_logger = logging.getLogger(FILTER_LOGGER)
    if filter_level:
        filter_logger.setLevel(getattr(logging, filter_level.upper(), logging.INFO))
    else:
        filter_logger.setLevel(logging.NOTSET)

    # Suppress noisy libraries
    logging.getLogger("streamlit").setLevel(logging.WARNING)
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Language filter logging configured",
        extra={
            "log_level": level,
            "filter_log_level": filter_level or level,
            "python_version": sys.version,
        },
    )
