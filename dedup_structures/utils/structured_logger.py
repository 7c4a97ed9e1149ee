"""
Structured logging utilities for the deduplication structures.

This module provides JSON-formatted logging so that eviction and
suppression events can be parsed by log aggregation tools.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

# Standard LogRecord attributes that are never copied into the JSON payload
_SKIP_FIELDS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName'
}


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Formats log records as JSON with consistent fields including:
    - timestamp: ISO 8601 timestamp
    - level: Log level (DEBUG, INFO, WARNING, ERROR)
    - component: Logger name
    - message: Log message
    - Additional fields from extra dict
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'component': record.name,
            'message': record.getMessage()
        }

        for key, value in record.__dict__.items():
            if key not in _SKIP_FIELDS and not key.startswith('_'):
                # Handle non-serializable types
                try:
                    json.dumps(value)
                    log_entry[key] = value
                except (TypeError, ValueError):
                    log_entry[key] = str(value)

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def configure_structured_logging(
    level: int = logging.INFO,
    use_json: bool = True
) -> None:
    """
    Configure structured logging for the entire application.

    Replaces the root logger handlers with a single stdout handler.

    Args:
        level: Logging level (default: INFO)
        use_json: Whether to use JSON formatting (default: True)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if use_json:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.info(
        f"Configured structured logging: level={logging.getLevelName(level)}, json={use_json}"
    )


def configure_from_settings(settings) -> None:
    """
    Configure structured logging from a Settings instance.

    Args:
        settings: dedup_structures.config.Settings
    """
    configure_structured_logging(
        level=logging.getLevelName(settings.log_level.upper()),
        use_json=settings.log_json
    )


def log_event(
    logger: logging.Logger,
    event: str,
    level: int = logging.INFO,
    **fields: Any
) -> None:
    """
    Log a structured event with its fields attached as extras.

    Args:
        logger: Logger instance
        event: Event name
        level: Logging level (default: INFO)
        **fields: Additional structured fields
    """
    extra: Dict[str, Any] = {'event': event}
    extra.update(fields)
    logger.log(level, event, extra=extra)
