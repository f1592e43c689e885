#!/usr/bin/env python3
"""
Logging setup for openai-api.

Library modules log through logging.getLogger(__name__) under the
"openai_api" hierarchy and never install handlers themselves. Applications
(and the CLI) opt in with configure_logging():

  # Human-readable console output
  configure_logging(level="DEBUG")

  # JSON lines, e.g. for log shipping
  configure_logging(level="INFO", json_output=True)

  # Both, JSON to a file
  configure_logging(log_file=Path("openai-api.jsonl"))

JSON SCHEMA:
  Required fields: timestamp, level, logger, message
  Optional fields: method, url, status_code, error (when passed via extra=)
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO


LOGGER_NAME = "openai_api"

EXTRA_FIELDS = ("method", "url", "status_code", "error")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for machine parsing."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now().astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["error"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """Format log records for human-readable console output."""

    ICONS = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️',
        'WARNING': '⚠️',
        'ERROR': '❌',
        'CRITICAL': '🚨'
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime('%H:%M:%S')
        icon = self.ICONS.get(record.levelname, 'ℹ️')

        parts = [f"[{timestamp}]", icon, f"[{record.name}]", record.getMessage()]

        if hasattr(record, 'status_code'):
            parts.append(f"(HTTP {record.status_code})")

        if record.exc_info:
            parts.append("\n" + self.formatException(record.exc_info))

        return ' '.join(parts)


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Replaces handlers installed by a previous call, so calling this twice does
    not duplicate output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Use JSONFormatter on the console instead of HumanFormatter
        log_file: Also write JSON lines to this file
        stream: Console stream (default: sys.stderr)

    Returns:
        The configured "openai_api" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(JSONFormatter() if json_output else HumanFormatter())
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger
