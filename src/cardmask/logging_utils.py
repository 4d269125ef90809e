"""Logging configuration helpers with card number redaction."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from cardmask.models.options import MaskOptions
from cardmask.redact import redact_text


class CardNumberFilter(logging.Filter):
    """Filter that masks card numbers found in log records."""

    def __init__(self, options: Optional[MaskOptions] = None):
        super().__init__()
        self._options = options

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = redact_text(message, self._options)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()

        # Sanitize extra dict-like payloads commonly used by logging frameworks.
        for key, value in list(vars(record).items()):
            if key != "msg" and isinstance(value, str):
                setattr(record, key, redact_text(value, self._options))

        return True


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack"] = record.stack_info

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    level_name: str,
    fmt: str,
    options: Optional[MaskOptions] = None,
) -> None:
    """Configure root logging with optional JSON output and card number redaction."""

    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    format_normalized = (fmt or "plain").lower()

    handler = logging.StreamHandler()
    if format_normalized == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)
    handler.addFilter(CardNumberFilter(options))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)


__all__ = ["CardNumberFilter", "JsonFormatter", "configure_logging"]
