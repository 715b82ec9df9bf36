from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _base_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


class ConsoleFormatter(logging.Formatter):
    """``time | LEVEL | service | logger:func:line | message | {context}``"""

    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        fields = _base_fields(record)
        parts = [
            fields["timestamp"],
            fields["level"],
            fields["service"] or "-",
            f"{fields['logger']}:{fields['function']}:{fields['line_number']}",
            record.getMessage(),
        ]
        elapsed = getattr(record, "elapsed_ms", None)
        if elapsed is not None:
            parts.append(f"t={elapsed}ms")
        ctx = getattr(record, "log_context", None) or get_context()
        if ctx:
            parts.append(str(ctx))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self._color:
            return line
        return f"{_LEVEL_COLORS.get(record.levelname, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line; bound context goes under ``"context"``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = _base_fields(record)
        payload["message"] = record.getMessage()
        ctx = getattr(record, "log_context", None) or get_context()
        if ctx:
            payload["context"] = ctx
        elapsed = getattr(record, "elapsed_ms", None)
        if elapsed is not None:
            payload["elapsed_ms"] = elapsed
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
