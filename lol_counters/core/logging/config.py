from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: Optional[QueueListener] = None


class _RecordEnricher(logging.Filter):
    """Stamps the service name and a snapshot of the bound context on each record."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "counters",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "counters.jsonl",
    console: Optional[bool] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    Console output is on unless ``LOG_CONSOLE=false``; JSON lines go to
    ``log_dir/log_file_name`` through a background queue listener.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    enricher = _RecordEnricher(service)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "true").strip().lower() == "true"
    if console:
        stream = logging.StreamHandler()
        stream.setLevel(lvl)
        stream.setFormatter(ConsoleFormatter())
        stream.addFilter(enricher)
        root.addHandler(stream)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(enricher)
        root.addHandler(queue_handler)
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
