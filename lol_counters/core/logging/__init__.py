"""Structured logging: custom levels, bound context, console/JSON output."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, unbind, get_context, log_context
from .levels import LogLevel
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "unbind",
    "get_context",
    "log_context",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
