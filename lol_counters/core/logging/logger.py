from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from .levels import LogLevel

Message = Union[str, Callable[[], str]]


class StructuredLogger:
    """Thin wrapper over ``logging.Logger`` adding a service tag and lazy messages.

    Passing a callable defers building expensive messages until the level is
    known to be enabled.
    """

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    def _log(self, level: int, msg: Message, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra = dict(kwargs.pop("extra", None) or {})
        if self._service:
            extra.setdefault("service", self._service)
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, extra=extra, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)
