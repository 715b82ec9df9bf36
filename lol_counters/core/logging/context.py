from __future__ import annotations

import contextvars
from typing import Any, Dict

_log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_log_context.get())


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_log_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


def bind(**values: Any) -> None:
    _log_context.set(_merged(values))


def unbind(*keys: str) -> None:
    current = dict(_log_context.get())
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


class log_context(object):
    """Bind values for the duration of a ``with`` block (restored on exit).

    Each asyncio task gets its own copy of the context, so values bound inside
    one collector loop never leak into a concurrently running batch.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        merged = _merged(self._values)
        self._token = _log_context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None
        return False
