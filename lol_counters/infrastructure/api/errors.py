"""Errors raised by the API clients."""
from typing import Optional


class RiotAPIError(Exception):
    """Base class for every outbound-call failure."""


class TransportError(RiotAPIError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Transport failure for {url}: {cause}")


class RequestError(RiotAPIError):
    """A non-2xx response other than a retried 429."""

    def __init__(self, status_code: int, body: str, url: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status_code} for {url}: {body[:200]}")


class RateLimitExceededError(RequestError):
    """429 responses kept coming after the retry budget was spent."""

    def __init__(self, url: str, body: str, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(429, body, url)


class CatalogueUnavailableError(RiotAPIError):
    """The champion catalogue could not be fetched; a run cannot start without it."""

    def __init__(self, version: str, cause: Optional[BaseException] = None) -> None:
        self.version = version
        self.cause = cause
        super().__init__(f"Champion catalogue unavailable for version {version}: {cause}")
