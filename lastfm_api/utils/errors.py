"""Custom exception hierarchy for the Last.fm client.

All library exceptions inherit from :class:`LastFmError`, which carries an
optional ``provider_name`` (``"lastfm"`` by default) so error handlers that
juggle several music services can tell where a failure came from.

    LastFmError  (base -- catch-all for any client error)
    +-- ConfigurationError       (client cannot issue a request as configured)
    |   +-- AuthenticationError  (no API key at request time)
    +-- ApiError                 (Last.fm reported an error, or HTTP failed)
        +-- RateLimitError       (HTTP 429 or Last.fm error 29)

Last.fm signals most failures inside an HTTP 200 JSON body
(``{"error": 6, "message": "..."}``).  Those and genuine HTTP failures are
both normalised into :class:`ApiError` so callers only ever handle one shape.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

_PROVIDER_NAME = "lastfm"


class ErrorCode(IntEnum):
    """Error codes documented by the Last.fm Web API."""

    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTHENTICATION_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMETERS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    INVALID_METHOD_SIGNATURE = 13
    TEMPORARY_ERROR = 16
    SUSPENDED_API_KEY = 26
    RATE_LIMIT_EXCEEDED = 29


class LastFmError(Exception):
    """Base exception for all Last.fm client errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[lastfm] Artist not found``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = _PROVIDER_NAME,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Configuration errors -- raised before any network I/O
# ---------------------------------------------------------------------------

class ConfigurationError(LastFmError):
    """Raised when the client is not configured well enough to send a request."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = _PROVIDER_NAME,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class AuthenticationError(ConfigurationError):
    """Raised when a request is attempted without an API key."""

    def __init__(
        self,
        message: str = "API key is required",
        provider_name: str | None = _PROVIDER_NAME,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Remote errors
# ---------------------------------------------------------------------------

class ApiError(LastFmError):
    """Raised when Last.fm rejects a request or the HTTP exchange fails.

    Attributes
    ----------
    code:
        The Last.fm error code from the JSON body, when one was present.
    status:
        The HTTP status code, or ``None`` for network-level failures.
    response:
        The decoded response body (or raw text) for caller inspection.
    """

    def __init__(
        self,
        message: str = "Last.fm API error",
        *,
        code: int | None = None,
        status: int | None = None,
        response: Any = None,
        provider_name: str | None = _PROVIDER_NAME,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._code = code
        self._status = status
        self._response = response

    @property
    def code(self) -> int | None:
        return self._code

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def response(self) -> Any:
        return self._response

    @property
    def error_code(self) -> ErrorCode | None:
        """Return ``code`` as an :class:`ErrorCode`, or ``None`` if unknown."""
        if self._code is None:
            return None
        try:
            return ErrorCode(self._code)
        except ValueError:
            return None


class RateLimitError(ApiError):
    """Raised when Last.fm rate-limits the caller (HTTP 429 or error 29).

    Only raised after the single automatic retry has also been refused.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        code: int | None = None,
        status: int | None = None,
        response: Any = None,
        provider_name: str | None = _PROVIDER_NAME,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status=status,
            response=response,
            provider_name=provider_name,
        )
