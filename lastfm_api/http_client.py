"""HTTP transport for the Last.fm Web API.

Every Last.fm method is served from a single endpoint and selected with the
``method`` query parameter.  :class:`LastFmHttpClient` owns the API key and an
``httpx.AsyncClient``, injects ``method`` / ``api_key`` / ``format=json`` into
each request, and normalises both failure channels into
:class:`~lastfm_api.utils.errors.ApiError`:

    - HTTP failures (network errors, non-2xx statuses)
    - API failures reported inside an HTTP 200 body: ``{"error": 6, "message": ...}``

Transient HTTP statuses are retried exactly once; a 429 waits a fixed
backoff first.  API-level errors are never retried.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from lastfm_api.config.settings import Settings
from lastfm_api.utils.errors import ApiError, AuthenticationError, ErrorCode, RateLimitError
from lastfm_api.utils.logging import get_logger
from lastfm_api.utils.params import clean_params, encode_param

_RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})
_RESERVED_PARAMS = ("method", "api_key", "format")


@dataclass(frozen=True)
class RequestOptions:
    """Per-request transport options.

    Attributes
    ----------
    http_method:
        ``"GET"`` sends parameters as the query string; ``"POST"`` sends them
        as a form-encoded body.
    headers:
        Extra headers merged over the client defaults.
    """

    http_method: Literal["GET", "POST"] = "GET"
    headers: Mapping[str, str] | None = None


class LastFmHttpClient:
    """Authenticated Last.fm transport with a single retry on transient failures."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._api_key: str = api_key or ""
        self._base_url = self._settings.base_url
        self._logger = get_logger(__name__)
        self._http = httpx.AsyncClient(
            timeout=self._settings.timeout,
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
            event_hooks={"response": [self._log_response]},
            transport=transport,
        )

    # -- Key management --------------------------------------------------------

    def set_api_key(self, api_key: str) -> None:
        """Replace the API key used for subsequent requests."""
        self._api_key = api_key

    def clear_api_key(self) -> None:
        self._api_key = ""

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def get_http_client(self) -> httpx.AsyncClient:
        """Return the underlying ``httpx.AsyncClient`` for advanced usage."""
        return self._http

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- Requests --------------------------------------------------------------

    async def request(
        self,
        method: str,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Call the Last.fm *method* and return the decoded JSON body.

        Parameters
        ----------
        method:
            Last.fm method name, e.g. ``"artist.getInfo"``.
        params:
            Method parameters.  ``None`` / empty-string values are dropped;
            ``method``, ``api_key`` and ``format`` are always set by the client.
        options:
            Transport options (HTTP verb, extra headers).

        Raises
        ------
        AuthenticationError
            If no API key is set.  Raised before any network I/O.
        ApiError
            If Last.fm reports an error or the HTTP exchange fails.
        """
        if not self._api_key:
            raise AuthenticationError()

        options = options or RequestOptions()
        request_params = self._build_params(method, params or {})

        retried = False
        while True:
            # Logged here rather than in an httpx hook: POST carries the method in the body.
            self._logger.debug(
                "lastfm_request",
                lastfm_method=method,
                http_method=options.http_method,
                retry=retried,
            )
            try:
                response = await self._send(options, request_params)
            except httpx.HTTPError as exc:
                self._logger.error(
                    "lastfm_http_error",
                    method=method,
                    error=str(exc) or type(exc).__name__,
                )
                raise ApiError(message=str(exc) or "Request failed") from exc

            if response.is_success:
                return self._parse_success(method, response)

            status = response.status_code
            if status in _RETRYABLE_STATUS_CODES and not retried:
                retried = True
                delay = self._settings.rate_limit_backoff if status == 429 else 0.0
                self._logger.warning(
                    "lastfm_request_retry",
                    method=method,
                    status=status,
                    delay_s=delay,
                )
                if delay > 0:
                    await asyncio.sleep(delay)
                continue

            raise self._http_error(method, response)

    # -- Private helpers -------------------------------------------------------

    def _build_params(self, method: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """Merge cleaned caller params with the reserved parameters."""
        cleaned = clean_params(params)
        overridden = [key for key in _RESERVED_PARAMS if key in cleaned]
        if overridden:
            self._logger.warning(
                "lastfm_reserved_param_overridden",
                method=method,
                params=overridden,
            )
        merged = {
            **cleaned,
            "method": method,
            "api_key": self._api_key,
            "format": "json",
        }
        return {key: encode_param(value) for key, value in merged.items()}

    async def _send(self, options: RequestOptions, params: dict[str, Any]) -> httpx.Response:
        headers = dict(options.headers) if options.headers else None
        if options.http_method == "POST":
            return await self._http.post(self._base_url, data=params, headers=headers)
        return await self._http.get(self._base_url, params=params, headers=headers)

    def _parse_success(self, method: str, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            self._logger.error(
                "lastfm_invalid_json",
                method=method,
                status=response.status_code,
            )
            raise ApiError(
                message="Last.fm returned a non-JSON response",
                status=response.status_code,
                response=response.text,
            ) from exc

        if isinstance(data, dict) and data.get("error"):
            error = _make_api_error(
                message=data.get("message") or "Last.fm API error",
                code=_as_int(data.get("error")),
                status=response.status_code,
                response=data,
            )
            self._logger.error(
                "lastfm_api_error",
                method=method,
                code=error.code,
                message=error.message,
            )
            raise error

        return data

    def _http_error(self, method: str, response: httpx.Response) -> ApiError:
        body = _decode_body(response)
        message: str | None = None
        code: int | None = None
        if isinstance(body, dict):
            message = body.get("message") or None
            code = _as_int(body.get("error"))

        status = response.status_code
        error = _make_api_error(
            message=message or f"HTTP {status} {response.reason_phrase}".strip(),
            code=code,
            status=status,
            response=body,
        )
        self._logger.error(
            "lastfm_http_error",
            method=method,
            status=status,
            code=code,
        )
        return error

    async def _log_response(self, response: httpx.Response) -> None:
        self._logger.debug(
            "lastfm_response",
            status=response.status_code,
            http_method=response.request.method,
        )


def _make_api_error(
    message: str,
    code: int | None,
    status: int | None,
    response: Any,
) -> ApiError:
    if status == 429 or code == ErrorCode.RATE_LIMIT_EXCEEDED:
        return RateLimitError(message=message, code=code, status=status, response=response)
    return ApiError(message=message, code=code, status=status, response=response)


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON body if there is one, else the raw text (or ``None``)."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


__all__ = ["LastFmHttpClient", "RequestOptions"]
