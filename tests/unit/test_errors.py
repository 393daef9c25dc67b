"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from lastfm_api.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    LastFmError,
    RateLimitError,
)


def test_str_prefixes_provider_name() -> None:
    assert str(ApiError("Artist not found", code=6)) == "[lastfm] Artist not found"


def test_str_without_provider_name() -> None:
    assert str(LastFmError("boom", provider_name=None)) == "boom"


def test_authentication_error_is_configuration_error() -> None:
    error = AuthenticationError()
    assert isinstance(error, ConfigurationError)
    assert isinstance(error, LastFmError)
    assert error.message == "API key is required"


def test_rate_limit_error_is_api_error() -> None:
    error = RateLimitError(status=429)
    assert isinstance(error, ApiError)
    assert error.status == 429


def test_api_error_carries_details() -> None:
    body = {"error": 10, "message": "Invalid API key"}
    error = ApiError("Invalid API key", code=10, status=200, response=body)
    assert error.code == 10
    assert error.status == 200
    assert error.response is body
    assert error.error_code is ErrorCode.INVALID_API_KEY


def test_error_code_unknown_or_missing() -> None:
    assert ApiError("odd", code=999).error_code is None
    assert ApiError("network down").error_code is None
