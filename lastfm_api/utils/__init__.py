"""Utility modules for the Last.fm client.

- **errors** -- exception hierarchy rooted at LastFmError; configuration
  problems and remote failures get their own subclasses so callers can
  handle them without broad ``except Exception`` blocks.
- **logging** -- opt-in structlog setup driven by Settings, with API-key
  redaction; coloured console output in development, structured JSON in
  production.
- **params** -- request parameter cleaning and wire encoding.
"""

from lastfm_api.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    LastFmError,
    RateLimitError,
)
from lastfm_api.utils.logging import configure_logging, get_logger, redact_api_key
from lastfm_api.utils.params import ParamValue, clean_params, encode_param

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "ErrorCode",
    "LastFmError",
    "ParamValue",
    "RateLimitError",
    "clean_params",
    "configure_logging",
    "encode_param",
    "get_logger",
    "redact_api_key",
]
