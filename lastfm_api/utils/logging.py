"""Structured logging setup for applications embedding the Last.fm client.

The client emits ``lastfm_*`` structlog events (requests, retries, API
errors) and never configures logging itself.  An application opts in with
:func:`configure_logging`, which:

    - reads the level from :class:`~lastfm_api.config.settings.Settings`
      (``LASTFM_LOG_LEVEL``) unless one is passed explicitly
    - renders JSON in production (``APP_ENV=production``) and coloured
      console output otherwise
    - routes stdlib records (httpx, httpcore) through the same pipeline
    - redacts ``api_key=...`` from every rendered string, since httpx logs
      full request URLs and those carry the key

httpcore is held at WARNING; httpx is held at WARNING unless the client
itself logs at DEBUG, where the client's own ``lastfm_request`` /
``lastfm_response`` events already cover each exchange.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from lastfm_api.config.settings import Settings

_API_KEY_IN_TEXT = re.compile(r"(api_key=)[^&\s\"']+", re.IGNORECASE)
_REDACTED = "[REDACTED]"

_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def redact_api_key(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """structlog processor: mask API keys embedded in URLs or messages."""
    for key, value in event_dict.items():
        if isinstance(value, str) and "api_key=" in value.lower():
            event_dict[key] = _API_KEY_IN_TEXT.sub(rf"\g<1>{_REDACTED}", value)
    return event_dict


def configure_logging(
    settings: Settings | None = None,
    *,
    log_level: str | None = None,
    json_output: bool = False,
) -> structlog.BoundLogger:
    """Configure structlog and stdlib logging for the Last.fm client.

    Args:
        settings: Client settings; ``settings.log_level`` is used when
                  *log_level* is not given.  Defaults to a fresh
                  :class:`Settings` read from the environment.
        log_level: Explicit level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Force JSON output regardless of ``APP_ENV``.

    Returns:
        A configured structlog BoundLogger named ``lastfm_api``.
    """
    if log_level is None:
        if settings is None:
            from lastfm_api.config.settings import Settings

            settings = Settings()
        log_level = settings.log_level
    level = log_level.upper()

    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_api_key,
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _TRANSPORT_LOGGERS:
        transport_level = level if name == "httpx" and level == "DEBUG" else "WARNING"
        logging.getLogger(name).setLevel(transport_level)

    return structlog.get_logger(logger_name="lastfm_api")


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger.

    Does not configure structlog: an embedding application keeps control of
    the pipeline, and unconfigured structlog still prints with its defaults.

    Args:
        name: Logger name, typically the module name.

    Returns:
        A structlog BoundLogger bound with the given name.
    """
    return structlog.get_logger(logger_name=name)
