"""Opt-in discovery of the Last.fm API key from environment variables.

Front-end build tools only expose variables with their own prefix, so the
same key is commonly stored under several names.  They are checked in a
fixed preference order and the first non-empty value wins.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from lastfm_api.utils.logging import get_logger

logger = get_logger(__name__)

API_KEY_ENV_NAMES: tuple[str, ...] = (
    "LASTFM_API_KEY",
    "VITE_LASTFM_API_KEY",
    "REACT_APP_LASTFM_API_KEY",
    "NEXT_PUBLIC_LASTFM_API_KEY",
)


def resolve_api_key_from_environment(
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the first API key found in *environ* (default ``os.environ``).

    Returns ``None`` when none of :data:`API_KEY_ENV_NAMES` is set.
    """
    source = os.environ if environ is None else environ
    for env_name in API_KEY_ENV_NAMES:
        value = source.get(env_name)
        if value:
            # Log the variable name only, never the key.
            logger.info("lastfm_api_key_from_environment", env_name=env_name)
            return value
    return None


__all__ = ["API_KEY_ENV_NAMES", "resolve_api_key_from_environment"]
