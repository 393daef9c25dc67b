"""Configuration module -- exports Settings and the environment key resolver."""

from lastfm_api.config.environment import API_KEY_ENV_NAMES, resolve_api_key_from_environment
from lastfm_api.config.settings import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings

__all__ = [
    "API_KEY_ENV_NAMES",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "Settings",
    "resolve_api_key_from_environment",
]
