"""Client settings loaded from environment variables via pydantic-settings.

Settings are read from two sources (in priority order):

  1. **Environment variables** -- prefixed with ``LASTFM_``, e.g.
     ``LASTFM_TIMEOUT=5`` maps to the ``timeout`` field.
  2. **.env file** -- key=value lines in the working directory's ``.env``.

Defaults are used when neither source sets a field.  The API key is
deliberately not a field here: it is passed to the client explicitly, or
resolved through :func:`lastfm_api.config.environment.resolve_api_key_from_environment`
when the caller opts in.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_USER_AGENT = "lastfm-api/0.1.0"


class Settings(BaseSettings):
    """Last.fm client settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    # extra="ignore" lets a shared .env carry LASTFM_API_KEY and unrelated keys.
    model_config = SettingsConfigDict(
        env_prefix="LASTFM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Transport ===
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0  # seconds, applied to every request
    user_agent: str = DEFAULT_USER_AGENT

    # === Retry ===
    rate_limit_backoff: float = 1.0  # seconds to wait before retrying a 429

    # === Logging ===
    log_level: str = "INFO"
