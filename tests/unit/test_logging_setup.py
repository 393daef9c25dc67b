"""Unit tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from lastfm_api.config.settings import Settings
from lastfm_api.utils.logging import configure_logging, get_logger, redact_api_key

_KEY = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    transport_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, transport_level in transport_levels.items():
        logging.getLogger(name).setLevel(transport_level)


def _last_record(capsys: pytest.CaptureFixture[str]) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_level="INFO", json_output=True)

    get_logger("lastfm_api.test").info("lastfm_request", lastfm_method="artist.getInfo")

    record = _last_record(capsys)
    assert record["event"] == "lastfm_request"
    assert record["lastfm_method"] == "artist.getInfo"
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_comes_from_settings(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Settings(log_level="WARNING"), json_output=True)

    logger = get_logger("lastfm_api.test")
    logger.debug("lastfm_response", status=200)
    logger.warning("lastfm_request_retry", status=503)

    out = capsys.readouterr().out
    assert "lastfm_response" not in out
    assert "lastfm_request_retry" in out
    assert logging.getLogger().level == logging.WARNING


def test_explicit_level_overrides_settings(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(Settings(log_level="ERROR"), log_level="debug", json_output=True)

    get_logger("lastfm_api.test").debug("lastfm_response", status=200)

    assert _last_record(capsys)["event"] == "lastfm_response"


def test_defaults_to_environment_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LASTFM_LOG_LEVEL", "ERROR")

    configure_logging(json_output=True)

    assert logging.getLogger().level == logging.ERROR


def test_production_env_selects_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    configure_logging(log_level="INFO")

    get_logger("lastfm_api.test").info("lastfm_api_key_from_environment", env_name="LASTFM_API_KEY")

    assert _last_record(capsys)["env_name"] == "LASTFM_API_KEY"


def test_api_key_is_redacted_from_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_level="INFO", json_output=True)

    get_logger("lastfm_api.test").info(
        "lastfm_http_error",
        error=f"Timeout for https://ws.audioscrobbler.com/2.0/?method=artist.getInfo&api_key={_KEY}&format=json",
    )

    out = capsys.readouterr().out
    assert _KEY not in out
    assert "api_key=[REDACTED]&format=json" in out


def test_httpx_records_are_redacted(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_level="DEBUG", json_output=True)

    logging.getLogger("httpx").info(
        'HTTP Request: GET %s "HTTP/1.1 200 OK"',
        f"https://ws.audioscrobbler.com/2.0/?method=chart.getTopTags&api_key={_KEY}",
    )

    out = capsys.readouterr().out
    assert "HTTP Request: GET" in out
    assert _KEY not in out


@pytest.mark.parametrize(
    ("log_level", "httpx_level"),
    [("INFO", logging.WARNING), ("DEBUG", logging.DEBUG)],
)
def test_transport_logger_levels(log_level: str, httpx_level: int) -> None:
    configure_logging(log_level=log_level, json_output=True)

    assert logging.getLogger("httpx").level == httpx_level
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_stdlib_records_use_the_same_pipeline() -> None:
    configure_logging(log_level="DEBUG", json_output=True)

    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)


def test_redact_processor_leaves_other_values_alone() -> None:
    event = {"event": "lastfm_request", "lastfm_method": "album.search", "status": 200}
    assert redact_api_key(None, "info", dict(event)) == event
