"""Unit tests for the distribution metadata in pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with _PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)["project"]


def test_no_internal_document_as_long_description(project: dict) -> None:
    assert "readme" not in project


def test_runtime_dependencies_cover_imported_libraries(project: dict) -> None:
    names = {dep.split(">")[0].split("=")[0].strip() for dep in project["dependencies"]}
    assert names == {"httpx", "pydantic", "pydantic-settings", "structlog"}


def test_pydantic_floor_supports_number_coercion(project: dict) -> None:
    assert "pydantic>=2.8" in project["dependencies"]
