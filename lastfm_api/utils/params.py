"""Request parameter helpers.

Last.fm treats an empty ``artist=`` the same as a missing one in some methods
and as an invalid value in others, so optional parameters the caller did not
set are dropped before they ever reach the query string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

ParamValue = Union[str, int, float, bool]


def clean_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *params* without ``None`` or empty-string values.

    Every other value, including ``0`` and ``False``, is kept unchanged.
    The input mapping is not modified.
    """
    return {
        key: value
        for key, value in params.items()
        if not (value is None or (isinstance(value, str) and value == ""))
    }


def encode_param(value: ParamValue) -> str | int | float:
    """Encode a parameter value the way Last.fm expects it on the wire.

    Booleans become ``1``/``0`` (e.g. ``autocorrect``); everything else is
    passed through for httpx to stringify.
    """
    if isinstance(value, bool):
        return int(value)
    return value


__all__ = ["ParamValue", "clean_params", "encode_param"]
