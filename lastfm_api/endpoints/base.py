"""Shared plumbing for the Last.fm endpoint groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeVar, Union

from pydantic import ValidationError

from lastfm_api.http_client import LastFmHttpClient
from lastfm_api.models.entities import LastFmModel
from lastfm_api.utils.errors import ApiError
from lastfm_api.utils.logging import get_logger
from lastfm_api.utils.params import clean_params

ModelT = TypeVar("ModelT", bound=LastFmModel)

# Last.fm accepts 0/1; booleans are encoded to the same values on the wire.
Autocorrect = Union[Literal[0, 1], bool]


class BaseEndpoint:
    """Base for endpoint groups: holds the transport and decodes results.

    Everything raised by :meth:`LastFmHttpClient.request` reaches the caller
    unchanged.  A body that cannot be decoded into the result model is
    reported as :class:`ApiError` carrying the raw body.
    """

    def __init__(self, http_client: LastFmHttpClient) -> None:
        self._http_client = http_client
        self._logger = get_logger(__name__)

    async def _request(
        self,
        method: str,
        params: Mapping[str, Any],
        response_model: type[ModelT],
    ) -> ModelT:
        """Call *method* and decode the JSON body into *response_model*."""
        data = await self._http_client.request(method, params)
        try:
            return response_model.model_validate(data)
        except ValidationError as exc:
            self._logger.error(
                "lastfm_response_undecodable",
                method=method,
                model=response_model.__name__,
                errors=exc.error_count(),
            )
            raise ApiError(
                message=f"Could not decode {method} response",
                response=data,
            ) from exc

    @staticmethod
    def _clean_params(params: Mapping[str, Any]) -> dict[str, Any]:
        return clean_params(params)
