"""Location endpoints (``/locations``)."""

from collections.abc import Mapping, Sequence
from typing import Any

from .. import applicationapi
from ..applicationapi import types
from .params import dump_payload, include_params, page_params


class LocationsResource:
    """Manage the locations nodes are grouped under."""

    def __init__(self, client: applicationapi.ApplicationApiClient):
        self._client = client

    async def list(
        self,
        include: types.LocationInclude | Sequence[types.LocationInclude] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> types.LocationsResponse:
        """List locations, optionally embedding their nodes or servers."""
        params = {**include_params(include), **page_params(page, per_page)}
        data = await self._client.get("/locations", params=params)
        return types.LocationsResponse.model_validate(data)

    async def get_by_id(
        self,
        location_id: int | str,
        include: types.LocationInclude | Sequence[types.LocationInclude] | None = None,
    ) -> types.LocationResponse:
        data = await self._client.get(
            f"/locations/{location_id}",
            params=include_params(include),
        )
        return types.LocationResponse.model_validate(data)

    async def create(
        self,
        payload: types.CreateLocationRequest | Mapping[str, Any],
    ) -> types.LocationResponse:
        data = await self._client.post("/locations", dump_payload(payload))
        return types.LocationResponse.model_validate(data)

    async def update(
        self,
        location_id: int | str,
        payload: types.UpdateLocationRequest | Mapping[str, Any],
    ) -> types.LocationResponse:
        data = await self._client.patch(f"/locations/{location_id}", dump_payload(payload))
        return types.LocationResponse.model_validate(data)

    async def delete(self, location_id: int | str) -> None:
        await self._client.delete(f"/locations/{location_id}")
