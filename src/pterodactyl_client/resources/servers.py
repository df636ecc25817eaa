"""Server endpoints (``/servers``).

The panel splits server updates into independent sections: details (name,
owner, external ID, description), build (limits and allocations) and
startup (command, environment, egg, image). Each has its own method.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .. import applicationapi
from ..applicationapi import types
from .params import dump_payload, include_params, page_params


class ServersResource:
    """Manage game servers."""

    def __init__(self, client: applicationapi.ApplicationApiClient):
        self._client = client

    async def list(
        self,
        include: types.ServerInclude | Sequence[types.ServerInclude] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> types.ServersResponse:
        """List servers.

        Args:
            include: Related resources to embed (e.g., "databases", "egg").
            page: Page number to fetch.
            per_page: Number of servers per page.

        Returns:
            Paginated envelope of servers.
        """
        params = {**include_params(include), **page_params(page, per_page)}
        data = await self._client.get("/servers", params=params)
        return types.ServersResponse.model_validate(data)

    async def get_by_id(
        self,
        server_id: int | str,
        include: types.ServerInclude | Sequence[types.ServerInclude] | None = None,
    ) -> types.ServerResponse:
        """Fetch a server by panel ID."""
        data = await self._client.get(f"/servers/{server_id}", params=include_params(include))
        return types.ServerResponse.model_validate(data)

    async def get_by_external_id(
        self,
        external_id: str,
        include: types.ServerInclude | Sequence[types.ServerInclude] | None = None,
    ) -> types.ServerResponse:
        """Fetch a server by the caller-supplied external ID."""
        data = await self._client.get(
            f"/servers/external/{external_id}",
            params=include_params(include),
        )
        return types.ServerResponse.model_validate(data)

    async def create(
        self,
        payload: types.CreateServerRequest | Mapping[str, Any],
    ) -> types.ServerResponse:
        """Create a server and return the panel's copy of it."""
        data = await self._client.post("/servers", dump_payload(payload))
        return types.ServerResponse.model_validate(data)

    async def update_details(
        self,
        server_id: int | str,
        payload: types.UpdateServerDetails | Mapping[str, Any],
    ) -> types.ServerResponse:
        """Update name, owner, external ID or description."""
        return await self._update_section(server_id, "details", payload)

    async def update_build(
        self,
        server_id: int | str,
        payload: types.UpdateServerBuild | Mapping[str, Any],
    ) -> types.ServerResponse:
        """Update resource limits and allocations."""
        return await self._update_section(server_id, "build", payload)

    async def update_startup(
        self,
        server_id: int | str,
        payload: types.UpdateServerStartup | Mapping[str, Any],
    ) -> types.ServerResponse:
        """Update startup command, environment, egg or docker image."""
        return await self._update_section(server_id, "startup", payload)

    async def delete(self, server_id: int | str) -> None:
        """Delete a server."""
        await self._client.delete(f"/servers/{server_id}")

    async def _update_section(
        self,
        server_id: int | str,
        section: str,
        payload: Any,
    ) -> types.ServerResponse:
        data = await self._client.patch(
            f"/servers/{server_id}/{section}",
            dump_payload(payload),
        )
        return types.ServerResponse.model_validate(data)
