"""Node endpoints (``/nodes``).

Nodes are the machines running the Wings daemon. Besides the usual CRUD
operations the panel exposes the daemon configuration of each node.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .. import applicationapi
from ..applicationapi import types
from .params import dump_payload, include_params, page_params


class NodesResource:
    """Manage panel nodes."""

    def __init__(self, client: applicationapi.ApplicationApiClient):
        self._client = client

    async def list(
        self,
        include: types.NodeInclude | Sequence[types.NodeInclude] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> types.NodesResponse:
        """List nodes.

        Args:
            include: Related resources to embed ("allocations", "location",
                "servers").
            page: Page number to fetch.
            per_page: Number of nodes per page.

        Returns:
            Paginated envelope of nodes.
        """
        params = {**include_params(include), **page_params(page, per_page)}
        data = await self._client.get("/nodes", params=params)
        return types.NodesResponse.model_validate(data)

    async def get_by_id(
        self,
        node_id: int | str,
        include: types.NodeInclude | Sequence[types.NodeInclude] | None = None,
    ) -> types.NodeResponse:
        """Fetch a single node."""
        data = await self._client.get(f"/nodes/{node_id}", params=include_params(include))
        return types.NodeResponse.model_validate(data)

    async def get_configuration(self, node_id: int | str) -> types.NodeConfiguration:
        """Fetch the Wings configuration of a node.

        The panel returns this document bare, without an envelope.
        """
        data = await self._client.get(f"/nodes/{node_id}/configuration")
        return types.NodeConfiguration.model_validate(data)

    async def create(
        self,
        payload: types.CreateNodeRequest | Mapping[str, Any],
    ) -> types.NodeResponse:
        """Create a node."""
        data = await self._client.post("/nodes", dump_payload(payload))
        return types.NodeResponse.model_validate(data)

    async def update(
        self,
        node_id: int | str,
        payload: types.UpdateNodeRequest | Mapping[str, Any],
    ) -> types.NodeResponse:
        """Update a node."""
        data = await self._client.patch(f"/nodes/{node_id}", dump_payload(payload))
        return types.NodeResponse.model_validate(data)

    async def delete(self, node_id: int | str) -> None:
        """Delete a node. The panel refuses while servers are still on it."""
        await self._client.delete(f"/nodes/{node_id}")
