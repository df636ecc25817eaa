"""Allocation endpoints (``/nodes/{node_id}/allocations``).

Allocations only exist beneath a node, so every operation takes the node ID
explicitly.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from .. import applicationapi
from ..applicationapi import types
from .params import dump_payload, include_params, page_params

logger = structlog.get_logger(__name__)


class AllocationsResource:
    """Manage IP/port allocations of nodes."""

    def __init__(self, client: applicationapi.ApplicationApiClient):
        self._client = client

    async def list(
        self,
        node_id: int | str,
        include: types.AllocationInclude | Sequence[types.AllocationInclude] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> types.AllocationsResponse:
        """List the allocations of a node.

        Args:
            node_id: Node owning the allocations.
            include: Related resources to embed ("node", "server").
            page: Page number to fetch.
            per_page: Number of allocations per page.

        Returns:
            Paginated envelope of allocations.
        """
        params = {**include_params(include), **page_params(page, per_page)}
        data = await self._client.get(f"/nodes/{node_id}/allocations", params=params)
        return types.AllocationsResponse.model_validate(data)

    async def create(
        self,
        node_id: int | str,
        payload: types.CreateAllocationRequest | Mapping[str, Any],
    ) -> None:
        """Create allocations on a node.

        The panel answers with 204 and does not echo the created allocations;
        list them afterwards to learn their IDs.
        """
        body = dump_payload(payload)
        await self._client.post(f"/nodes/{node_id}/allocations", body)
        logger.debug(
            "Created allocations",
            node_id=node_id,
            ip=body.get("ip"),
            ports=body.get("ports"),
        )

    async def delete(self, node_id: int | str, allocation_id: int | str) -> None:
        """Delete an allocation from a node."""
        await self._client.delete(f"/nodes/{node_id}/allocations/{allocation_id}")
