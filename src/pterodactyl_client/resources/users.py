"""User administration endpoints (``/users``)."""

from collections.abc import Mapping, Sequence
from typing import Any

from .. import applicationapi
from ..applicationapi import types
from .params import dump_payload, filter_params, include_params, page_params


class UsersResource:
    """List, fetch, create, update and delete panel users."""

    def __init__(self, client: applicationapi.ApplicationApiClient):
        self._client = client

    async def list(
        self,
        include: types.UserInclude | Sequence[types.UserInclude] | None = None,
        filters: types.UserFilter | Mapping[str, Any] | None = None,
        sort: types.UserSort | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> types.UsersResponse:
        """List users.

        Args:
            include: Related resources to embed (e.g., "servers").
            filters: Field filters, sent as ``filter[<field>]``.
            sort: Sort key ("id", "uuid", or descending with a "-" prefix).
            page: Page number to fetch.
            per_page: Number of users per page.

        Returns:
            Paginated envelope of users.
        """
        params = {
            **include_params(include),
            **filter_params(filters),
            **page_params(page, per_page),
        }
        if sort:
            params["sort"] = sort

        data = await self._client.get("/users", params=params)
        return types.UsersResponse.model_validate(data)

    async def get_by_id(
        self,
        user_id: int | str,
        include: types.UserInclude | Sequence[types.UserInclude] | None = None,
    ) -> types.UserResponse:
        """Fetch a user by panel ID."""
        data = await self._client.get(f"/users/{user_id}", params=include_params(include))
        return types.UserResponse.model_validate(data)

    async def get_by_external_id(
        self,
        external_id: str,
        include: types.UserInclude | Sequence[types.UserInclude] | None = None,
    ) -> types.UserResponse:
        """Fetch a user by the caller-supplied external ID."""
        data = await self._client.get(
            f"/users/external/{external_id}",
            params=include_params(include),
        )
        return types.UserResponse.model_validate(data)

    async def create(
        self,
        payload: types.CreateUserRequest | Mapping[str, Any],
    ) -> types.UserResponse:
        """Create a user and return the panel's copy of it."""
        data = await self._client.post("/users", dump_payload(payload))
        return types.UserResponse.model_validate(data)

    async def update(
        self,
        user_id: int | str,
        payload: types.UpdateUserRequest | Mapping[str, Any],
    ) -> types.UserResponse:
        """Update the given fields of a user."""
        data = await self._client.patch(f"/users/{user_id}", dump_payload(payload))
        return types.UserResponse.model_validate(data)

    async def delete(self, user_id: int | str) -> None:
        """Delete a user."""
        await self._client.delete(f"/users/{user_id}")
