"""Query parameter and payload helpers shared by the resource modules."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

Include = str | Sequence[str] | None


def include_params(include: Include) -> dict[str, Any]:
    """Build the ``include`` query parameter.

    A sequence of selectors is joined with commas. None or an empty
    selection yields no parameter at all.
    """
    if not include:
        return {}
    if isinstance(include, str):
        return {"include": include}
    return {"include": ",".join(include)}


def filter_params(filters: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Namespace filters as ``filter[<field>]``, skipping unset values."""
    if filters is None:
        return {}
    if isinstance(filters, BaseModel):
        filters = filters.model_dump(exclude_none=True)
    return {f"filter[{key}]": value for key, value in filters.items() if value}


def page_params(page: int | None, per_page: int | None) -> dict[str, Any]:
    """Build pagination query parameters, omitting the ones not given."""
    params: dict[str, Any] = {}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params


def dump_payload(payload: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Serialize a request payload to a JSON-ready dict.

    Only fields the caller set are included, so an explicit None is sent as
    null while untouched optional fields are left out.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return dict(payload)
