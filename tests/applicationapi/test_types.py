"""Tests for the Pydantic response and request models."""

import pytest

from pterodactyl_client.applicationapi import types


def test_user_two_factor_read_from_2fa_key():
    user = types.User.model_validate({"id": 1, "2fa": True})
    assert user.two_factor is True


def test_user_two_factor_serialized_under_api_name():
    user = types.User(id=1, two_factor=True)
    assert user.model_dump(by_alias=True)["2fa"] is True


def test_response_models_keep_unknown_fields():
    """Fields added by newer panel versions are retained, not rejected."""
    location = types.Location.model_validate({"id": 1, "short": "eu", "color": "blue"})
    assert location.model_extra == {"color": "blue"}


def test_missing_fields_fall_back_to_defaults():
    node = types.Node.model_validate({"id": 3})
    assert node.name == ""
    assert node.allocated_resources is None


def test_single_response_meta_is_optional():
    response = types.LocationResponse.model_validate(
        {"object": "location", "attributes": {"id": 1}},
    )
    assert response.meta is None
    assert response.attributes.id == 1


def test_paginated_response_links():
    response = types.AllocationsResponse.model_validate(
        {
            "object": "list",
            "data": [],
            "meta": {
                "pagination": {
                    "total": 120,
                    "count": 50,
                    "per_page": 50,
                    "current_page": 1,
                    "total_pages": 3,
                    "links": {
                        "next": "https://panel.example.com/api/application/nodes/1/allocations?page=2",
                    },
                },
            },
        },
    )

    pagination = response.meta.pagination
    assert pagination.total_pages == 3
    assert pagination.links.next.endswith("page=2")
    assert pagination.links.previous is None


def test_paginated_response_links_may_be_empty_list():
    """The panel sends an empty JSON array when there are no links."""
    response = types.UsersResponse.model_validate(
        {"object": "list", "data": [], "meta": {"pagination": {"total": 0, "links": []}}},
    )
    assert response.meta.pagination.links.next is None


def test_server_threads_accepts_string():
    server = types.Server.model_validate({"id": 1, "limits": {"threads": "0-3"}})
    assert server.limits.threads == "0-3"


@pytest.mark.parametrize(
    "model",
    [
        types.User,
        types.Location,
        types.Node,
        types.AllocatedResources,
        types.NodeConfiguration,
        types.NodeApiConfiguration,
        types.NodeSslConfiguration,
        types.NodeSystemConfiguration,
        types.NodeSftpConfiguration,
        types.Allocation,
        types.Server,
        types.ServerLimits,
        types.ServerFeatureLimits,
        types.ServerContainer,
        types.ServerDatabase,
        types.ServerRelationships,
    ],
)
def test_entity_accepts_null_for_every_field(model):
    """A null in any field is passed through instead of failing validation."""
    payload = {field.alias or name: None for name, field in model.model_fields.items()}

    instance = model.model_validate(payload)

    for name in model.model_fields:
        assert getattr(instance, name) is None


def test_envelope_accepts_null_meta_and_data():
    response = types.ServersResponse.model_validate(
        {"object": "list", "data": None, "meta": {"pagination": {"total": None, "links": None}}},
    )

    assert response.data is None
    assert response.meta.pagination.total is None
    assert response.meta.pagination.links.next is None
