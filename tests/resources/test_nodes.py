"""Tests for NodesResource."""

import pytest

from pterodactyl_client.applicationapi import types
from pterodactyl_client.resources import nodes

pytestmark = pytest.mark.anyio

NODE = {
    "id": 3,
    "uuid": "1046d1d1-b8ef-4771-82b1-2b5946d33397",
    "public": True,
    "name": "node-eu-1",
    "description": None,
    "location_id": 1,
    "fqdn": "node1.example.com",
    "scheme": "https",
    "behind_proxy": False,
    "maintenance_mode": False,
    "memory": 16384,
    "memory_overallocate": 0,
    "disk": 102400,
    "disk_overallocate": 0,
    "upload_size": 100,
    "daemon_listen": 8080,
    "daemon_sftp": 2022,
    "daemon_base": "/var/lib/pterodactyl/volumes",
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-01T00:00:00+00:00",
    "allocated_resources": {"memory": 2048, "disk": 10240},
}


@pytest.fixture
def resource(api_client) -> nodes.NodesResource:
    return nodes.NodesResource(api_client)


async def test_list_without_include_sends_empty_query(resource, handler, page):
    handler.respond(200, json=page("node", [NODE]))

    result = await resource.list()

    assert handler.last.url.path == "/api/application/nodes"
    assert handler.last.url.query == b""
    assert result.data[0].attributes.allocated_resources.memory == 2048


async def test_list_include_single_selector(resource, handler):
    await resource.list(include="location")
    assert list(handler.last.url.params.multi_items()) == [("include", "location")]


async def test_list_include_sequence_is_comma_joined(resource, handler):
    await resource.list(include=["allocations", "servers"])
    assert handler.last.url.params["include"] == "allocations,servers"


async def test_list_empty_include_sequence_is_omitted(resource, handler):
    await resource.list(include=[])
    assert handler.last.url.query == b""


async def test_get_by_id(resource, handler, envelope):
    handler.respond(200, json=envelope("node", NODE))

    result = await resource.get_by_id(3)

    assert handler.last.url.path == "/api/application/nodes/3"
    assert result.attributes.fqdn == "node1.example.com"


async def test_get_configuration_parses_bare_document(resource, handler):
    handler.respond(
        200,
        json={
            "debug": False,
            "uuid": NODE["uuid"],
            "token_id": "abc",
            "token": "def",
            "api": {
                "host": "0.0.0.0",
                "port": 8080,
                "ssl": {"enabled": True, "cert": "/cert.pem", "key": "/key.pem"},
                "upload_limit": 100,
            },
            "system": {"data": "/var/lib/pterodactyl/volumes", "sftp": {"bind_port": 2022}},
            "allowed_mounts": [],
            "remote": "https://panel.example.com",
        },
    )

    config = await resource.get_configuration(3)

    assert handler.last.url.path == "/api/application/nodes/3/configuration"
    assert isinstance(config, types.NodeConfiguration)
    assert config.api.ssl.enabled is True
    assert config.system.sftp.bind_port == 2022
    assert config.remote == "https://panel.example.com"


async def test_create_posts_payload(resource, handler, envelope):
    handler.respond(201, json=envelope("node", NODE))
    payload = types.CreateNodeRequest(
        name="node-eu-1",
        location_id=1,
        fqdn="node1.example.com",
        scheme="https",
        memory=16384,
        disk=102400,
        upload_size=100,
        daemon_sftp=2022,
        daemon_listen=8080,
        behind_proxy=False,
    )

    result = await resource.create(payload)

    assert handler.last.method == "POST"
    assert handler.last.url.path == "/api/application/nodes"
    sent = handler.last_json()
    assert sent["name"] == "node-eu-1"
    assert sent["behind_proxy"] is False
    assert "description" not in sent
    assert result.attributes.name == sent["name"]
    assert result.attributes.location_id == sent["location_id"]


async def test_update_patches_node(resource, handler, envelope):
    handler.respond(200, json=envelope("node", {**NODE, "maintenance_mode": True}))

    result = await resource.update(3, {"maintenance_mode": True})

    assert handler.last.method == "PATCH"
    assert handler.last.url.path == "/api/application/nodes/3"
    assert handler.last_json() == {"maintenance_mode": True}
    assert result.attributes.maintenance_mode is True


async def test_delete(resource, handler):
    handler.respond(204)

    assert await resource.delete(3) is None
    assert handler.last.method == "DELETE"
    assert handler.last.url.path == "/api/application/nodes/3"
