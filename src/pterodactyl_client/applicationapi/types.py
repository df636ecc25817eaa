"""Response and request types for the Pterodactyl Application API.

Pydantic models mirroring the envelopes, entities and mutation payloads of
the API. Response fields all have a default, accept null and keep unknown
keys, so they describe what the panel sends without rejecting what it adds
or leaves empty.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for response models: every field nullable, extra fields kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestModel(BaseModel):
    """Base for request payloads sent to the API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class PaginationLinks(ApiModel):
    previous: str | None = None
    next: str | None = None


class PaginationMeta(ApiModel):
    total: int | None = 0
    count: int | None = 0
    per_page: int | None = 0
    current_page: int | None = 0
    total_pages: int | None = 0
    links: PaginationLinks | None = Field(default_factory=PaginationLinks)

    @field_validator("links", mode="before")
    @classmethod
    def empty_links_as_dict(cls, value):
        # The panel serializes an empty links object as []
        return value or {}


class ResponseMeta(ApiModel):
    pagination: PaginationMeta | None = Field(default_factory=PaginationMeta)


class ResourceMeta(ApiModel):
    resource: str | None = ""


class SingleResponse(ApiModel, Generic[T]):
    """Envelope around a single entity: ``{object, attributes, meta?}``."""

    object: str | None = ""
    attributes: T
    meta: ResourceMeta | None = None


class PaginatedResponse(ApiModel, Generic[T]):
    """Envelope around a page of entities plus pagination metadata."""

    object: str | None = "list"
    data: list[SingleResponse[T]] | None = Field(default_factory=list)
    meta: ResponseMeta | None = Field(default_factory=ResponseMeta)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

UserInclude = Literal["servers"]

UserSort = Literal["id", "uuid", "-id", "-uuid"]


class User(ApiModel):
    id: int | None = 0
    external_id: str | None = None
    uuid: str | None = ""
    username: str | None = ""
    email: str | None = ""
    first_name: str | None = ""
    last_name: str | None = ""
    language: str | None = ""
    root_admin: bool | None = False
    # The API names this field "2fa", which is not a valid identifier
    two_factor: bool | None = Field(False, alias="2fa")
    created_at: str | None = ""
    updated_at: str | None = ""


class CreateUserRequest(RequestModel):
    email: str
    username: str
    first_name: str
    last_name: str
    external_id: str | None = None
    password: str | None = None
    root_admin: bool | None = None
    language: str | None = None


class UpdateUserRequest(RequestModel):
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    external_id: str | None = None
    password: str | None = None
    root_admin: bool | None = None
    language: str | None = None


class UserFilter(RequestModel):
    """Filters for listing users, sent as ``filter[<field>]``."""

    email: str | None = None
    uuid: str | None = None
    username: str | None = None
    external_id: str | None = None


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------

LocationInclude = Literal["nodes", "servers"]


class Location(ApiModel):
    id: int | None = 0
    short: str | None = ""
    long: str | None = None
    created_at: str | None = ""
    updated_at: str | None = ""


class CreateLocationRequest(RequestModel):
    short: str
    long: str | None = None


class UpdateLocationRequest(RequestModel):
    short: str | None = None
    long: str | None = None


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

NodeInclude = Literal["allocations", "location", "servers"]


class AllocatedResources(ApiModel):
    memory: int | None = 0
    disk: int | None = 0


class Node(ApiModel):
    id: int | None = 0
    uuid: str | None = ""
    public: bool | None = False
    name: str | None = ""
    description: str | None = None
    location_id: int | None = 0
    fqdn: str | None = ""
    scheme: str | None = ""
    behind_proxy: bool | None = False
    maintenance_mode: bool | None = False
    memory: int | None = 0
    memory_overallocate: int | None = 0
    disk: int | None = 0
    disk_overallocate: int | None = 0
    upload_size: int | None = 0
    daemon_listen: int | None = 0
    daemon_sftp: int | None = 0
    daemon_base: str | None = ""
    created_at: str | None = ""
    updated_at: str | None = ""
    allocated_resources: AllocatedResources | None = None


class NodeSslConfiguration(ApiModel):
    enabled: bool | None = False
    cert: str | None = ""
    key: str | None = ""


class NodeApiConfiguration(ApiModel):
    host: str | None = ""
    port: int | None = 0
    ssl: NodeSslConfiguration | None = Field(default_factory=NodeSslConfiguration)
    upload_limit: int | None = 0


class NodeSftpConfiguration(ApiModel):
    bind_port: int | None = 0


class NodeSystemConfiguration(ApiModel):
    data: str | None = ""
    sftp: NodeSftpConfiguration | None = Field(default_factory=NodeSftpConfiguration)


class NodeConfiguration(ApiModel):
    """Wings daemon configuration for a node (not wrapped in an envelope)."""

    debug: bool | None = False
    uuid: str | None = ""
    token_id: str | None = ""
    token: str | None = ""
    api: NodeApiConfiguration | None = Field(default_factory=NodeApiConfiguration)
    system: NodeSystemConfiguration | None = Field(default_factory=NodeSystemConfiguration)
    remote: str | None = ""


class CreateNodeRequest(RequestModel):
    name: str
    location_id: int
    fqdn: str
    scheme: str
    memory: int
    disk: int
    upload_size: int
    daemon_sftp: int
    daemon_listen: int
    memory_overallocate: int | None = None
    disk_overallocate: int | None = None
    description: str | None = None
    behind_proxy: bool | None = None
    maintenance_mode: bool | None = None


class UpdateNodeRequest(CreateNodeRequest):
    pass


# ---------------------------------------------------------------------------
# Allocations
# ---------------------------------------------------------------------------

AllocationInclude = Literal["node", "server"]


class Allocation(ApiModel):
    id: int | None = 0
    ip: str | None = ""
    alias: str | None = None
    port: int | None = 0
    notes: str | None = None
    assigned: bool | None = False


class CreateAllocationRequest(RequestModel):
    ip: str
    ports: list[str]


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------

ServerInclude = Literal[
    "allocations",
    "user",
    "subusers",
    "pack",
    "nest",
    "egg",
    "variables",
    "location",
    "node",
    "databases",
]


class ServerLimits(ApiModel):
    memory: int | None = 0
    swap: int | None = 0
    disk: int | None = 0
    io: int | None = 0
    cpu: int | None = 0
    threads: str | int | None = None


class ServerFeatureLimits(ApiModel):
    databases: int | None = 0
    allocations: int | None = 0
    backups: int | None = 0


class ServerContainer(ApiModel):
    startup_command: str | None = ""
    image: str | None = ""
    installed: bool | None = False
    environment: dict[str, str | int | bool | None] | None = Field(default_factory=dict)


class ServerDatabase(ApiModel):
    id: int | None = 0
    server: int | None = 0
    host: int | None = 0
    database: str | None = ""
    username: str | None = ""
    remote: str | None = ""
    max_connections: int | None = None
    created_at: str | None = ""
    updated_at: str | None = ""


class ServerDatabaseList(ApiModel):
    object: str | None = "list"
    data: list[SingleResponse[ServerDatabase]] | None = Field(default_factory=list)


class ServerRelationships(ApiModel):
    databases: ServerDatabaseList | None = None


class Server(ApiModel):
    id: int | None = 0
    external_id: str | None = None
    uuid: str | None = ""
    identifier: str | None = ""
    name: str | None = ""
    description: str | None = None
    suspended: bool | None = False
    limits: ServerLimits | None = Field(default_factory=ServerLimits)
    feature_limits: ServerFeatureLimits | None = Field(default_factory=ServerFeatureLimits)
    user: int | None = 0
    node: int | None = 0
    allocation: int | None = 0
    nest: int | None = 0
    egg: int | None = 0
    pack: int | None = None
    container: ServerContainer | None = Field(default_factory=ServerContainer)
    updated_at: str | None = ""
    created_at: str | None = ""
    relationships: ServerRelationships | None = None


class PartialServerLimits(RequestModel):
    memory: int | None = None
    swap: int | None = None
    disk: int | None = None
    io: int | None = None
    cpu: int | None = None
    threads: str | int | None = None


class PartialServerFeatureLimits(RequestModel):
    databases: int | None = None
    allocations: int | None = None
    backups: int | None = None


class ServerAllocationRequest(RequestModel):
    default: int
    additional: list[int] = Field(default_factory=list)


class CreateServerRequest(RequestModel):
    name: str
    user: int
    egg: int
    docker_image: str
    startup: str
    environment: dict[str, str]
    limits: PartialServerLimits
    feature_limits: PartialServerFeatureLimits
    allocation: ServerAllocationRequest
    external_id: str | None = None
    description: str | None = None
    skip_scripts: bool | None = None
    oom_disabled: bool | None = None


class UpdateServerDetails(RequestModel):
    name: str | None = None
    user: int | None = None
    external_id: str | None = None
    description: str | None = None


class UpdateServerBuild(RequestModel):
    allocation: int | None = None
    limits: PartialServerLimits | None = None
    feature_limits: PartialServerFeatureLimits | None = None
    add_allocations: list[int] | None = None
    remove_allocations: list[int] | None = None
    oom_disabled: bool | None = None


class UpdateServerStartup(RequestModel):
    startup: str | None = None
    environment: dict[str, str] | None = None
    egg: int | None = None
    docker_image: str | None = None
    skip_scripts: bool | None = None


# ---------------------------------------------------------------------------
# Response aliases
# ---------------------------------------------------------------------------

UserResponse = SingleResponse[User]
UsersResponse = PaginatedResponse[User]
LocationResponse = SingleResponse[Location]
LocationsResponse = PaginatedResponse[Location]
NodeResponse = SingleResponse[Node]
NodesResponse = PaginatedResponse[Node]
AllocationResponse = SingleResponse[Allocation]
AllocationsResponse = PaginatedResponse[Allocation]
ServerResponse = SingleResponse[Server]
ServersResponse = PaginatedResponse[Server]
