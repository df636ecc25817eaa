"""Resource modules for the Pterodactyl Application API.

Each module wraps one entity family (users, nodes, locations, servers,
allocations) and maps its methods one-to-one onto panel endpoints through
the shared ApplicationApiClient.
"""

from .allocations import AllocationsResource
from .locations import LocationsResource
from .nodes import NodesResource
from .servers import ServersResource
from .users import UsersResource

__all__ = [
    "AllocationsResource",
    "LocationsResource",
    "NodesResource",
    "ServersResource",
    "UsersResource",
]
