"""Top-level client bundling all Application API resources."""

import os

import httpx
import structlog

from . import applicationapi, config, resources

logger = structlog.get_logger(__name__)


class PanelClient:
    """Entry point for the Pterodactyl Application API.

    Owns a single ApplicationApiClient shared by every resource. Use it as
    an async context manager, or call :meth:`aclose` when done.

    Attributes:
        users: User administration.
        nodes: Node administration.
        locations: Location administration.
        servers: Server administration.
        allocations: Node allocations; every method takes the node ID.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        user_agent: str | None = None,
        timeout: float = applicationapi.DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api = applicationapi.ApplicationApiClient(
            base_url=url,
            api_key=api_key,
            user_agent=user_agent,
            timeout=timeout,
            transport=transport,
        )
        self.users = resources.UsersResource(self.api)
        self.nodes = resources.NodesResource(self.api)
        self.locations = resources.LocationsResource(self.api)
        self.servers = resources.ServersResource(self.api)
        self.allocations = resources.AllocationsResource(self.api)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the shared HTTP client."""
        await self.api.aclose()


def create_client(
    client_config: config.ClientConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PanelClient:
    """Construct a PanelClient from validated config."""
    client = PanelClient(
        url=client_config.url,
        api_key=client_config.api_key,
        user_agent=client_config.user_agent,
        timeout=client_config.timeout,
        transport=transport,
    )
    logger.info("Created panel client", base_url=client.api.base_url)
    return client


def create_client_from_file(config_path: str | None = None) -> PanelClient:
    """Create a PanelClient using a config path or environment default."""
    resolved_path = config_path or os.environ.get(
        config.CONFIG_ENV_VAR,
        config.DEFAULT_CONFIG_PATH,
    )
    client_config = config.load_config(resolved_path)
    config.configure_logging(client_config.log_level)
    return create_client(client_config)
