"""Pterodactyl Application API client.

Async, typed client for the Pterodactyl panel's Application API: user,
node, location, server and allocation administration.
"""

from .applicationapi import ApplicationApiError, HttpError, types
from .config import ClientConfig, config_from_env, configure_logging, load_config
from .panel import PanelClient, create_client, create_client_from_file

__version__ = "0.1.0"

__all__ = [
    "ApplicationApiError",
    "ClientConfig",
    "HttpError",
    "PanelClient",
    "config_from_env",
    "configure_logging",
    "create_client",
    "create_client_from_file",
    "load_config",
    "types",
]
