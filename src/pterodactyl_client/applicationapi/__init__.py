"""Pterodactyl Application API package.

Provides the async HTTP transport for the panel's ``/api/application``
namespace and the Pydantic models for its envelopes, entities and request
payloads. Resource-level operations live in the resources package.

Exports:
    ApplicationApiClient: HTTP client with bearer authentication and error handling.
    ApplicationApiError: Base class for client errors.
    HttpError: Raised for non-2xx responses.
    types: Module containing Pydantic models for API requests and responses.
    API_PREFIX: Path prefix of every Application API endpoint.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
    DEFAULT_USER_AGENT: User-Agent sent when none is configured.
"""

from . import types
from .client import (
    API_PREFIX,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ApplicationApiClient,
    ApplicationApiError,
    HttpError,
)

__all__ = [
    "API_PREFIX",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ApplicationApiClient",
    "ApplicationApiError",
    "HttpError",
    "types",
]
