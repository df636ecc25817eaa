"""Pterodactyl Application API transport.

Builds authenticated requests against the ``/api/application`` namespace,
serializes JSON payloads and turns responses into parsed JSON or
:class:`HttpError`.
"""

import time
from typing import Any

import httpx
import structlog

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/application"

DEFAULT_TIMEOUT = 30.0

DEFAULT_USER_AGENT = "pterodactyl-client-python"


class ApplicationApiError(Exception):
    """Base class for errors raised by the Application API client."""


class HttpError(ApplicationApiError):
    """Raised when the panel answers with a non-2xx status code.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error {status_code}: {body}")


def normalize_base_url(url: str) -> str:
    """Strip a single trailing slash from the panel URL."""
    return url[:-1] if url.endswith("/") else url


class ApplicationApiClient:
    """Async HTTP client for the Pterodactyl Application API.

    Holds read-only configuration (base URL, headers, timeout) and a lazily
    created ``httpx.AsyncClient``. Every call is an independent round trip,
    so one instance may be shared by concurrent tasks on the same event loop.
    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        user_agent: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the Application API client.

        Args:
            base_url: Panel address (e.g., "https://panel.example.com").
            api_key: Application API key sent as a bearer token.
            user_agent: Value of the User-Agent header.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If base_url or api_key is empty or timeout is not
                positive.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if not api_key:
            msg = "api_key cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self.base_url = normalize_base_url(base_url)
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
        }
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client.

        Returns:
            httpx.AsyncClient carrying the static headers and timeout.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self):
        """Close the HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> httpx.URL:
        """Build the full URL for an Application API path.

        Args:
            path: Resource path (e.g., "/users/1").
            params: Optional query parameters; entries whose value is None
                are skipped.

        Returns:
            Absolute URL under the ``/api/application`` namespace.
        """
        query = {key: value for key, value in (params or {}).items() if value is not None}
        return httpx.URL(f"{self.base_url}{API_PREFIX}{path}", params=query)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> dict[str, Any]:
        """Send a request to the Application API.

        Args:
            method: HTTP method.
            path: Resource path below the API prefix.
            params: Optional query parameters.
            json: Optional payload, serialized as JSON.

        Returns:
            Parsed JSON body, or an empty dict for 204 No Content.

        Raises:
            HttpError: If the panel answers with a non-2xx status.
            httpx.TransportError: If the request could not be delivered.
        """
        url = self.build_url(path, params)
        start_time = time.time()

        try:
            logger.debug("Making API request", method=method, url=str(url))
            response = await self.client.request(method, url, json=json)
        except httpx.HTTPError:
            logger.exception(
                "API request failed",
                method=method,
                path=path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            raise

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        if not response.is_success:
            logger.warning(
                "API error response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise HttpError(response.status_code, response.text)

        if response.status_code == httpx.codes.NO_CONTENT:
            return {}

        return response.json()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a POST request with an optional JSON payload."""
        return await self.request("POST", path, params=params, json=data)

    async def patch(
        self,
        path: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a PATCH request with an optional JSON payload."""
        return await self.request("PATCH", path, params=params, json=data)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a DELETE request."""
        return await self.request("DELETE", path, params=params)
