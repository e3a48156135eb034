"""HTTP transaction backend adapter."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from transaction_feed.adapters.api_request_logger import log_api_request
from transaction_feed.domain.errors import FetchError
from transaction_feed.domain.ports.transaction_backend import TransactionBackend

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class HttpTransactionBackend(TransactionBackend):
    """Adapter that performs backend calls as ``GET {base_url}/{endpoint}``."""

    def __init__(
        self,
        base_url: str,
        session: "ClientSession",
        timeout_seconds: int = 10,
        log_requests: bool = False,
    ) -> None:
        """Initialize with the backend base URL and an aiohttp session.

        Args:
            base_url: Base URL without trailing slash.
            session: aiohttp session used for all requests.
            timeout_seconds: Total timeout per request.
            log_requests: Log every request at INFO level.
        """
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    def _build_url(self, endpoint: str) -> str:
        return f"{self._base_url}/{endpoint}"

    async def _handle_response(self, response: "ClientResponse", endpoint: str) -> Any:
        """Return the JSON body of a successful response or raise FetchError."""
        if response.status != 200:
            response_text = await response.text()
            logger.error(
                f"Backend returned status {response.status} for {endpoint}: "
                f"{response_text[:200] or '(empty response body)'}"
            )
            raise FetchError(
                endpoint, f"unexpected status {response.status}", status_code=response.status
            )
        return await response.json()

    async def fetch(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch one endpoint from the backend.

        Args:
            endpoint: Logical endpoint name, used as the URL path.
            params: Query parameters (optional).

        Returns:
            Decoded JSON body.

        Raises:
            FetchError: On transport errors, timeouts, non-200 responses or invalid JSON bodies.
        """
        endpoint = str(endpoint)
        url = self._build_url(endpoint)
        query = {k: str(v) for k, v in params.items()} if params else None

        try:
            async with self._session.get(url, params=query, timeout=self._timeout) as response:
                payload = await self._handle_response(response, endpoint)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise FetchError(endpoint, str(e) or type(e).__name__) from e

        log_api_request("GET", url, params, payload, enabled=self._log_requests)
        return payload
