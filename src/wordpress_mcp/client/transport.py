"""Async HTTP transport to the WordPress REST API, built on httpx."""

from types import TracebackType
from typing import Any, Optional, Type

import httpx

from ..config import DEFAULT_TIMEOUT
from ..credentials import Credentials
from ..exceptions import RemoteAPIError, TransportError
from ..logger import get_logger
from .request_builder import OutboundRequest

logger = get_logger(__name__)

__all__ = ["WordPressClient"]

_ERROR_PREFIX = "WordPress API error"


class WordPressClient:
    """Issues single, non-retried requests against the WordPress REST API."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes the client.

        Args:
            timeout: Default timeout in seconds for a single request.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "WordPressClient":
        self._get_client()
        return self

    async def __aexit__(
        self, exc_type: Optional[Type[BaseException]], exc_val: Optional[BaseException], exc_tb: Optional[TracebackType]
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the underlying connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed.")

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(transport=self._transport, timeout=self.timeout)
        return self._client

    async def send(self, credentials: Credentials, request: OutboundRequest, timeout: Optional[float] = None) -> Any:
        """Sends one request and returns the decoded JSON response.

        Args:
            credentials: Resolved credentials for this call.
            request: The request to issue.
            timeout: Optional per-call timeout in seconds.

        Returns:
            The response body exactly as the API returned it, or ``None`` for an empty body.

        Raises:
            RemoteAPIError: If the API answers with a non-2xx status or an unreadable body.
            TransportError: If the API cannot be reached or the call times out.
        """
        url = f"{credentials.api_base}{request.path}"
        headers = {
            "Authorization": credentials.authorization_header(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        logger.debug("%s %s", request.method, url)
        try:
            response = await self._get_client().request(
                request.method,
                url,
                params=request.query or None,
                json=request.body,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except httpx.TimeoutException as e:
            msg = self._scrub(f"{_ERROR_PREFIX}: timeout of {timeout or self.timeout}s exceeded ({e})", credentials)
            logger.error(msg)
            raise TransportError(msg) from None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            msg = self._scrub(f"{_ERROR_PREFIX}: {str(e) or type(e).__name__}", credentials)
            logger.error(msg)
            raise TransportError(msg) from None

        if not response.is_success:
            msg = self._scrub(f"{_ERROR_PREFIX}: {self._error_message(response)}", credentials)
            logger.warning("%s %s failed with status %d: %s", request.method, url, response.status_code, msg)
            raise RemoteAPIError(msg, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            msg = f"{_ERROR_PREFIX}: response from {url} is not valid JSON"
            logger.error(msg)
            raise RemoteAPIError(msg, status_code=response.status_code) from None

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extracts the ``message`` field of a WordPress error payload, if there is one."""
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = payload.get("message")
            if isinstance(message, str) and message:
                return message
        return f"Request failed with status code {response.status_code}"

    @staticmethod
    def _scrub(message: str, credentials: Credentials) -> str:
        secret = credentials.secret.get_secret_value()
        header = credentials.authorization_header()
        message = message.replace(header, "Basic ***")
        if secret:
            message = message.replace(secret, "***")
        return message
