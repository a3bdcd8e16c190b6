"""HTTP transport for RongCloud chatroom SDK."""

from __future__ import annotations

import json
import logging
from typing import Protocol

import httpx

from ..constants import USER_AGENT
from ..errors import ApiError, HttpStatusError, NetworkError, TimeoutError
from ..types import ClientConfig
from ..utils.decoding import error_message
from ..utils.encoding import FormRequest
from ..utils.signature import build_auth_headers

logger = logging.getLogger("rongcloud")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport(Protocol):
    """Sends one encoded request and returns the raw reply body."""

    async def post(self, request: FormRequest) -> bytes:
        """Send a POST request.

        Raises:
            TransportError: If the request could not be completed.
            ApiError: If the service rejected the request at the HTTP level.
        """
        ...

    async def close(self) -> None:
        """Release held connections."""
        ...


class HttpTransport:
    """Signed HTTP transport built on ``httpx.AsyncClient``.

    Every request is a single attempt; nothing is retried.

    Attributes:
        config: Client configuration.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Client configuration with credentials and timeout.
            http_transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        self.config = config
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    "Content-Type": FORM_CONTENT_TYPE,
                    "User-Agent": USER_AGENT,
                },
                # One value for connect, read, write and pool
                timeout=httpx.Timeout(self.config.timeout / 1000),
                transport=self._http_transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str) -> str:
        """Append the response format suffix to an endpoint path."""
        return f"{path}.{self.config.response_format.value}"

    async def post(self, request: FormRequest) -> bytes:
        """Sign and send a form request.

        Args:
            request: The encoded request.

        Returns:
            The raw response body.

        Raises:
            TimeoutError: If connecting or reading timed out.
            NetworkError: If there's a network communication failure.
            ApiError: If a non-2xx reply carries a service status code.
            HttpStatusError: For other non-2xx replies.
        """
        client = self._get_client()
        url = self.build_url(request.path)
        headers = build_auth_headers(self.config.app_key, self.config.app_secret)

        logger.debug("POST %s (%d fields)", url, len(request.fields))
        try:
            response = await client.post(url, content=request.encode(), headers=headers)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request to {url} timed out: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

        if response.status_code >= 400:
            self._handle_error_response(response)

        return response.content

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        The service reports most failures as a non-2xx reply whose JSON body
        holds its own status code.

        Args:
            response: The HTTP response.

        Raises:
            ApiError: If the body carries a service status code.
            HttpStatusError: For other HTTP errors.
        """
        try:
            data = response.json()
        except (ValueError, json.JSONDecodeError):
            data = None

        if isinstance(data, dict) and isinstance(data.get("code"), int):
            raise ApiError(data["code"], error_message(data), status_code=response.status_code)

        raise HttpStatusError(
            response.status_code, response.text or f"HTTP {response.status_code}"
        )
