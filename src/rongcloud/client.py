"""RongCloudClient - Main entry point for RongCloud chatroom SDK."""

from __future__ import annotations

from typing import Any

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS
from .http import ChatRoomApiClient, HttpTransport, Transport
from .types import ClientConfig, ResponseFormat


class RongCloudClient:
    """Main client for the RongCloud chatroom API.

    Holds no state between calls apart from the pooled HTTP connection, so
    one instance can be shared by concurrent tasks.

    Example:
        ```python
        async with RongCloudClient("app-key", "app-secret") as client:
            await client.chatroom.create("room1", "Room One")
            rooms = await client.chatroom.query(["room1"])
            print(rooms[0].name)
        ```
    """

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT_MS,
        response_format: ResponseFormat = ResponseFormat.JSON,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the RongCloud client.

        Args:
            app_key: Application key.
            app_secret: Application secret used to sign requests.
            base_url: Base URL for the API server.
            timeout: Request timeout in milliseconds.
            response_format: Wire format. Only JSON is supported.
            transport: Custom transport. Defaults to a signed httpx transport.

        Raises:
            ValueError: If the configuration is invalid.
        """
        self._config = ClientConfig(
            app_key=app_key,
            app_secret=app_secret,
            base_url=base_url,
            timeout=timeout,
            response_format=response_format,
        )
        self._transport: Transport = transport or HttpTransport(self._config)
        self.chatroom = ChatRoomApiClient(self._transport)

    @property
    def config(self) -> ClientConfig:
        """The client configuration."""
        return self._config

    async def __aenter__(self) -> RongCloudClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the transport and release connections."""
        await self._transport.close()
