"""HTTP layer for RongCloud chatroom SDK.

- Transport: Protocol for sending one encoded request
- HttpTransport: Signed httpx transport
- ChatRoomApiClient: Chatroom operations
"""

from .base_client import HttpTransport, Transport
from .chatroom_client import ChatRoomApiClient

__all__ = [
    "ChatRoomApiClient",
    "HttpTransport",
    "Transport",
]
