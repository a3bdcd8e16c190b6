"""Shared fixtures for RongCloud chatroom SDK tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from rongcloud.http import ChatRoomApiClient
from rongcloud.types import ClientConfig
from rongcloud.utils import FormRequest


class RecordingTransport:
    """Transport double that records requests and replays canned replies."""

    def __init__(self) -> None:
        self.requests: list[FormRequest] = []
        self.responses: list[Any] = []
        self.default: Any = {"code": 200}
        self.closed = False

    async def post(self, request: FormRequest) -> bytes:
        self.requests.append(request)
        body = self.responses.pop(0) if self.responses else self.default
        if isinstance(body, bytes):
            return body
        return json.dumps(body).encode()

    async def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> FormRequest:
        return self.requests[-1]


@pytest.fixture
def config() -> ClientConfig:
    """Create a test client configuration."""
    return ClientConfig(
        app_key="test-app-key",
        app_secret="test-app-secret",
        base_url="https://api.example.com",
        timeout=5000,
    )


@pytest.fixture
def transport() -> RecordingTransport:
    """Create a recording transport."""
    return RecordingTransport()


@pytest.fixture
def chatroom(transport: RecordingTransport) -> ChatRoomApiClient:
    """Create a chatroom client backed by the recording transport."""
    return ChatRoomApiClient(transport)
