"""Integration tests against the live RongCloud API.

Requirements:
- .env file with RONGCLOUD_APP_KEY and RONGCLOUD_APP_SECRET
- Optional RONGCLOUD_BASE_URL for a regional data center
- Network access to the API server

Each test creates its own chatroom under a random ID and destroys it
afterwards.
"""

import os
import uuid

import pytest
from dotenv import load_dotenv

from rongcloud import ApiError, ChatroomOptions, RongCloudClient

# Load environment variables
load_dotenv()

pytestmark = pytest.mark.integration


def get_env_or_skip(name: str) -> str:
    """Get environment variable or skip test if not set."""
    value = os.getenv(name)
    if not value:
        pytest.skip(f"{name} environment variable not set")
    return value


@pytest.fixture(scope="module")
def api_config() -> dict[str, str]:
    """Get API configuration from environment."""
    config = {
        "app_key": get_env_or_skip("RONGCLOUD_APP_KEY"),
        "app_secret": get_env_or_skip("RONGCLOUD_APP_SECRET"),
    }
    base_url = os.getenv("RONGCLOUD_BASE_URL")
    if base_url:
        config["base_url"] = base_url
    return config


@pytest.fixture
def chatroom_id() -> str:
    """Generate a unique chatroom ID."""
    return f"it-{uuid.uuid4().hex[:16]}"


class TestChatroomLifecycle:
    """Create, inspect and destroy a chatroom."""

    @pytest.mark.asyncio
    async def test_create_query_destroy(self, api_config: dict[str, str], chatroom_id: str) -> None:
        """Test the basic lifecycle."""
        async with RongCloudClient(**api_config) as client:
            await client.chatroom.create_new(chatroom_id, ChatroomOptions())
            try:
                info = await client.chatroom.get(chatroom_id)
                assert info.chatroom_id == chatroom_id
                assert info.member_count == 0
            finally:
                await client.chatroom.destroy(chatroom_id)

    @pytest.mark.asyncio
    async def test_invalid_credentials(self, api_config: dict[str, str]) -> None:
        """Test that a wrong secret is reported by the service."""
        bad_config = {**api_config, "app_secret": "wrong-secret"}
        async with RongCloudClient(**bad_config) as client:
            with pytest.raises(ApiError):
                await client.chatroom.keepalive_list()


class TestChatroomModeration:
    """Mute state and attributes of a live chatroom."""

    @pytest.mark.asyncio
    async def test_ban_all_and_check(self, api_config: dict[str, str], chatroom_id: str) -> None:
        """Test muting every member and reading the state back."""
        async with RongCloudClient(**api_config) as client:
            await client.chatroom.create_new(chatroom_id)
            try:
                await client.chatroom.ban_all(chatroom_id)
                assert await client.chatroom.ban_check(chatroom_id) is True

                await client.chatroom.ban_all_rollback(chatroom_id)
                assert await client.chatroom.ban_check(chatroom_id) is False
            finally:
                await client.chatroom.destroy(chatroom_id)

    @pytest.mark.asyncio
    async def test_entry_set_and_query(self, api_config: dict[str, str], chatroom_id: str) -> None:
        """Test setting and reading a custom attribute."""
        async with RongCloudClient(**api_config) as client:
            await client.chatroom.create_new(chatroom_id)
            try:
                await client.chatroom.entry_set(chatroom_id, "it-user", "topic", "news")
                attrs = await client.chatroom.entry_query(chatroom_id, ["topic"])
                assert [(attr.key, attr.value) for attr in attrs] == [("topic", "news")]
            finally:
                await client.chatroom.destroy(chatroom_id)
