"""Chatroom API client for RongCloud SDK."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..catalog import CHATROOM_ENDPOINTS, Endpoint
from ..types import (
    ChatRoom,
    ChatRoomAttr,
    ChatRoomInfo,
    ChatroomOptions,
    ChatRoomMembers,
    ChatRoomUser,
    UserExistResult,
)
from ..utils.decoding import decode_result
from ..utils.encoding import build_form
from ..utils.validation import validate_request
from .base_client import Transport


class ChatRoomApiClient:
    """API client for chatroom operations.

    Every method validates its arguments, encodes one form request, sends it
    through the transport and decodes the reply. A reply whose ``code`` is not
    200 raises :class:`~rongcloud.errors.ApiError`.
    """

    def __init__(self, transport: Transport) -> None:
        """Initialize the chatroom client.

        Args:
            transport: Transport used to send requests.
        """
        self._transport = transport

    async def _execute(
        self,
        endpoint: Endpoint,
        options: ChatroomOptions | None = None,
        **args: Any,
    ) -> Any:
        """Validate, encode, send and decode one call.

        Raises:
            ParameterError: If an argument is missing or malformed.
            TransportError: If the request could not be completed.
            DecodeError: If the reply is malformed.
            ApiError: If the service reported a failure.
        """
        options = options or ChatroomOptions()
        validate_request(endpoint, args, options)
        request = build_form(endpoint, args, options)
        body = await self._transport.post(request)
        return decode_result(body, endpoint.parse)

    # Lifecycle

    async def create(self, chatroom_id: str, name: str) -> None:
        """Create a chatroom.

        Args:
            chatroom_id: ID of the chatroom to create.
            name: Display name of the chatroom.
        """
        await self._execute(CHATROOM_ENDPOINTS["create"], chatroom_id=chatroom_id, name=name)

    async def create_new(self, chatroom_id: str, options: ChatroomOptions | None = None) -> None:
        """Create a chatroom with a destroy policy and initial state.

        Sends ``destroy_type``, ``destroy_time``, ``is_ban`` and
        ``white_user_ids`` from the options, plus ``entry_owner_id`` and
        ``entry_info`` when they are set.

        Args:
            chatroom_id: ID of the chatroom to create.
            options: Creation options. Defaults destroy the room when inactive.
        """
        await self._execute(CHATROOM_ENDPOINTS["create_new"], options, chatroom_id=chatroom_id)

    async def destroy_set(self, chatroom_id: str, destroy_type: int, destroy_time: int) -> None:
        """Change the destroy policy of a chatroom.

        Args:
            chatroom_id: The chatroom ID.
            destroy_type: 0 destroys when inactive, 1 at a fixed time.
            destroy_time: Minutes before a fixed-time destroy.
        """
        await self._execute(
            CHATROOM_ENDPOINTS["destroy_set"],
            chatroom_id=chatroom_id,
            destroy_type=destroy_type,
            destroy_time=destroy_time,
        )

    async def destroy(self, chatroom_id: str) -> None:
        """Destroy a chatroom."""
        await self._execute(CHATROOM_ENDPOINTS["destroy"], chatroom_id=chatroom_id)

    async def get(self, chatroom_id: str) -> ChatRoomInfo:
        """Get detailed chatroom information.

        Args:
            chatroom_id: The chatroom ID.

        Returns:
            ChatRoomInfo with member count and destroy policy.
        """
        result: ChatRoomInfo = await self._execute(
            CHATROOM_ENDPOINTS["get"], chatroom_id=chatroom_id
        )
        return result

    async def query(self, chatroom_ids: Sequence[str]) -> list[ChatRoom]:
        """Query basic information of several chatrooms.

        Args:
            chatroom_ids: IDs to look up.

        Returns:
            The chatrooms found.
        """
        result: list[ChatRoom] = await self._execute(
            CHATROOM_ENDPOINTS["query"], chatroom_ids=chatroom_ids
        )
        return result

    # Membership

    async def user_exist(self, chatroom_id: str, user_id: str) -> UserExistResult:
        """Check whether one user is in a chatroom."""
        result: UserExistResult = await self._execute(
            CHATROOM_ENDPOINTS["user_exist"], chatroom_id=chatroom_id, user_id=user_id
        )
        return result

    async def users_exist(self, chatroom_id: str, members: Sequence[str]) -> list[ChatRoomUser]:
        """Check whether several users are in a chatroom.

        Args:
            chatroom_id: The chatroom ID.
            members: User IDs to check, at most 1000.

        Returns:
            One entry per user with ``is_in_chrm`` set.
        """
        result: list[ChatRoomUser] = await self._execute(
            CHATROOM_ENDPOINTS["users_exist"], chatroom_id=chatroom_id, members=members
        )
        return result

    async def query_members(self, chatroom_id: str, count: int, order: int) -> ChatRoomMembers:
        """List chatroom members.

        Args:
            chatroom_id: The chatroom ID.
            count: Number of members to return (the service caps it at 500).
            order: 1 for oldest joins first, 2 for newest first.

        Returns:
            ChatRoomMembers with the total and the returned users.
        """
        result: ChatRoomMembers = await self._execute(
            CHATROOM_ENDPOINTS["query_members"], chatroom_id=chatroom_id, count=count, order=order
        )
        return result

    # Blocked members

    async def block_add(
        self,
        chatroom_id: str,
        members: Sequence[str],
        minute: int,
        options: ChatroomOptions | None = None,
    ) -> None:
        """Block members from a chatroom.

        Args:
            chatroom_id: The chatroom ID.
            members: User IDs to block.
            minute: Block duration in minutes (the service caps it at 43200).
            options: Notification options.
        """
        await self._execute(
            CHATROOM_ENDPOINTS["block_add"],
            options,
            chatroom_id=chatroom_id,
            members=members,
            minute=minute,
        )

    async def block_remove(
        self, chatroom_id: str, members: Sequence[str], options: ChatroomOptions | None = None
    ) -> None:
        """Unblock members of a chatroom."""
        await self._execute(
            CHATROOM_ENDPOINTS["block_remove"], options, chatroom_id=chatroom_id, members=members
        )

    async def block_list(self, chatroom_id: str) -> ChatRoomMembers:
        """List blocked members of a chatroom."""
        result: ChatRoomMembers = await self._execute(
            CHATROOM_ENDPOINTS["block_list"], chatroom_id=chatroom_id
        )
        return result

    # Global mute

    async def ban_add(
        self, members: Sequence[str], minute: int, options: ChatroomOptions | None = None
    ) -> None:
        """Mute users in every chatroom of the app.

        Args:
            members: User IDs to mute, at most 20.
            minute: Mute duration in minutes.
            options: Notification options.
        """
        await self._execute(CHATROOM_ENDPOINTS["ban_add"], options, members=members, minute=minute)

    async def ban_remove(
        self, members: Sequence[str], options: ChatroomOptions | None = None
    ) -> None:
        """Lift the app-wide mute of users."""
        await self._execute(CHATROOM_ENDPOINTS["ban_remove"], options, members=members)

    async def ban_list(self) -> list[ChatRoomUser]:
        """List users muted in every chatroom."""
        result: list[ChatRoomUser] = await self._execute(CHATROOM_ENDPOINTS["ban_list"])
        return result

    # Muted members

    async def gag_add(
        self,
        chatroom_id: str,
        members: Sequence[str],
        minute: int,
        options: ChatroomOptions | None = None,
    ) -> None:
        """Mute members of one chatroom.

        Muted members still receive messages but cannot send.

        Args:
            chatroom_id: The chatroom ID.
            members: User IDs to mute.
            minute: Mute duration in minutes (the service caps it at 43200).
            options: Notification options.
        """
        await self._execute(
            CHATROOM_ENDPOINTS["gag_add"],
            options,
            chatroom_id=chatroom_id,
            members=members,
            minute=minute,
        )

    async def gag_remove(
        self, chatroom_id: str, members: Sequence[str], options: ChatroomOptions | None = None
    ) -> None:
        """Unmute members of one chatroom."""
        await self._execute(
            CHATROOM_ENDPOINTS["gag_remove"], options, chatroom_id=chatroom_id, members=members
        )

    async def gag_list(self, chatroom_id: str) -> list[ChatRoomUser]:
        """List muted members of one chatroom."""
        result: list[ChatRoomUser] = await self._execute(
            CHATROOM_ENDPOINTS["gag_list"], chatroom_id=chatroom_id
        )
        return result

    mute_members_add = gag_add
    mute_members_remove = gag_remove
    mute_members_list = gag_list

    # Low priority messages

    async def demotion_add(self, object_names: Sequence[str]) -> None:
        """Mark message types as low priority, at most 20."""
        await self._execute(CHATROOM_ENDPOINTS["demotion_add"], object_names=object_names)

    async def demotion_remove(self, object_names: Sequence[str]) -> None:
        """Restore the priority of message types."""
        await self._execute(CHATROOM_ENDPOINTS["demotion_remove"], object_names=object_names)

    async def demotion_list(self) -> list[str]:
        """List low priority message types."""
        result: list[str] = await self._execute(CHATROOM_ENDPOINTS["demotion_list"])
        return result

    # Distribution

    async def distribution_stop(self, chatroom_id: str) -> None:
        """Stop delivering messages sent in a chatroom to other members."""
        await self._execute(CHATROOM_ENDPOINTS["distribution_stop"], chatroom_id=chatroom_id)

    async def distribution_resume(self, chatroom_id: str) -> None:
        """Resume message delivery in a chatroom."""
        await self._execute(CHATROOM_ENDPOINTS["distribution_resume"], chatroom_id=chatroom_id)

    # Keep-alive

    async def keepalive_add(self, chatroom_id: str) -> None:
        """Exempt a chatroom from inactivity destruction."""
        await self._execute(CHATROOM_ENDPOINTS["keepalive_add"], chatroom_id=chatroom_id)

    async def keepalive_remove(self, chatroom_id: str) -> None:
        """Let an inactive chatroom be destroyed again."""
        await self._execute(CHATROOM_ENDPOINTS["keepalive_remove"], chatroom_id=chatroom_id)

    async def keepalive_list(self) -> list[str]:
        """List keep-alive chatroom IDs."""
        result: list[str] = await self._execute(CHATROOM_ENDPOINTS["keepalive_list"])
        return result

    # Message type whitelist

    async def whitelist_add(self, object_names: Sequence[str]) -> None:
        """Add message types that are never dropped under load."""
        await self._execute(CHATROOM_ENDPOINTS["whitelist_add"], object_names=object_names)

    async def whitelist_remove(self, object_names: Sequence[str]) -> None:
        """Remove message types from the whitelist."""
        await self._execute(CHATROOM_ENDPOINTS["whitelist_remove"], object_names=object_names)

    async def whitelist_list(self) -> list[str]:
        """List whitelisted message types."""
        result: list[str] = await self._execute(CHATROOM_ENDPOINTS["whitelist_list"])
        return result

    # User whitelist

    async def user_whitelist_add(self, chatroom_id: str, members: Sequence[str]) -> None:
        """Add members whose messages are never dropped, at most 5."""
        await self._execute(
            CHATROOM_ENDPOINTS["user_whitelist_add"], chatroom_id=chatroom_id, members=members
        )

    async def user_whitelist_remove(self, chatroom_id: str, members: Sequence[str]) -> None:
        """Remove members from the user whitelist, at most 5."""
        await self._execute(
            CHATROOM_ENDPOINTS["user_whitelist_remove"], chatroom_id=chatroom_id, members=members
        )

    async def user_whitelist_list(self, chatroom_id: str) -> list[str]:
        """List whitelisted user IDs of a chatroom."""
        result: list[str] = await self._execute(
            CHATROOM_ENDPOINTS["user_whitelist_list"], chatroom_id=chatroom_id
        )
        return result

    # Custom attributes

    async def entry_set(
        self, chatroom_id: str, user_id: str, key: str, value: str, auto_delete: bool = False
    ) -> None:
        """Set a custom chatroom attribute.

        Args:
            chatroom_id: The chatroom ID.
            user_id: Operating user. Need not be a member when set through the API.
            key: Attribute name, case sensitive, up to 128 characters.
            value: Attribute value, up to 4096 characters.
            auto_delete: Delete the attribute when the user leaves the room.
        """
        await self._execute(
            CHATROOM_ENDPOINTS["entry_set"],
            chatroom_id=chatroom_id,
            user_id=user_id,
            key=key,
            value=value,
            auto_delete=auto_delete,
        )

    async def entry_remove(self, chatroom_id: str, user_id: str, key: str) -> None:
        """Remove a custom chatroom attribute."""
        await self._execute(
            CHATROOM_ENDPOINTS["entry_remove"], chatroom_id=chatroom_id, user_id=user_id, key=key
        )

    async def entry_batch_set(
        self,
        chatroom_id: str,
        auto_delete: int,
        entry_owner_id: str,
        entry_info: Mapping[str, Any],
    ) -> None:
        """Set several custom attributes at once.

        Args:
            chatroom_id: The chatroom ID.
            auto_delete: 1 deletes the attributes when the owner leaves, 0 keeps them.
            entry_owner_id: Owner of the attributes.
            entry_info: Attribute key-value pairs, sent as JSON.
        """
        await self._execute(
            CHATROOM_ENDPOINTS["entry_batch_set"],
            chatroom_id=chatroom_id,
            auto_delete=auto_delete,
            entry_owner_id=entry_owner_id,
            entry_info=entry_info,
        )

    async def entry_query(
        self, chatroom_id: str, keys: Sequence[str] | None = None
    ) -> list[ChatRoomAttr]:
        """Query custom chatroom attributes.

        Args:
            chatroom_id: The chatroom ID.
            keys: Keys to fetch, at most 100. Empty fetches every key.

        Returns:
            The matching attributes.
        """
        result: list[ChatRoomAttr] = await self._execute(
            CHATROOM_ENDPOINTS["entry_query"], chatroom_id=chatroom_id, keys=keys or ()
        )
        return result

    # Mute everyone in a room

    async def ban_all(self, chatroom_id: str, options: ChatroomOptions | None = None) -> None:
        """Mute every member of a chatroom."""
        await self._execute(CHATROOM_ENDPOINTS["ban_all"], options, chatroom_id=chatroom_id)

    async def ban_all_rollback(
        self, chatroom_id: str, options: ChatroomOptions | None = None
    ) -> None:
        """Lift the mute-all state of a chatroom."""
        await self._execute(
            CHATROOM_ENDPOINTS["ban_all_rollback"], options, chatroom_id=chatroom_id
        )

    async def ban_all_query(self, size: int = 50, page: int = 1) -> list[str]:
        """List chatrooms in the mute-all state.

        Args:
            size: Page size.
            page: Page number, starting at 1.

        Returns:
            Chatroom IDs on the requested page.
        """
        result: list[str] = await self._execute(
            CHATROOM_ENDPOINTS["ban_all_query"], size=size, page=page
        )
        return result

    async def ban_check(self, chatroom_id: str) -> bool:
        """Return True if every member of the chatroom is muted."""
        result: bool = await self._execute(
            CHATROOM_ENDPOINTS["ban_check"], chatroom_id=chatroom_id
        )
        return result

    async def ban_whitelist_add(
        self, chatroom_id: str, members: Sequence[str], options: ChatroomOptions | None = None
    ) -> None:
        """Let members speak while the chatroom is muted."""
        await self._execute(
            CHATROOM_ENDPOINTS["ban_whitelist_add"],
            options,
            chatroom_id=chatroom_id,
            members=members,
        )

    async def ban_whitelist_rollback(
        self, chatroom_id: str, members: Sequence[str], options: ChatroomOptions | None = None
    ) -> None:
        """Remove members from the mute-all whitelist."""
        await self._execute(
            CHATROOM_ENDPOINTS["ban_whitelist_rollback"],
            options,
            chatroom_id=chatroom_id,
            members=members,
        )

    async def ban_whitelist_query(self, chatroom_id: str) -> list[str]:
        """List members allowed to speak while the chatroom is muted."""
        result: list[str] = await self._execute(
            CHATROOM_ENDPOINTS["ban_whitelist_query"], chatroom_id=chatroom_id
        )
        return result
