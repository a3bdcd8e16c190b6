"""Type definitions for RongCloud chatroom SDK."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_DESTROY_TIME_MINUTES,
    DEFAULT_DESTROY_TYPE,
    DEFAULT_TIMEOUT_MS,
)


class ResponseFormat(str, Enum):
    """Wire format suffix appended to every endpoint path."""

    JSON = "json"
    XML = "xml"


class DestroyType(int, Enum):
    """Chatroom destroy policy."""

    INACTIVE = 0
    FIXED_TIME = 1


@dataclass
class ClientConfig:
    """Configuration for RongCloudClient.

    Attributes:
        app_key: Application key sent with every request.
        app_secret: Application secret used to sign requests.
        base_url: Base URL for the API server.
        timeout: Request timeout in milliseconds, applied to connect and read.
        response_format: Wire format of requests and replies.
    """

    app_key: str
    app_secret: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    response_format: ResponseFormat = ResponseFormat.JSON

    def __post_init__(self) -> None:
        if not self.app_key:
            raise ValueError("app_key cannot be empty")
        if not self.app_secret:
            raise ValueError("app_secret cannot be empty")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        try:
            self.response_format = ResponseFormat(self.response_format)
        except ValueError:
            raise ValueError(f"Unknown response format: {self.response_format!r}") from None
        # Replies are decoded as JSON only
        if self.response_format is not ResponseFormat.JSON:
            raise ValueError(f"Unsupported response format: {self.response_format.value!r}")
        self.base_url = self.base_url.rstrip("/")


@dataclass(frozen=True)
class ChatroomOptions:
    """Optional settings shared by chatroom operations.

    Attributes:
        need_notify: Notify room members of the change. Default False.
        extra: JSON extension carried by the notification, only sent when
            need_notify is True.
        destroy_type: 0 destroys the room when inactive, 1 at a fixed time.
        destroy_time: Minutes before a fixed-time destroy (60 to 10080,
            checked by the service).
        is_ban: Mute every member on creation.
        white_user_ids: Users exempt from the mute-all state (max 20).
        entry_owner_id: Owner of the initial custom attributes.
        entry_info: Initial custom attributes. Stored as a read-only copy.

    Options compare by value but are unhashable, since entry_info is a mapping.
    """

    need_notify: bool = False
    extra: str = ""
    destroy_type: int = DEFAULT_DESTROY_TYPE
    destroy_time: int = DEFAULT_DESTROY_TIME_MINUTES
    is_ban: bool = False
    white_user_ids: tuple[str, ...] = ()
    entry_owner_id: str = ""
    entry_info: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entry_info", MappingProxyType(dict(self.entry_info)))


# A setter returns a copy of the options with one field replaced
ChatroomOption = Callable[[ChatroomOptions], ChatroomOptions]


@dataclass
class ChatRoom:
    """Basic chatroom information.

    Attributes:
        chatroom_id: The chatroom ID.
        name: The chatroom name.
        time: Creation time as reported by the service.
    """

    chatroom_id: str
    name: str = ""
    time: str = ""


@dataclass
class ChatRoomInfo:
    """Detailed chatroom information returned by ``get``.

    Attributes:
        chatroom_id: The chatroom ID.
        create_time: Creation time in milliseconds since the epoch.
        member_count: Number of members currently in the room.
        destroy_type: Destroy policy (0 inactive, 1 fixed time).
        destroy_time: Minutes before a fixed-time destroy.
        is_ban: Whether every member is muted.
    """

    chatroom_id: str
    create_time: int = 0
    member_count: int = 0
    destroy_type: int = DEFAULT_DESTROY_TYPE
    destroy_time: int = 0
    is_ban: bool = False


@dataclass
class ChatRoomUser:
    """A chatroom member as reported by membership queries.

    Attributes:
        id: Row identifier.
        user_id: The user ID.
        time: Join or moderation time.
        is_in_chrm: 1 when the user is in the room, 0 otherwise.
    """

    id: str = ""
    user_id: str = ""
    time: str = ""
    is_in_chrm: int = 0


@dataclass
class ChatRoomMembers:
    """Member list with the total count.

    Attributes:
        total: Total number of members in the room.
        users: The returned members.
    """

    total: int = 0
    users: list[ChatRoomUser] = field(default_factory=list)


@dataclass
class ChatRoomAttr:
    """A custom chatroom attribute.

    Attributes:
        key: Attribute name.
        value: Attribute value.
        user_id: User that last set the attribute.
        auto_delete: Whether the attribute is removed when its owner leaves.
        last_set_time: Time of the last update.
    """

    key: str
    value: str = ""
    user_id: str = ""
    auto_delete: str = ""
    last_set_time: str = ""


@dataclass
class UserExistResult:
    """Result of a single-user membership check.

    Attributes:
        is_in_chrm: Whether the user is in the room.
    """

    is_in_chrm: bool


class ParamKind(str, Enum):
    """How an operation argument is validated and put on the wire."""

    STRING = "string"
    LIST = "list"
    INT = "int"
    POSITIVE_INT = "positive_int"
    BOOL = "bool"
    JSON = "json"
