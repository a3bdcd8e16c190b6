"""Response decoding for chatroom operations.

Every reply is decoded the same way: parse the JSON object, check the
embedded ``code``, then hand the object to the operation's parser. Field
names are the service's wire names, including the ``whitlistMsgType``
spelling.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..constants import SUCCESS_CODE
from ..errors import ApiError, DecodeError
from ..types import (
    ChatRoom,
    ChatRoomAttr,
    ChatRoomInfo,
    ChatRoomMembers,
    ChatRoomUser,
    UserExistResult,
)

logger = logging.getLogger("rongcloud")

T = TypeVar("T")


def error_message(data: dict[str, Any]) -> str:
    """Pick the error text out of a service reply."""
    for key in ("errorMessage", "message", "msg"):
        value = data.get(key)
        if value:
            return str(value)
    return ""


def decode_response(body: bytes | str) -> dict[str, Any]:
    """Parse a reply and check its status code.

    Args:
        body: Raw response body.

    Returns:
        The decoded JSON object.

    Raises:
        DecodeError: If the body is not a JSON object with an integer code.
        ApiError: If the code is not 200.
    """
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

    code = data.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise DecodeError(f"Response has no integer 'code': {code!r}")
    if code != SUCCESS_CODE:
        message = error_message(data)
        logger.debug("Service error %d: %s", code, message)
        raise ApiError(code, message)
    return data


def decode_result(body: bytes | str, parse: Callable[[dict[str, Any]], T]) -> T:
    """Decode a reply and parse the operation's payload.

    Raises:
        DecodeError: If the body or the payload shape is malformed.
        ApiError: If the service reported a failure.
    """
    data = decode_response(body)
    try:
        return parse(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"Unexpected response shape: {e!r}") from e


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' is not a list")
    return value


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def parse_nothing(data: dict[str, Any]) -> None:
    return None


def parse_user(item: dict[str, Any]) -> ChatRoomUser:
    return ChatRoomUser(
        id=_str(item.get("id")),
        user_id=_str(item.get("userId")),
        time=_str(item.get("time")),
        is_in_chrm=int(item.get("isInChrm", 0)),
    )


def parse_users(data: dict[str, Any]) -> list[ChatRoomUser]:
    return [parse_user(item) for item in _list(data, "users")]


def parse_result_users(data: dict[str, Any]) -> list[ChatRoomUser]:
    return [parse_user(item) for item in _list(data, "result")]


def parse_members(data: dict[str, Any]) -> ChatRoomMembers:
    return ChatRoomMembers(total=int(data.get("total", 0)), users=parse_users(data))


def parse_user_ids(data: dict[str, Any]) -> list[str]:
    return [str(user) for user in _list(data, "users")]


def parse_ban_whitelist(data: dict[str, Any]) -> list[str]:
    return [str(user) for user in _list(data, "userIds")]


def parse_object_names(data: dict[str, Any]) -> list[str]:
    return [str(name) for name in _list(data, "objectNames")]


def parse_chatroom_ids(data: dict[str, Any]) -> list[str]:
    return [str(chatroom_id) for chatroom_id in _list(data, "chatroomids")]


def parse_whitelist_msg_types(data: dict[str, Any]) -> list[str]:
    return [str(name) for name in _list(data, "whitlistMsgType")]


def parse_chatrooms(data: dict[str, Any]) -> list[ChatRoom]:
    return [
        ChatRoom(
            chatroom_id=_str(item["chrmId"]),
            name=_str(item.get("name")),
            time=_str(item.get("time")),
        )
        for item in _list(data, "chatRooms")
    ]


def parse_chatroom_info(data: dict[str, Any]) -> ChatRoomInfo:
    return ChatRoomInfo(
        chatroom_id=_str(data.get("chatroomId")),
        create_time=int(data.get("createTime", 0)),
        member_count=int(data.get("memberCount", 0)),
        destroy_type=int(data.get("destroyType", 0)),
        destroy_time=int(data.get("destroyTime", 0)),
        is_ban=bool(data.get("ban", False)),
    )


def parse_attrs(data: dict[str, Any]) -> list[ChatRoomAttr]:
    return [
        ChatRoomAttr(
            key=_str(item["key"]),
            value=_str(item.get("value")),
            user_id=_str(item.get("userID")),
            auto_delete=_str(item.get("autoDelete")),
            last_set_time=_str(item.get("lastSetTime")),
        )
        for item in _list(data, "keys")
    ]


def parse_user_exist(data: dict[str, Any]) -> UserExistResult:
    return UserExistResult(is_in_chrm=bool(data.get("isInChrm", False)))


def parse_ban_status(data: dict[str, Any]) -> bool:
    return int(data.get("status", 0)) == 1
