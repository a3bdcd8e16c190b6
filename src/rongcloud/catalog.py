"""Chatroom endpoint descriptors.

Each operation is declared once as an :class:`Endpoint`: its path under
``/chatroom/``, the arguments it takes, the option fields it sends and the
parser for its reply. ``ChatRoomApiClient`` runs every descriptor through
the same validate, encode, send and decode steps.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .constants import (
    MAX_BAN_WHITE_USER_IDS,
    MAX_ENTRY_QUERY_KEYS,
    MAX_GLOBAL_BAN_MEMBERS,
    MAX_PRIORITY_OBJECT_NAMES,
    MAX_USER_WHITELIST_MEMBERS,
    MAX_USERS_EXIST_MEMBERS,
)
from .types import ParamKind
from .utils import decoding


@dataclass(frozen=True)
class Param:
    """One caller argument.

    Attributes:
        name: Argument name, also reported in parameter errors.
        wire: Form key. May reference other arguments, e.g. ``chatroom[{chatroom_id}]``.
        kind: Validation and serialization rule.
        required: Reject empty values before sending.
        max_items: Upper bound for list arguments.
        send: Put the argument on the wire. When False it is only validated and
            may still be referenced by other wire keys.
    """

    name: str
    wire: str
    kind: ParamKind = ParamKind.STRING
    required: bool = True
    max_items: int | None = None
    send: bool = True


@dataclass(frozen=True)
class OptionField:
    """A ``ChatroomOptions`` field sent by an operation.

    Attributes:
        attr: Attribute of ``ChatroomOptions``.
        wire: Form key.
        kind: Serialization rule.
        omit_empty: Skip the field when the value is empty.
        max_items: Upper bound for list values.
    """

    attr: str
    wire: str
    kind: ParamKind
    omit_empty: bool = False
    max_items: int | None = None


@dataclass(frozen=True)
class Endpoint:
    """An operation descriptor.

    Attributes:
        path: Path under ``/chatroom/`` without the format suffix.
        params: Caller arguments in wire order.
        option_fields: Option fields sent after the arguments.
        notify: Send ``needNotify``/``extra`` when notification is enabled.
        parse: Turns the decoded reply into the operation's result.
    """

    path: str
    params: tuple[Param, ...] = ()
    option_fields: tuple[OptionField, ...] = ()
    notify: bool = False
    parse: Callable[[dict[str, Any]], Any] = decoding.parse_nothing


CHATROOM_ID = Param("chatroom_id", "chatroomId")
USER_ID = Param("user_id", "userId")
MEMBERS = Param("members", "userId", ParamKind.LIST)
MINUTE = Param("minute", "minute", ParamKind.POSITIVE_INT)


CHATROOM_ENDPOINTS: dict[str, Endpoint] = {
    # Lifecycle
    "create": Endpoint(
        "create",
        params=(
            Param("chatroom_id", "chatroomId", send=False),
            # The room name travels under a key built from the room ID
            Param("name", "chatroom[{chatroom_id}]"),
        ),
    ),
    "create_new": Endpoint(
        "create_new",
        params=(CHATROOM_ID,),
        option_fields=(
            OptionField("destroy_type", "destroyType", ParamKind.INT),
            OptionField("destroy_time", "destroyTime", ParamKind.INT),
            OptionField("is_ban", "isBan", ParamKind.BOOL),
            OptionField(
                "white_user_ids", "whiteUserIds", ParamKind.LIST, max_items=MAX_BAN_WHITE_USER_IDS
            ),
            OptionField("entry_owner_id", "entryOwnerId", ParamKind.STRING, omit_empty=True),
            OptionField("entry_info", "entryInfo", ParamKind.JSON, omit_empty=True),
        ),
    ),
    "destroy_set": Endpoint(
        "destroy/set",
        params=(
            CHATROOM_ID,
            Param("destroy_type", "destroyType", ParamKind.INT),
            Param("destroy_time", "destroyTime", ParamKind.INT),
        ),
    ),
    "destroy": Endpoint("destroy", params=(CHATROOM_ID,)),
    "get": Endpoint("get", params=(CHATROOM_ID,), parse=decoding.parse_chatroom_info),
    "query": Endpoint(
        "query",
        params=(Param("chatroom_ids", "chatroomId", ParamKind.LIST),),
        parse=decoding.parse_chatrooms,
    ),
    # Membership
    "user_exist": Endpoint(
        "user/exist", params=(CHATROOM_ID, USER_ID), parse=decoding.parse_user_exist
    ),
    "users_exist": Endpoint(
        "users/exist",
        params=(
            CHATROOM_ID,
            Param("members", "userId", ParamKind.LIST, max_items=MAX_USERS_EXIST_MEMBERS),
        ),
        parse=decoding.parse_result_users,
    ),
    "query_members": Endpoint(
        "user/query",
        params=(
            CHATROOM_ID,
            Param("count", "count", ParamKind.POSITIVE_INT),
            Param("order", "order", ParamKind.POSITIVE_INT),
        ),
        parse=decoding.parse_members,
    ),
    # Blocked members
    "block_add": Endpoint(
        "user/block/add", params=(CHATROOM_ID, MEMBERS, MINUTE), notify=True
    ),
    "block_remove": Endpoint("user/block/rollback", params=(MEMBERS, CHATROOM_ID), notify=True),
    "block_list": Endpoint(
        "user/block/list", params=(CHATROOM_ID,), parse=decoding.parse_members
    ),
    # Global mute across all rooms
    "ban_add": Endpoint(
        "user/ban/add",
        params=(
            Param("members", "userId", ParamKind.LIST, max_items=MAX_GLOBAL_BAN_MEMBERS),
            MINUTE,
        ),
        notify=True,
    ),
    "ban_remove": Endpoint(
        "user/ban/remove",
        params=(Param("members", "userId", ParamKind.LIST, max_items=MAX_GLOBAL_BAN_MEMBERS),),
        notify=True,
    ),
    "ban_list": Endpoint("user/ban/query", parse=decoding.parse_users),
    # Muted members of one room
    "gag_add": Endpoint("user/gag/add", params=(MEMBERS, CHATROOM_ID, MINUTE), notify=True),
    "gag_remove": Endpoint("user/gag/rollback", params=(MEMBERS, CHATROOM_ID), notify=True),
    "gag_list": Endpoint("user/gag/list", params=(CHATROOM_ID,), parse=decoding.parse_users),
    # Low priority message types
    "demotion_add": Endpoint(
        "message/priority/add",
        params=(
            Param(
                "object_names", "objectName", ParamKind.LIST, max_items=MAX_PRIORITY_OBJECT_NAMES
            ),
        ),
    ),
    "demotion_remove": Endpoint(
        "message/priority/remove",
        params=(Param("object_names", "objectName", ParamKind.LIST),),
    ),
    "demotion_list": Endpoint("message/priority/query", parse=decoding.parse_object_names),
    # Message distribution
    "distribution_stop": Endpoint("message/stopDistribution", params=(CHATROOM_ID,)),
    "distribution_resume": Endpoint("message/resumeDistribution", params=(CHATROOM_ID,)),
    # Keep-alive rooms
    "keepalive_add": Endpoint("keepalive/add", params=(CHATROOM_ID,)),
    "keepalive_remove": Endpoint("keepalive/remove", params=(CHATROOM_ID,)),
    "keepalive_list": Endpoint("keepalive/query", parse=decoding.parse_chatroom_ids),
    # Message type whitelist
    "whitelist_add": Endpoint(
        "whitelist/add", params=(Param("object_names", "objectnames", ParamKind.LIST),)
    ),
    "whitelist_remove": Endpoint(
        "whitelist/delete", params=(Param("object_names", "objectnames", ParamKind.LIST),)
    ),
    "whitelist_list": Endpoint("whitelist/query", parse=decoding.parse_whitelist_msg_types),
    # User whitelist
    "user_whitelist_add": Endpoint(
        "user/whitelist/add",
        params=(
            CHATROOM_ID,
            Param("members", "userId", ParamKind.LIST, max_items=MAX_USER_WHITELIST_MEMBERS),
        ),
    ),
    "user_whitelist_remove": Endpoint(
        "user/whitelist/remove",
        params=(
            CHATROOM_ID,
            Param("members", "userId", ParamKind.LIST, max_items=MAX_USER_WHITELIST_MEMBERS),
        ),
    ),
    "user_whitelist_list": Endpoint(
        "user/whitelist/query", params=(CHATROOM_ID,), parse=decoding.parse_user_ids
    ),
    # Custom attributes
    "entry_set": Endpoint(
        "entry/set",
        params=(
            CHATROOM_ID,
            USER_ID,
            Param("key", "key"),
            Param("value", "value"),
            Param("auto_delete", "autoDelete", ParamKind.BOOL),
        ),
    ),
    "entry_remove": Endpoint(
        "entry/remove", params=(CHATROOM_ID, USER_ID, Param("key", "key"))
    ),
    "entry_batch_set": Endpoint(
        "entry/batch/set",
        params=(
            CHATROOM_ID,
            Param("auto_delete", "autoDelete", ParamKind.INT),
            Param("entry_owner_id", "entryOwnerId"),
            Param("entry_info", "entryInfo", ParamKind.JSON),
        ),
    ),
    "entry_query": Endpoint(
        "entry/query",
        params=(
            CHATROOM_ID,
            Param("keys", "keys", ParamKind.LIST, required=False, max_items=MAX_ENTRY_QUERY_KEYS),
        ),
        parse=decoding.parse_attrs,
    ),
    # Mute everyone in one room
    "ban_all": Endpoint("ban/add", params=(CHATROOM_ID,), notify=True),
    "ban_all_rollback": Endpoint("ban/rollback", params=(CHATROOM_ID,), notify=True),
    "ban_all_query": Endpoint(
        "ban/query",
        params=(
            Param("page", "page", ParamKind.INT),
            Param("size", "size", ParamKind.INT),
        ),
        parse=decoding.parse_chatroom_ids,
    ),
    "ban_check": Endpoint("ban/check", params=(CHATROOM_ID,), parse=decoding.parse_ban_status),
    "ban_whitelist_add": Endpoint(
        "user/ban/whitelist/add", params=(MEMBERS, CHATROOM_ID), notify=True
    ),
    "ban_whitelist_rollback": Endpoint(
        "user/ban/whitelist/rollback", params=(MEMBERS, CHATROOM_ID), notify=True
    ),
    "ban_whitelist_query": Endpoint(
        "user/ban/whitelist/query", params=(CHATROOM_ID,), parse=decoding.parse_ban_whitelist
    ),
}
