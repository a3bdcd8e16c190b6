"""Chatroom option setters.

Each setter replaces exactly one field of :class:`ChatroomOptions`.
``resolve_options`` applies setters in order over the defaults, so a later
setter for the same field wins.

Example:
    ```python
    options = resolve_options(with_need_notify(True), with_extra('{"k": 1}'))
    await client.chatroom.block_add("room1", ["u1"], 10, options=options)
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from .types import ChatroomOption, ChatroomOptions


def with_need_notify(need_notify: bool) -> ChatroomOption:
    """Notify members of the change."""
    return lambda options: replace(options, need_notify=need_notify)


def with_extra(extra: str) -> ChatroomOption:
    """Attach a JSON extension to the notification."""
    return lambda options: replace(options, extra=extra)


def with_destroy_type(destroy_type: int) -> ChatroomOption:
    """Set the destroy policy (0 inactive, 1 fixed time)."""
    return lambda options: replace(options, destroy_type=destroy_type)


def with_destroy_time(destroy_time: int) -> ChatroomOption:
    """Set the fixed-time destroy delay in minutes."""
    return lambda options: replace(options, destroy_time=destroy_time)


def with_is_ban(is_ban: bool) -> ChatroomOption:
    """Mute every member of the created room."""
    return lambda options: replace(options, is_ban=is_ban)


def with_white_user_ids(white_user_ids: Iterable[str]) -> ChatroomOption:
    """Exempt users from the mute-all state."""
    ids = tuple(white_user_ids)
    return lambda options: replace(options, white_user_ids=ids)


def with_entry_owner_id(entry_owner_id: str) -> ChatroomOption:
    """Set the owner of the initial custom attributes."""
    return lambda options: replace(options, entry_owner_id=entry_owner_id)


def with_entry_info(entry_info: Mapping[str, Any]) -> ChatroomOption:
    """Set the initial custom attributes."""
    info = dict(entry_info)
    return lambda options: replace(options, entry_info=info)


def resolve_options(*setters: ChatroomOption) -> ChatroomOptions:
    """Apply setters over the default options.

    Args:
        *setters: Option setters, applied left to right.

    Returns:
        The resolved options.
    """
    options = ChatroomOptions()
    for setter in setters:
        options = setter(options)
    return options
