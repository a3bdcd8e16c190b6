"""Argument validation for chatroom operations.

Every check runs before a request is built, so a failed check never sends
anything.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ..errors import ParameterError
from ..types import ChatroomOptions, ParamKind

if TYPE_CHECKING:
    from ..catalog import Endpoint


def require_string(name: str, value: Any) -> None:
    """Reject a missing or empty string.

    Raises:
        ParameterError: If the value is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise ParameterError(name)


def check_list(name: str, values: Any, *, required: bool, max_items: int | None) -> None:
    """Check a list argument.

    Args:
        name: Argument name reported on failure.
        values: The list to check. ``None`` counts as empty.
        required: Reject an empty list.
        max_items: Reject lists longer than this. ``None`` disables the cap.

    Raises:
        ParameterError: If the list is empty when required, is a plain string,
            holds empty items, or exceeds the cap.
    """
    if values is None:
        values = ()
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ParameterError(name, f"Parameter '{name}' must be a list of strings")
    if required and len(values) == 0:
        raise ParameterError(name)
    if max_items is not None and len(values) > max_items:
        raise ParameterError(name, f"Parameter '{name}' more than {max_items}")
    for value in values:
        if not isinstance(value, str) or not value:
            raise ParameterError(name, f"Parameter '{name}' contains an empty item")


def require_positive(name: str, value: Any) -> None:
    """Reject a zero, negative or non-integer count.

    Raises:
        ParameterError: If the value is not a positive integer.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ParameterError(name)


def check_int(name: str, value: Any) -> None:
    """Reject a non-integer value.

    Raises:
        ParameterError: If the value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterError(name, f"Parameter '{name}' must be an integer")


def check_mapping(name: str, value: Any, *, required: bool) -> None:
    """Check a mapping that is sent as JSON.

    Raises:
        ParameterError: If the value is not a mapping, or is empty when required.
    """
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise ParameterError(name, f"Parameter '{name}' must be a mapping")
    if required and len(value) == 0:
        raise ParameterError(name)


def validate_value(
    name: str, kind: ParamKind, value: Any, *, required: bool, max_items: int | None
) -> None:
    """Validate one value according to its kind."""
    if kind is ParamKind.STRING:
        if required:
            require_string(name, value)
        elif value is not None and not isinstance(value, str):
            raise ParameterError(name, f"Parameter '{name}' must be a string")
    elif kind is ParamKind.LIST:
        check_list(name, value, required=required, max_items=max_items)
    elif kind is ParamKind.POSITIVE_INT:
        require_positive(name, value)
    elif kind is ParamKind.INT:
        check_int(name, value)
    elif kind is ParamKind.BOOL:
        if not isinstance(value, bool):
            raise ParameterError(name, f"Parameter '{name}' must be a boolean")
    elif kind is ParamKind.JSON:
        check_mapping(name, value, required=required)


def validate_request(
    endpoint: Endpoint, args: Mapping[str, Any], options: ChatroomOptions
) -> None:
    """Validate all arguments and option fields of one call.

    Arguments are checked in declaration order, so the first bad one is
    reported.

    Args:
        endpoint: The operation descriptor.
        args: Caller arguments keyed by parameter name.
        options: Resolved options for the call.

    Raises:
        ParameterError: On the first missing or malformed argument.
    """
    for param in endpoint.params:
        validate_value(
            param.name,
            param.kind,
            args.get(param.name),
            required=param.required,
            max_items=param.max_items,
        )
    for option in endpoint.option_fields:
        validate_value(
            option.attr,
            option.kind,
            getattr(options, option.attr),
            required=False,
            max_items=option.max_items,
        )
