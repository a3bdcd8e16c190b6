"""Form encoding for chatroom requests.

Values go on the wire as strings: booleans as ``true``/``false``, integers in
decimal, mappings as compact JSON. Lists become one field per item under the
same key, in caller order.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from ..errors import ParameterError
from ..types import ChatroomOptions, ParamKind

if TYPE_CHECKING:
    from ..catalog import Endpoint


def format_value(value: Any) -> str:
    """Serialize a scalar for a form field.

    Args:
        value: A string, bool or int.

    Returns:
        The wire string.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        # Int enums render as their member name under str()
        return str(int(value))
    return str(value)


def encode_json(name: str, value: Mapping[str, Any]) -> str:
    """Serialize a mapping into the JSON string sent as one field.

    Raises:
        ParameterError: If the mapping is not JSON serializable.
    """
    try:
        return json.dumps(dict(value), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise ParameterError(name, f"Parameter '{name}' is not JSON serializable: {e}") from e


@dataclass
class FormRequest:
    """An outgoing POST request.

    Attributes:
        path: Endpoint path without the format suffix, e.g. ``/chatroom/get``.
        fields: Ordered form fields. A key may repeat.
    """

    path: str
    fields: list[tuple[str, str]] = field(default_factory=list)

    def add(self, key: str, value: Any) -> None:
        """Append one field."""
        self.fields.append((key, format_value(value)))

    def extend(self, key: str, values: Iterable[Any]) -> None:
        """Append one field per value under the same key."""
        for value in values:
            self.add(key, value)

    def get_all(self, key: str) -> list[str]:
        """Return every value sent under ``key``, in order."""
        return [value for name, value in self.fields if name == key]

    def keys(self) -> list[str]:
        """Return field keys in order, repeats included."""
        return [name for name, _ in self.fields]

    def encode(self) -> bytes:
        """Encode the fields as ``application/x-www-form-urlencoded``."""
        return urlencode(self.fields).encode("utf-8")


def _add_value(
    request: FormRequest, key: str, kind: ParamKind, name: str, value: Any, omit_empty: bool
) -> None:
    if kind is ParamKind.LIST:
        request.extend(key, value or ())
    elif kind is ParamKind.JSON:
        if value or not omit_empty:
            request.add(key, encode_json(name, value or {}))
    elif value is None:
        return
    elif kind is ParamKind.STRING and omit_empty and value == "":
        return
    else:
        request.add(key, value)


def build_form(
    endpoint: Endpoint, args: Mapping[str, Any], options: ChatroomOptions
) -> FormRequest:
    """Build the request for one validated call.

    Required and optional arguments come first in declaration order, then
    option fields, then ``needNotify``/``extra`` when notification is on.

    Args:
        endpoint: The operation descriptor.
        args: Caller arguments keyed by parameter name.
        options: Resolved options for the call.

    Returns:
        The request ready for the transport.
    """
    request = FormRequest(path=f"/chatroom/{endpoint.path}")
    for param in endpoint.params:
        if not param.send:
            continue
        key = param.wire.format_map(args)
        _add_value(request, key, param.kind, param.name, args.get(param.name), not param.required)
    for option in endpoint.option_fields:
        _add_value(
            request,
            option.wire,
            option.kind,
            option.attr,
            getattr(options, option.attr),
            option.omit_empty,
        )
    if endpoint.notify and options.need_notify:
        request.add("needNotify", True)
        request.add("extra", options.extra)
    return request
