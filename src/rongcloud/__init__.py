"""RongCloud chatroom Python SDK.

An async client for the chatroom endpoints of the RongCloud server API.

Example:
    ```python
    import asyncio
    from rongcloud import RongCloudClient, resolve_options, with_need_notify

    async def main():
        async with RongCloudClient("app-key", "app-secret") as client:
            await client.chatroom.create("room1", "Room One")
            await client.chatroom.gag_add(
                "room1", ["u1"], 30, options=resolve_options(with_need_notify(True))
            )
            muted = await client.chatroom.gag_list("room1")
            print([user.user_id for user in muted])

    asyncio.run(main())
    ```
"""

from .catalog import CHATROOM_ENDPOINTS, Endpoint, OptionField, Param
from .client import RongCloudClient
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_DESTROY_TIME_MINUTES,
    DEFAULT_DESTROY_TYPE,
    DEFAULT_TIMEOUT_MS,
    PARAMETER_ERROR_CODE,
)
from .errors import (
    ApiError,
    DecodeError,
    HttpStatusError,
    NetworkError,
    ParameterError,
    RongCloudError,
    TimeoutError,
    TransportError,
)
from .http import ChatRoomApiClient, HttpTransport, Transport
from .options import (
    resolve_options,
    with_destroy_time,
    with_destroy_type,
    with_entry_info,
    with_entry_owner_id,
    with_extra,
    with_is_ban,
    with_need_notify,
    with_white_user_ids,
)
from .types import (
    ChatRoom,
    ChatRoomAttr,
    ChatRoomInfo,
    ChatRoomMembers,
    ChatroomOption,
    ChatroomOptions,
    ChatRoomUser,
    ClientConfig,
    DestroyType,
    ParamKind,
    ResponseFormat,
    UserExistResult,
)
from .utils import FormRequest

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "RongCloudClient",
    "ChatRoomApiClient",
    "HttpTransport",
    "Transport",
    "FormRequest",
    # Catalog
    "CHATROOM_ENDPOINTS",
    "Endpoint",
    "OptionField",
    "Param",
    "ParamKind",
    # Constants
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_DESTROY_TYPE",
    "DEFAULT_DESTROY_TIME_MINUTES",
    "PARAMETER_ERROR_CODE",
    # Configuration
    "ClientConfig",
    "ResponseFormat",
    "DestroyType",
    "ChatroomOptions",
    "ChatroomOption",
    "resolve_options",
    "with_need_notify",
    "with_extra",
    "with_destroy_type",
    "with_destroy_time",
    "with_is_ban",
    "with_white_user_ids",
    "with_entry_owner_id",
    "with_entry_info",
    # Data types
    "ChatRoom",
    "ChatRoomAttr",
    "ChatRoomInfo",
    "ChatRoomMembers",
    "ChatRoomUser",
    "UserExistResult",
    # Errors
    "RongCloudError",
    "ParameterError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "HttpStatusError",
    "DecodeError",
    "ApiError",
    # Version
    "__version__",
]
