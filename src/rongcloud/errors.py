"""Error hierarchy for RongCloud chatroom SDK."""

from __future__ import annotations

from .constants import PARAMETER_ERROR_CODE


class RongCloudError(Exception):
    """Base exception for all RongCloud SDK errors."""

    pass


class ParameterError(RongCloudError):
    """A required argument is missing or malformed.

    Raised before any request is sent.

    Attributes:
        code: Always ``1002``.
        param: Name of the offending argument.
        message: The error message.
    """

    code = PARAMETER_ERROR_CODE

    def __init__(self, param: str, message: str | None = None) -> None:
        self.param = param
        self.message = message or f"Parameter '{param}' is required"
        super().__init__(f"Parameter Error ({self.code}): {self.message}")


class TransportError(RongCloudError):
    """The request could not be delivered or answered."""

    pass


class NetworkError(TransportError):
    """Network communication failure."""

    pass


class TimeoutError(TransportError):
    """Request timeout."""

    pass


class HttpStatusError(TransportError):
    """Non-2xx HTTP reply without a service status code.

    Attributes:
        status_code: The HTTP status code.
        message: The response text.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP Error ({status_code}): {message}")


class DecodeError(RongCloudError):
    """Response body is not valid JSON or has an unexpected shape."""

    pass


class ApiError(RongCloudError):
    """The service reported a non-200 status code.

    Attributes:
        code: The service status code.
        message: The error message reported by the service.
        status_code: The HTTP status code, when the reply was not 2xx.
    """

    def __init__(self, code: int, message: str, status_code: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"API Error ({code}): {message}")
