"""Utility functions for RongCloud chatroom SDK."""

from .decoding import decode_response, decode_result
from .encoding import FormRequest, build_form, format_value
from .signature import build_auth_headers, build_signature
from .validation import validate_request

__all__ = [
    "FormRequest",
    "build_auth_headers",
    "build_form",
    "build_signature",
    "decode_response",
    "decode_result",
    "format_value",
    "validate_request",
]
