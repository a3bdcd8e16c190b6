"""Tests for validation, encoding, decoding and signing utilities."""

import hashlib
from urllib.parse import parse_qsl

import pytest

from rongcloud.catalog import CHATROOM_ENDPOINTS
from rongcloud.errors import ApiError, DecodeError, ParameterError
from rongcloud.types import ChatroomOptions, ChatRoomUser, DestroyType
from rongcloud.utils import (
    FormRequest,
    build_auth_headers,
    build_form,
    build_signature,
    decode_response,
    decode_result,
    format_value,
    validate_request,
)
from rongcloud.utils.decoding import parse_users
from rongcloud.utils.validation import check_list, require_positive, require_string


class TestValidation:
    """Tests for argument checks."""

    def test_require_string(self) -> None:
        """Test empty and non-string values."""
        require_string("chatroom_id", "room1")
        for value in ("", None, 1):
            with pytest.raises(ParameterError) as exc_info:
                require_string("chatroom_id", value)
            assert exc_info.value.param == "chatroom_id"

    def test_parameter_error_message(self) -> None:
        """Test the default message and code."""
        error = ParameterError("chatroom_id")
        assert error.code == 1002
        assert error.message == "Parameter 'chatroom_id' is required"
        assert str(error) == "Parameter Error (1002): Parameter 'chatroom_id' is required"

    def test_check_list_cap(self) -> None:
        """Test that the cap is inclusive."""
        check_list("keys", ["k"] * 100, required=False, max_items=100)
        with pytest.raises(ParameterError, match="more than 100"):
            check_list("keys", ["k"] * 101, required=False, max_items=100)

    def test_check_list_optional_empty(self) -> None:
        """Test that an optional list may be empty or None."""
        check_list("keys", [], required=False, max_items=100)
        check_list("keys", None, required=False, max_items=100)

    def test_check_list_required_empty(self) -> None:
        """Test that a required list must not be empty."""
        with pytest.raises(ParameterError):
            check_list("members", [], required=True, max_items=None)

    def test_check_list_empty_item(self) -> None:
        """Test that list items must be non-empty strings."""
        with pytest.raises(ParameterError, match="empty item"):
            check_list("members", ["u1", ""], required=True, max_items=None)

    def test_require_positive(self) -> None:
        """Test that zero, negatives and bools are rejected."""
        require_positive("minute", 1)
        for value in (0, -5, True, "10", None):
            with pytest.raises(ParameterError):
                require_positive("minute", value)

    def test_validate_request_bool_kind(self) -> None:
        """Test that a BOOL argument rejects integers."""
        endpoint = CHATROOM_ENDPOINTS["entry_set"]
        args = {"chatroom_id": "r1", "user_id": "u1", "key": "k", "value": "v", "auto_delete": 1}
        with pytest.raises(ParameterError) as exc_info:
            validate_request(endpoint, args, ChatroomOptions())
        assert exc_info.value.param == "auto_delete"

    def test_validate_request_checks_options(self) -> None:
        """Test that option fields are validated after arguments."""
        endpoint = CHATROOM_ENDPOINTS["create_new"]
        options = ChatroomOptions(white_user_ids=tuple(f"u{i}" for i in range(21)))
        with pytest.raises(ParameterError) as exc_info:
            validate_request(endpoint, {"chatroom_id": "r1"}, options)
        assert exc_info.value.param == "white_user_ids"


class TestEncoding:
    """Tests for form encoding."""

    def test_format_value(self) -> None:
        """Test scalar serialization."""
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(42) == "42"
        assert format_value("abc") == "abc"

    def test_format_value_int_enum(self) -> None:
        """Test that int enum members are sent as decimal values."""
        assert format_value(DestroyType.FIXED_TIME) == "1"
        assert format_value(DestroyType.INACTIVE) == "0"

    def test_build_form_skips_unsent_params(self) -> None:
        """Test that a key-only argument is validated but not sent."""
        request = build_form(
            CHATROOM_ENDPOINTS["create"],
            {"chatroom_id": "r1", "name": "Room"},
            ChatroomOptions(),
        )
        assert request.fields == [("chatroom[r1]", "Room")]

    def test_repeated_fields_encoded_in_order(self) -> None:
        """Test that a list becomes repeated keys in the body."""
        request = FormRequest(path="/chatroom/user/gag/add")
        request.extend("userId", ["u1", "u2", "u3"])
        request.add("chatroomId", "room 1")

        assert parse_qsl(request.encode().decode()) == [
            ("userId", "u1"),
            ("userId", "u2"),
            ("userId", "u3"),
            ("chatroomId", "room 1"),
        ]

    def test_encode_is_utf8(self) -> None:
        """Test that non-ASCII values are percent-encoded UTF-8."""
        request = FormRequest(path="/chatroom/create")
        request.add("chatroom[r1]", "聊天室")
        assert request.encode() == b"chatroom%5Br1%5D=%E8%81%8A%E5%A4%A9%E5%AE%A4"

    def test_build_form_gag_add(self) -> None:
        """Test field order for a notify-capable operation."""
        request = build_form(
            CHATROOM_ENDPOINTS["gag_add"],
            {"chatroom_id": "r1", "members": ["u1", "u2", "u3"], "minute": 10},
            ChatroomOptions(),
        )
        assert request.path == "/chatroom/user/gag/add"
        assert request.fields == [
            ("userId", "u1"),
            ("userId", "u2"),
            ("userId", "u3"),
            ("chatroomId", "r1"),
            ("minute", "10"),
        ]

    def test_build_form_notify_last(self) -> None:
        """Test that notification fields follow the arguments."""
        request = build_form(
            CHATROOM_ENDPOINTS["ban_all"],
            {"chatroom_id": "r1"},
            ChatroomOptions(need_notify=True),
        )
        assert request.fields == [("chatroomId", "r1"), ("needNotify", "true"), ("extra", "")]

    def test_build_form_entry_info_json(self) -> None:
        """Test that non-ASCII JSON values are kept readable."""
        request = build_form(
            CHATROOM_ENDPOINTS["entry_batch_set"],
            {
                "chatroom_id": "r1",
                "auto_delete": 0,
                "entry_owner_id": "u1",
                "entry_info": {"名": "值"},
            },
            ChatroomOptions(),
        )
        assert request.get_all("entryInfo") == ['{"名":"值"}']

    def test_build_form_entry_info_not_serializable(self) -> None:
        """Test that an unserializable mapping is a parameter error."""
        with pytest.raises(ParameterError) as exc_info:
            build_form(
                CHATROOM_ENDPOINTS["entry_batch_set"],
                {
                    "chatroom_id": "r1",
                    "auto_delete": 0,
                    "entry_owner_id": "u1",
                    "entry_info": {"k": object()},
                },
                ChatroomOptions(),
            )
        assert exc_info.value.param == "entry_info"


class TestDecoding:
    """Tests for checked response decoding."""

    def test_success(self) -> None:
        """Test that a code 200 reply decodes to its object."""
        assert decode_response(b'{"code":200,"status":1}') == {"code": 200, "status": 1}

    def test_users_fixture(self) -> None:
        """Test decoding a users reply."""
        body = b'{"code":200,"users":[{"id":"7","userId":"u1","time":"2024-01-01 10:00:00"}]}'
        users = decode_result(body, parse_users)
        assert users == [ChatRoomUser(id="7", user_id="u1", time="2024-01-01 10:00:00")]

    def test_service_error(self) -> None:
        """Test that a non-200 code raises ApiError."""
        with pytest.raises(ApiError) as exc_info:
            decode_response(b'{"code":404,"message":"not found"}')
        assert exc_info.value.code == 404
        assert exc_info.value.message == "not found"
        assert exc_info.value.status_code is None
        assert str(exc_info.value) == "API Error (404): not found"

    @pytest.mark.parametrize(
        ("body", "expected"),
        [
            (b'{"code":1002,"errorMessage":"a"}', "a"),
            (b'{"code":1002,"msg":"b"}', "b"),
            (b'{"code":1002}', ""),
        ],
    )
    def test_service_error_message_fields(self, body: bytes, expected: str) -> None:
        """Test the fields the error message is read from."""
        with pytest.raises(ApiError) as exc_info:
            decode_response(body)
        assert exc_info.value.message == expected

    @pytest.mark.parametrize(
        "body",
        [
            b"garbage",
            b"",
            b"[1, 2]",
            b'{"users":[]}',
            b'{"code":"200"}',
            b'{"code":true}',
            b"\xff\xfe",
        ],
    )
    def test_malformed(self, body: bytes) -> None:
        """Test that malformed replies raise DecodeError."""
        with pytest.raises(DecodeError):
            decode_response(body)

    def test_bad_shape(self) -> None:
        """Test that a wrongly typed payload raises DecodeError."""
        with pytest.raises(DecodeError, match="Unexpected response shape"):
            decode_result(b'{"code":200,"users":"u1"}', parse_users)


class TestSignature:
    """Tests for request signing."""

    def test_build_signature(self) -> None:
        """Test the digest of secret, nonce and timestamp."""
        expected = hashlib.sha1(b"secret" + b"nonce" + b"1700000000").hexdigest()
        assert build_signature("secret", "nonce", "1700000000") == expected

    def test_build_auth_headers_fixed(self) -> None:
        """Test headers with a fixed nonce and timestamp."""
        headers = build_auth_headers("key", "secret", nonce="n1", timestamp="1700000000")
        assert headers == {
            "App-Key": "key",
            "Nonce": "n1",
            "Timestamp": "1700000000",
            "Signature": build_signature("secret", "n1", "1700000000"),
        }

    def test_build_auth_headers_fresh_nonce(self) -> None:
        """Test that each call gets a new nonce."""
        first = build_auth_headers("key", "secret")
        second = build_auth_headers("key", "secret")
        assert first["Nonce"] != second["Nonce"]
        assert first["Timestamp"].isdigit()
