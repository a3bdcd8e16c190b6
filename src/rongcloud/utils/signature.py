"""Request signing for RongCloud chatroom SDK."""

from __future__ import annotations

import hashlib
import time
import uuid


def build_signature(app_secret: str, nonce: str, timestamp: str) -> str:
    """Compute the request signature.

    The signature is computed as:
        signature = SHA1(app_secret + nonce + timestamp), hex encoded

    Args:
        app_secret: The application secret.
        nonce: Random string sent in the ``Nonce`` header.
        timestamp: Unix seconds sent in the ``Timestamp`` header.

    Returns:
        Lowercase hex digest.
    """
    payload = f"{app_secret}{nonce}{timestamp}".encode()
    return hashlib.sha1(payload).hexdigest()


def build_auth_headers(
    app_key: str,
    app_secret: str,
    *,
    nonce: str | None = None,
    timestamp: str | None = None,
) -> dict[str, str]:
    """Build the authentication headers for one request.

    Args:
        app_key: The application key.
        app_secret: The application secret.
        nonce: Override the random nonce (for tests).
        timestamp: Override the current time (for tests).

    Returns:
        Header name to value mapping.
    """
    nonce = nonce or uuid.uuid4().hex
    timestamp = timestamp or str(int(time.time()))
    return {
        "App-Key": app_key,
        "Nonce": nonce,
        "Timestamp": timestamp,
        "Signature": build_signature(app_secret, nonce, timestamp),
    }
