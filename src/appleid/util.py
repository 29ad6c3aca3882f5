"""General utility functions."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import UTC, datetime

__all__ = [
    "add_padding",
    "base64_to_number",
    "base64url_decode",
    "base64url_encode",
    "current_datetime",
    "number_to_base64",
]

_BASE64URL_REGEX = re.compile("^[A-Za-z0-9_-]*$")
"""Characters permitted in unpadded URL-safe base64."""


def add_padding(encoded: str) -> str:
    """Add padding to base64 encoded bytes.

    Parameters
    ----------
    encoded
        A base64-encoded string, possibly with the padding removed.

    Returns
    -------
    str
        A correctly-padded version of the encoded string.
    """
    underflow = len(encoded) % 4
    if underflow:
        return encoded + ("=" * (4 - underflow))
    else:
        return encoded


def base64url_decode(encoded: str) -> bytes:
    """Decode unpadded URL-safe base64.

    Unlike `base64.urlsafe_b64decode`, characters outside the URL-safe
    alphabet are rejected rather than silently discarded.

    Parameters
    ----------
    encoded
        URL-safe base64 without trailing padding.

    Returns
    -------
    bytes
        The decoded data.

    Raises
    ------
    ValueError
        Raised if the input is not valid unpadded URL-safe base64.
    """
    if not _BASE64URL_REGEX.match(encoded) or len(encoded) % 4 == 1:
        raise ValueError("Invalid base64url encoding")
    try:
        return base64.urlsafe_b64decode(add_padding(encoded))
    except binascii.Error as e:
        raise ValueError(f"Invalid base64url encoding: {e!s}") from e


def base64url_encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 with the padding removed."""
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def base64_to_number(data: str) -> int:
    """Convert base64-encoded bytes to an integer.

    Parameters
    ----------
    data
        Base64-encoded number, possibly without padding.

    Returns
    -------
    int
        The result converted to a number.

    Notes
    -----
    Used for converting the modulus and exponent in a JWKS to integers in
    preparation for turning them into a public key.
    """
    decoded = base64.urlsafe_b64decode(add_padding(data))
    return int.from_bytes(decoded, byteorder="big")


def number_to_base64(data: int) -> str:
    """Convert an integer to the Base64urlUInt encoding of RFC 7518.

    Parameters
    ----------
    data
        Arbitrarily large non-negative number.

    Returns
    -------
    str
        The big-endian octets of the number in URL-safe base64 without
        padding, using the minimum number of octets.
    """
    byte_length = max(1, (data.bit_length() + 7) // 8)
    return base64url_encode(data.to_bytes(byte_length, byteorder="big"))


def current_datetime(*, microseconds: bool = False) -> datetime:
    """Construct a `~datetime.datetime` for the current time.

    Parameters
    ----------
    microseconds
        Whether to include microseconds. By default they are dropped, since
        token timestamps have one-second resolution.

    Returns
    -------
    datetime.datetime
        The current time in UTC.
    """
    now = datetime.now(tz=UTC)
    return now if microseconds else now.replace(microsecond=0)
