"""Encoding and decoding of the compact ID token serialization."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .exceptions import InvalidTokenClaimsError, MalformedTokenError
from .models.claims import IDTokenClaims
from .models.token import IDToken, TokenHeader
from .util import base64url_decode, base64url_encode

__all__ = ["decode", "encode"]


def decode(encoded: str) -> IDToken:
    """Decode an ID token without verifying it.

    Decoding succeeds for any syntactically valid token, including one whose
    signature is wrong. Use `~appleid.verify.IDTokenVerifier` to verify it.

    Parameters
    ----------
    encoded
        Token in the compact serialization: three base64url segments
        separated by periods.

    Returns
    -------
    IDToken
        The decoded token.

    Raises
    ------
    InvalidTokenClaimsError
        Raised if a required claim is missing or a claim value is invalid.
    MalformedTokenError
        Raised if the token cannot be split and decoded.
    """
    segments = encoded.split(".")
    if len(segments) != 3:
        msg = f"Token has {len(segments)} segments, not 3"
        raise MalformedTokenError(msg)
    header_segment, claims_segment, signature_segment = segments

    header_data = _decode_json_segment(header_segment, "header")
    claims_data = _decode_json_segment(claims_segment, "claims")
    try:
        signature = base64url_decode(signature_segment)
    except ValueError as e:
        msg = "Token signature is not valid base64url"
        raise MalformedTokenError(msg) from e

    try:
        header = TokenHeader.model_validate(header_data)
    except ValidationError as e:
        raise MalformedTokenError(f"Invalid token header: {e!s}") from e
    try:
        claims = IDTokenClaims.model_validate(claims_data)
    except ValidationError as e:
        raise InvalidTokenClaimsError(f"Invalid token claims: {e!s}") from e

    # Both segments were checked to be base64url, so this cannot fail.
    signing_input = f"{header_segment}.{claims_segment}".encode("ascii")
    return IDToken(
        header=header,
        claims=claims,
        signature=signature,
        signing_input=signing_input,
        encoded=encoded,
    )


def encode(
    header: Mapping[str, Any],
    claims: Mapping[str, Any],
    signature: bytes = b"",
) -> str:
    """Encode a header, claims, and signature as a compact token.

    This does not sign anything. It is the inverse of `decode` and is used
    to construct tokens from known parts.

    Parameters
    ----------
    header
        JOSE header parameters.
    claims
        Claims of the token.
    signature
        Raw signature to attach, which may be empty.

    Returns
    -------
    str
        The encoded token.
    """
    segments = [
        _encode_json_segment(header),
        _encode_json_segment(claims),
        base64url_encode(signature),
    ]
    return ".".join(segments)


def _decode_json_segment(segment: str, name: str) -> dict[str, Any]:
    """Decode a base64url segment containing a JSON object."""
    try:
        data = json.loads(base64url_decode(segment).decode())
    except (RecursionError, ValueError) as e:
        msg = f"Token {name} is not valid base64url-encoded JSON"
        raise MalformedTokenError(msg) from e
    if not isinstance(data, dict):
        raise MalformedTokenError(f"Token {name} is not a JSON object")
    return data


def _encode_json_segment(data: Mapping[str, Any]) -> str:
    serialized = json.dumps(dict(data), separators=(",", ":"))
    return base64url_encode(serialized.encode())
