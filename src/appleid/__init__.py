"""Decoding and verification of Sign in with Apple ID tokens."""

from .codec import decode, encode
from .exceptions import (
    AppleIDError,
    AppleIDWebError,
    ClaimsVerificationError,
    FetchKeysError,
    InvalidTokenClaimsError,
    KeyNotFoundError,
    MalformedTokenError,
    SignatureVerificationError,
    UnknownAlgorithmError,
    VerificationFailedError,
)
from .hashing import HashBinder
from .keys import (
    HTTPKeySetSource,
    KeySetSource,
    StaticKeySetSource,
    resolve_key,
)
from .models.claims import IDTokenClaims, RealUserStatus, parse_lax_boolean
from .models.client import AppleIDClient, VerificationRequest
from .models.jwks import JWK, JWKS
from .models.token import IDToken, TokenHeader
from .verify import IDTokenVerifier

__all__ = [
    "JWK",
    "JWKS",
    "AppleIDClient",
    "AppleIDError",
    "AppleIDWebError",
    "ClaimsVerificationError",
    "FetchKeysError",
    "HTTPKeySetSource",
    "HashBinder",
    "IDToken",
    "IDTokenClaims",
    "IDTokenVerifier",
    "InvalidTokenClaimsError",
    "KeyNotFoundError",
    "KeySetSource",
    "MalformedTokenError",
    "RealUserStatus",
    "SignatureVerificationError",
    "StaticKeySetSource",
    "TokenHeader",
    "UnknownAlgorithmError",
    "VerificationFailedError",
    "VerificationRequest",
    "decode",
    "encode",
    "parse_lax_boolean",
    "resolve_key",
]
