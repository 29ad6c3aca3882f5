"""Selection of signing keys and retrieval of key sets."""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

import structlog
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import rsa
from httpx import AsyncClient, HTTPError, Timeout
from pydantic import ValidationError
from structlog.stdlib import BoundLogger

from .constants import ALGORITHM, JWKS_URI
from .exceptions import (
    AppleIDWebError,
    FetchKeysError,
    KeyNotFoundError,
    UnknownAlgorithmError,
)
from .models.jwks import JWK, JWKS
from .util import base64_to_number

__all__ = [
    "HTTPKeySetSource",
    "KeySetSource",
    "StaticKeySetSource",
    "build_public_key",
    "resolve_key",
]


class KeySetSource(Protocol):
    """Something that can provide the provider's current key set."""

    async def get_key_set(self) -> JWKS:
        """Return the key set to use for signature verification."""


class StaticKeySetSource:
    """Key set source that always returns the same key set.

    Used when the caller already has the key set, such as from its own
    cache, and for testing.

    Parameters
    ----------
    key_set
        Key set to return.
    """

    def __init__(self, key_set: JWKS) -> None:
        self._key_set = key_set

    async def get_key_set(self) -> JWKS:
        return self._key_set


class HTTPKeySetSource:
    """Retrieve the key set from Apple over HTTP.

    Every call makes a new request. There is no caching and no retry, so
    callers that want either should wrap this object or use
    `StaticKeySetSource` with their own cached copy.

    Parameters
    ----------
    http_client
        Client to use to make HTTP requests.
    url
        URL of the key set.
    timeout
        Timeout for each request. If not given, defaults to the timeout of
        the HTTP client.
    logger
        Logger for any log messages.
    """

    def __init__(
        self,
        http_client: AsyncClient,
        *,
        url: str = JWKS_URI,
        timeout: timedelta | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._http_client = http_client
        self._url = url
        self._logger = logger or structlog.get_logger("appleid")
        if timeout is not None:
            self._timeout: float | Timeout = timeout.total_seconds()
        else:
            self._timeout = http_client.timeout

    async def get_key_set(self) -> JWKS:
        """Fetch the key set.

        Returns
        -------
        JWKS
            The parsed key set.

        Raises
        ------
        AppleIDWebError
            Raised if the HTTP request failed.
        FetchKeysError
            Raised if the response is not a valid key set.
        """
        self._logger.debug("Retrieving key set", url=self._url)
        try:
            r = await self._http_client.get(self._url, timeout=self._timeout)
            r.raise_for_status()
        except HTTPError as e:
            raise AppleIDWebError.from_exception(e) from e

        try:
            return JWKS.model_validate(r.json())
        except (ValidationError, ValueError) as e:
            msg = f"No valid keys property in key set from {self._url}"
            raise FetchKeysError(msg) from e


def build_public_key(jwk: JWK) -> rsa.RSAPublicKey:
    """Convert the modulus and exponent of a JWK to a public key.

    Parameters
    ----------
    jwk
        RSA key in JWK form.

    Returns
    -------
    cryptography.hazmat.primitives.asymmetric.rsa.RSAPublicKey
        Corresponding public key.

    Raises
    ------
    UnknownAlgorithmError
        Raised if the key is not a usable RSA key.
    """
    if jwk.kty != "RSA":
        raise UnknownAlgorithmError(f"Key {jwk.kid} has type {jwk.kty}")
    e = base64_to_number(jwk.e)
    n = base64_to_number(jwk.n)
    try:
        components = rsa.RSAPublicNumbers(e, n)
        return components.public_key(backend=default_backend())
    except ValueError as exc:
        msg = f"Key {jwk.kid} is not a valid RSA key"
        raise UnknownAlgorithmError(msg) from exc


def resolve_key(
    key_id: str | None, key_set: JWKS, algorithm: str = ALGORITHM
) -> rsa.RSAPublicKey:
    """Find the key with a given key ID in a key set.

    Parameters
    ----------
    key_id
        Key ID from the token header.
    key_set
        Key set to search.
    algorithm
        Signature algorithm of the token. Keys that declare a different
        algorithm are not used.

    Returns
    -------
    cryptography.hazmat.primitives.asymmetric.rsa.RSAPublicKey
        Public key for that key ID.

    Raises
    ------
    KeyNotFoundError
        Raised if the key ID was not given or not found in the key set.
    UnknownAlgorithmError
        Raised if the key was found but is not usable with the algorithm.
    """
    if not key_id:
        raise KeyNotFoundError("No kid in token header")
    key = next((k for k in key_set.keys if k.kid == key_id), None)
    if not key:
        raise KeyNotFoundError(f"Key set has no kid {key_id}")
    if key.alg and key.alg != algorithm:
        msg = f"Key {key_id} has algorithm {key.alg} not {algorithm}"
        raise UnknownAlgorithmError(msg)
    return build_public_key(key)
