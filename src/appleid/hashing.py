"""Hashes that bind an ID token to other OAuth values.

The ``at_hash``, ``c_hash``, and ``s_hash`` claims hold a truncated hash of
the access token, authorization code, and state string respectively. All
three use the same construction: hash the value with the hash function of the
token's signature algorithm, keep the left half of the digest, and encode it
as URL-safe base64 without padding.
"""

from __future__ import annotations

import hashlib
import hmac
import re

from .exceptions import UnknownAlgorithmError
from .util import base64url_encode

__all__ = ["HashBinder"]

_ALGORITHM_REGEX = re.compile("^[A-Z]{2}(256|384|512)$")
"""JWA algorithm identifiers and the SHA-2 digest size they use."""


class HashBinder:
    """Compute and compare left-half hashes for one signature algorithm.

    Parameters
    ----------
    algorithm
        JWA signature algorithm of the token, such as ``RS256``.

    Raises
    ------
    UnknownAlgorithmError
        Raised if no SHA-2 hash function corresponds to the algorithm.
    """

    def __init__(self, algorithm: str) -> None:
        match = _ALGORITHM_REGEX.match(algorithm)
        if not match:
            msg = f"No hash function for algorithm {algorithm}"
            raise UnknownAlgorithmError(msg)
        self.algorithm = algorithm
        self._hash_name = f"sha{match.group(1)}"

    def compute(self, value: str) -> str:
        """Compute the hash claim value for a plaintext.

        Parameters
        ----------
        value
            Access token, authorization code, or state string.

        Returns
        -------
        str
            Expected value of the corresponding hash claim.
        """
        digest = hashlib.new(self._hash_name, value.encode()).digest()
        return base64url_encode(digest[: len(digest) // 2])

    @staticmethod
    def matches(claim_value: str | None, computed: str) -> bool:
        """Compare a hash claim to a computed hash.

        The comparison is of the exact encoded bytes. A missing claim never
        matches.
        """
        if claim_value is None:
            return False
        return hmac.compare_digest(claim_value.encode(), computed.encode())

    def verify(self, claim_value: str | None, value: str) -> bool:
        """Check whether a hash claim matches a plaintext."""
        return self.matches(claim_value, self.compute(value))
