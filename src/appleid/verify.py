"""Verify an Apple ID token."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog
from jwt.algorithms import get_default_algorithms
from structlog.stdlib import BoundLogger

from .constants import CLAIM_ORDER, ISSUER, RSA_ALGORITHMS
from .exceptions import (
    ClaimsVerificationError,
    SignatureVerificationError,
    UnknownAlgorithmError,
)
from .hashing import HashBinder
from .keys import KeySetSource, resolve_key
from .models.client import VerificationRequest
from .models.token import IDToken
from .util import current_datetime

__all__ = ["IDTokenVerifier"]


class IDTokenVerifier:
    """Verifies the claims and signature of an Apple ID token.

    The verifier holds no per-token state and may be shared between
    concurrent verifications.

    Parameters
    ----------
    key_source
        Source of the key set used to verify signatures.
    issuer
        Expected ``iss`` claim.
    clock
        Function returning the current time. Overridden by the test suite.
    logger
        Logger to use to report status information.
    """

    def __init__(
        self,
        key_source: KeySetSource,
        *,
        issuer: str = ISSUER,
        clock: Callable[[], datetime] = current_datetime,
        logger: BoundLogger | None = None,
    ) -> None:
        self._key_source = key_source
        self._issuer = issuer
        self._clock = clock
        self._logger = logger or structlog.get_logger("appleid")

    async def verify(
        self, token: IDToken, request: VerificationRequest | None = None
    ) -> None:
        """Verify a token.

        The claims are always checked. The signature is checked afterwards
        unless ``request.verify_signature`` is false, and is not checked at
        all if the claims fail.

        Parameters
        ----------
        token
            Decoded token to verify.
        request
            Expected values for the token. If not given, only the issuer,
            timing, and signature are checked.

        Raises
        ------
        AppleIDWebError
            Raised if retrieving the key set failed.
        ClaimsVerificationError
            Raised if any claim failed verification.
        FetchKeysError
            Raised if the retrieved key set was invalid.
        SignatureVerificationError
            Raised if the signature could not be verified.
        """
        if request is None:
            request = VerificationRequest()
        self.verify_claims(token, request)
        if request.verify_signature:
            await self.verify_signature(token)

    def verify_claims(
        self, token: IDToken, request: VerificationRequest | None = None
    ) -> None:
        """Check the claims of a token.

        Every applicable check is run, and all failures are reported
        together.

        Parameters
        ----------
        token
            Decoded token to check.
        request
            Expected values for the token.

        Raises
        ------
        ClaimsVerificationError
            Raised if any claim failed verification.
        """
        if request is None:
            request = VerificationRequest()
        results = self._check_claims(token, request)
        failed = [c for c in CLAIM_ORDER if results.get(c) is False]
        if failed:
            self._logger.warning(
                "ID token claims verification failed",
                failed_claims=failed,
                kid=token.header.kid,
            )
            raise ClaimsVerificationError(failed)

    async def verify_signature(self, token: IDToken) -> None:
        """Check the signature of a token against the provider key set.

        Parameters
        ----------
        token
            Decoded token to check.

        Raises
        ------
        AppleIDWebError
            Raised if retrieving the key set failed.
        FetchKeysError
            Raised if the retrieved key set was invalid.
        KeyNotFoundError
            Raised if the key for the token was not in the key set.
        SignatureVerificationError
            Raised if the signature does not match.
        UnknownAlgorithmError
            Raised if the token algorithm is not supported.
        """
        alg = token.header.alg
        if alg not in RSA_ALGORITHMS:
            raise UnknownAlgorithmError(f"Unsupported algorithm {alg}")
        algorithm = get_default_algorithms()[alg]

        key_set = await self._key_source.get_key_set()
        key = resolve_key(token.header.kid, key_set, alg)
        self._logger.debug(
            "Verifying ID token signature", kid=token.header.kid
        )
        if not algorithm.verify(token.signing_input, key, token.signature):
            self._logger.warning(
                "ID token signature verification failed",
                kid=token.header.kid,
            )
            raise SignatureVerificationError("Signature verification failed")

    def _check_claims(
        self, token: IDToken, request: VerificationRequest
    ) -> dict[str, bool]:
        """Run every applicable claim check.

        Returns
        -------
        dict of bool
            Mapping of claim name to whether it passed. Checks that did not
            apply are not included.
        """
        claims = token.claims
        now = int(self._clock().timestamp())
        results = {
            "iss": claims.iss == self._issuer,
            "exp": int(claims.exp.timestamp()) > now,
            "iat": int(claims.iat.timestamp()) <= now,
        }
        if request.client:
            results["aud"] = claims.aud == request.client.identifier
        if claims.nonce_supported and request.nonce is not None:
            results["nonce"] = claims.nonce == request.nonce

        hashed = {
            "s_hash": request.state,
            "at_hash": request.access_token,
            "c_hash": request.code,
        }
        if any(v is not None for v in hashed.values()):
            binder = self._get_hash_binder(token)
            for claim, value in hashed.items():
                if value is None:
                    continue
                claim_value = getattr(claims, claim)
                results[claim] = binder is not None and binder.verify(
                    claim_value, value
                )
        return results

    def _get_hash_binder(self, token: IDToken) -> HashBinder | None:
        try:
            return HashBinder(token.header.alg)
        except UnknownAlgorithmError as e:
            self._logger.warning(
                "Cannot check hash claims", error=str(e), alg=token.header.alg
            )
            return None
