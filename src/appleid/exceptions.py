"""Exceptions for Apple ID token handling."""

from __future__ import annotations

from collections.abc import Iterable
from typing import override

from safir.slack.blockkit import (
    SlackException,
    SlackMessage,
    SlackTextField,
    SlackWebException,
)

__all__ = [
    "AppleIDError",
    "AppleIDWebError",
    "ClaimsVerificationError",
    "FetchKeysError",
    "InvalidTokenClaimsError",
    "KeyNotFoundError",
    "MalformedTokenError",
    "SignatureVerificationError",
    "UnknownAlgorithmError",
    "VerificationFailedError",
]


class AppleIDError(SlackException):
    """Base class for all Apple ID token exceptions."""


class MalformedTokenError(AppleIDError):
    """The token could not be parsed into header, claims, and signature.

    Raised at decode time if the token does not have exactly three segments
    or if the header or claims are not valid base64url-encoded JSON objects.
    """


class InvalidTokenClaimsError(AppleIDError):
    """A required claim is missing or a claim has an invalid value."""


class VerificationFailedError(AppleIDError):
    """Base class for failures to verify a decoded token."""


class ClaimsVerificationError(VerificationFailedError):
    """One or more claims of the token did not match expectations.

    Parameters
    ----------
    failed_claims
        Names of every failed claim, in the order they should be reported.
    """

    def __init__(self, failed_claims: Iterable[str]) -> None:
        self.failed_claims = list(failed_claims)
        claims = ", ".join(self.failed_claims)
        super().__init__(f"Claims verification failed at [{claims}]")

    @override
    def to_slack(self) -> SlackMessage:
        message = super().to_slack()
        field = SlackTextField(
            heading="Failed claims", text=", ".join(self.failed_claims)
        )
        message.fields.append(field)
        return message


class SignatureVerificationError(VerificationFailedError):
    """The signature of the token could not be verified."""


class KeyNotFoundError(SignatureVerificationError):
    """The key ID of the token was not found in the key set."""


class UnknownAlgorithmError(SignatureVerificationError):
    """The token or key uses an unsupported algorithm."""


class FetchKeysError(AppleIDError):
    """The retrieved key set was not valid."""


class AppleIDWebError(SlackWebException, AppleIDError):
    """An HTTP request to Apple failed."""
