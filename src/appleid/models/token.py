"""Representation of a decoded Apple ID token."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .claims import IDTokenClaims

__all__ = ["IDToken", "TokenHeader"]


class TokenHeader(BaseModel):
    """The JOSE header of an ID token.

    Header parameters other than ``kid`` and ``alg`` are retained as extra
    attributes but not otherwise used.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    kid: str | None = Field(
        None,
        title="Key ID",
        description="Key ID of the key in the JWKS that signed the token",
    )

    alg: str = Field(..., title="Signature algorithm", examples=["RS256"])


class IDToken(BaseModel):
    """A decoded, but not necessarily verified, ID token.

    Notes
    -----
    The signing input is kept exactly as received. Re-encoding the decoded
    header and claims would not in general reproduce the same bytes, so the
    signature can only be checked against ``signing_input``.
    """

    model_config = ConfigDict(frozen=True)

    header: TokenHeader = Field(..., title="Token header")

    claims: IDTokenClaims = Field(..., title="Token claims")

    signature: bytes = Field(..., title="Raw signature")

    signing_input: bytes = Field(
        ...,
        title="Signed data",
        description="ASCII bytes of the encoded header and claims joined by .",
    )

    encoded: str = Field(..., title="The encoded form of the token")

    def __str__(self) -> str:
        return self.encoded
