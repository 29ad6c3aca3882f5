"""Schemas for JSON Web Key Sets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..constants import ALGORITHM

__all__ = ["JWK", "JWKS"]


class JWK(BaseModel):
    """The schema for a JSON Web Key (RFCs 7517 and 7518).

    Unknown key parameters are ignored so that changes to Apple's key set
    don't break parsing.
    """

    model_config = ConfigDict(extra="ignore")

    kty: str = Field(
        ...,
        title="Key type",
        description="Only `RSA` keys can be used",
        examples=["RSA"],
    )

    kid: str = Field(
        ...,
        title="Key ID",
        description=(
            "A name for the key, also used in the header of a JWT signed by"
            " that key"
        ),
        examples=["W6WcOKB"],
    )

    alg: str | None = Field(
        None,
        title="Algorithm",
        description="Algorithm the key is intended for, if given",
        examples=[ALGORITHM],
    )

    use: str | None = Field(None, title="Key usage", examples=["sig"])

    n: str = Field(
        ...,
        title="RSA modulus",
        description=(
            "Big-endian modulus component of the RSA public key encoded in"
            " URL-safe base64 without trailing padding"
        ),
    )

    e: str = Field(
        ...,
        title="RSA exponent",
        description=(
            "Big-endian exponent component of the RSA public key encoded in"
            " URL-safe base64 without trailing padding"
        ),
        examples=["AQAB"],
    )


class JWKS(BaseModel):
    """Schema for a JSON Web Key Set such as Apple's ``/auth/keys``."""

    keys: list[JWK] = Field(..., title="Signing keys")
