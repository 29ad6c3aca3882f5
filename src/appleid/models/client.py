"""Models for the relying party and its verification expectations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["AppleIDClient", "VerificationRequest"]


class AppleIDClient(BaseModel):
    """A Sign in with Apple client registration.

    Only ``identifier`` matters for token verification. The remaining fields
    describe the registration and are carried for the caller's convenience.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(
        ...,
        title="Client ID",
        description="Services ID or bundle ID, the expected ``aud`` claim",
        examples=["com.example.signin"],
    )

    team_id: str | None = Field(None, title="Apple developer team ID")

    key_id: str | None = Field(
        None, title="ID of the client's private key registered with Apple"
    )

    redirect_uri: str | None = Field(None, title="Registered return URL")


class VerificationRequest(BaseModel):
    """Expected values against which to verify an ID token.

    Each expectation is optional and the corresponding check is skipped if it
    is not given.
    """

    model_config = ConfigDict(frozen=True)

    client: AppleIDClient | None = Field(
        None, title="Client whose identifier must match ``aud``"
    )

    nonce: str | None = Field(
        None,
        title="Expected nonce",
        description=(
            "Only checked if the token says the platform supports nonces"
        ),
    )

    state: str | None = Field(
        None, title="State whose hash must match ``s_hash``"
    )

    access_token: str | None = Field(
        None, title="Access token whose hash must match ``at_hash``"
    )

    code: str | None = Field(
        None, title="Authorization code whose hash must match ``c_hash``"
    )

    verify_signature: bool = Field(
        True, title="Whether to verify the token signature"
    )
