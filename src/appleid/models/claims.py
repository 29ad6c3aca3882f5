"""Typed view of the claims in an Apple ID token."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from safir.pydantic import normalize_datetime

from ..constants import LAX_BOOLEAN_CLAIMS

__all__ = [
    "IDTokenClaims",
    "RealUserStatus",
    "parse_lax_boolean",
]


def parse_lax_boolean(value: Any) -> bool:
    """Parse a claim that may be a boolean or a string boolean.

    Apple sends some boolean claims as JSON booleans and others as the
    strings ``"true"`` or ``"false"``, and has changed between the two over
    time. Every such claim is parsed with this function.

    Parameters
    ----------
    value
        Raw claim value, or `None` if the claim was missing.

    Returns
    -------
    bool
        `True` if the value is `True` or the string ``"true"``, `False`
        otherwise.
    """
    return value is True or value == "true"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a claim holding seconds since epoch.

    Booleans are rejected even though Python treats them as integers, and
    timestamps outside the range the platform can represent are reported as
    validation errors.

    Parameters
    ----------
    value
        Raw claim value.

    Returns
    -------
    datetime or None
        The corresponding time in UTC, or `None` if the claim was missing.

    Raises
    ------
    ValueError
        Raised if the value is not a usable timestamp.
    """
    if isinstance(value, bool):
        raise ValueError("Must be seconds since epoch, not a boolean")
    try:
        return normalize_datetime(value)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp {value} out of range") from e


def parse_real_user_status(value: Any) -> Any:
    """Require ``real_user_status`` to be a JSON integer."""
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("real_user_status must be an integer")
    return value


class RealUserStatus(IntEnum):
    """Apple's assessment of whether the user is a real person.

    Only sent on the first authentication of a user on supported platforms.
    """

    unsupported = 0
    """Not supported on this platform."""

    unknown = 1
    """Apple could not determine whether the user is real."""

    likely_real = 2
    """The user appears to be a real person."""


class IDTokenClaims(BaseModel):
    """Claims from an Apple ID token.

    Known claims are parsed into typed fields. The full claim set, including
    any claims not modelled here, is available in ``raw`` as a read-only
    mapping.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    iss: str = Field(..., title="Issuer")

    sub: str = Field(
        ...,
        title="Subject",
        description="Stable unique identifier of the user for this team",
    )

    aud: str = Field(
        ..., title="Audience", description="Client ID of the relying party"
    )

    exp: datetime = Field(..., title="Expiration time")

    iat: datetime = Field(..., title="Issue time")

    nonce: str | None = Field(None, title="Client-supplied nonce")

    auth_time: datetime | None = Field(None, title="Authentication time")

    email: str | None = Field(None, title="Email address of the user")

    email_verified: bool = Field(False, title="Whether email is verified")

    is_private_email: bool = Field(
        False,
        title="Whether email is a relay",
        description="Whether the email is a private relay address",
    )

    nonce_supported: bool = Field(
        False,
        title="Whether nonce is supported",
        description="Whether the platform supports the nonce claim",
    )

    real_user_status: RealUserStatus | None = Field(
        None, title="Real user status"
    )

    at_hash: str | None = Field(None, title="Access token hash")

    c_hash: str | None = Field(None, title="Authorization code hash")

    s_hash: str | None = Field(None, title="State hash")

    raw: Mapping[str, Any] = Field(
        default_factory=dict,
        title="All claims as decoded",
        description="Read-only copy of every claim in the token",
        exclude=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _capture_raw(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {**data, "raw": dict(data)}
        return data

    @field_validator("raw")
    @classmethod
    def _freeze_raw(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    _normalize_times = field_validator(
        "exp", "iat", "auth_time", mode="before"
    )(parse_timestamp)

    _check_real_user_status = field_validator(
        "real_user_status", mode="before"
    )(parse_real_user_status)

    _parse_booleans = field_validator(*LAX_BOOLEAN_CLAIMS, mode="before")(
        parse_lax_boolean
    )
