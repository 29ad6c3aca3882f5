"""Test fixtures."""

from __future__ import annotations

import pytest

from appleid.keys import StaticKeySetSource
from appleid.verify import IDTokenVerifier

from .support.constants import TEST_KEYPAIR, TEST_KID


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear configuration environment variables that may leak in."""
    for setting in (
        "CLIENT_ID",
        "CONFIG_PATH",
        "HTTP_TIMEOUT",
        "ISSUER",
        "JWKS_URL",
        "LOG_LEVEL",
        "PROFILE",
    ):
        monkeypatch.delenv(f"APPLEID_{setting}", raising=False)


@pytest.fixture
def key_source() -> StaticKeySetSource:
    """Return a key source holding the public key of the test key pair."""
    return StaticKeySetSource(TEST_KEYPAIR.public_key_as_jwks(TEST_KID))


@pytest.fixture
def verifier(key_source: StaticKeySetSource) -> IDTokenVerifier:
    """Return a verifier using the test key pair and the real clock."""
    return IDTokenVerifier(key_source)
