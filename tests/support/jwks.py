"""Mock of Apple's key set endpoint."""

from __future__ import annotations

import respx

from appleid.constants import JWKS_URI
from appleid.models.jwks import JWKS

from .constants import TEST_KEYPAIR, TEST_KID

__all__ = ["mock_jwks"]


def mock_jwks(
    respx_mock: respx.Router, jwks: JWKS | None = None
) -> respx.Route:
    """Serve a key set at Apple's key set URL.

    Parameters
    ----------
    respx_mock
        The mock router.
    jwks
        Key set to serve. Defaults to the public key of `TEST_KEYPAIR` with
        key ID `TEST_KID`.

    Returns
    -------
    respx.Route
        The route, which can be used to check calls.
    """
    if not jwks:
        jwks = TEST_KEYPAIR.public_key_as_jwks(TEST_KID)
    body = jwks.model_dump(mode="json", exclude_none=True)
    return respx_mock.get(JWKS_URI).respond(json=body)
