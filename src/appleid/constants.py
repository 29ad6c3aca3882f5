"""Constants for Sign in with Apple ID token handling."""

__all__ = [
    "ALGORITHM",
    "CLAIM_ORDER",
    "HTTP_TIMEOUT",
    "ISSUER",
    "JWKS_URI",
    "LAX_BOOLEAN_CLAIMS",
    "RSA_ALGORITHMS",
]

ALGORITHM = "RS256"
"""JWT algorithm Apple uses to sign ID tokens."""

CLAIM_ORDER = (
    "iss",
    "aud",
    "exp",
    "iat",
    "nonce",
    "s_hash",
    "at_hash",
    "c_hash",
)
"""Order in which failed claims are reported.

Failed claims are always reported in this order, independent of the order in
which the checks happen to run.
"""

HTTP_TIMEOUT = 20.0
"""Timeout (in seconds) for retrieving the Apple key set."""

ISSUER = "https://appleid.apple.com"
"""Issuer (``iss`` claim) of every Apple ID token."""

JWKS_URI = "https://appleid.apple.com/auth/keys"
"""URL of Apple's published JSON Web Key Set."""

LAX_BOOLEAN_CLAIMS = ("email_verified", "is_private_email", "nonce_supported")
"""Claims that Apple sends as either a JSON boolean or the string "true"."""

RSA_ALGORITHMS = frozenset(
    {"PS256", "PS384", "PS512", "RS256", "RS384", "RS512"}
)
"""Signature algorithms that can be verified with an RSA key."""
