"""Constants used in test fixtures and setup."""

from __future__ import annotations

from .keypair import RSAKeyPair

__all__ = [
    "SAMPLE_CLIENT_ID",
    "SAMPLE_SIGNATURE",
    "SAMPLE_SIGNING_INPUT",
    "SAMPLE_SIGNING_INPUT_MORE_CLAIMS",
    "TEST_CLIENT_ID",
    "TEST_KEYPAIR",
    "TEST_KID",
]

SAMPLE_CLIENT_ID = "jp.yauth.signin.service2"
"""Audience of the sample token with the basic claims."""

SAMPLE_SIGNING_INPUT = (
    "eyJraWQiOiJBSURPUEsxIiwiYWxnIjoiUlMyNTYifQ.eyJpc3MiOiJodHRwczovL2FwcGxla"
    "WQuYXBwbGUuY29tIiwiYXVkIjoianAueWF1dGguc2lnbmluLnNlcnZpY2UyIiwiZXhwIjoxN"
    "TU5NzA5ODkwLCJpYXQiOjE1NTk3MDkyOTAsInN1YiI6IjAwMDcyMy4yNWRhOGJlMzMyOTY0O"
    "TkxODk4NjMwOTQ3MjAyZmVmMC4wNDAyIiwiYXRfaGFzaCI6InpqUmlUN2QzVHFRNVM3cEZkb"
    "zZxWGcifQ"
)
"""Header and claims of a token issued by Apple with only the basic claims.

Decodes to ``iss``, ``aud``, ``exp``, ``iat``, ``sub``, and ``at_hash``.
"""

SAMPLE_SIGNING_INPUT_MORE_CLAIMS = (
    "eyJraWQiOiI4NkQ4OEtmIiwiYWxnIjoiUlMyNTYifQ.eyJpc3MiOiJodHRwczovL2FwcGxla"
    "WQuYXBwbGUuY29tIiwiYXVkIjoianAueWF1dGguc2lnbmluLnNlcnZpY2UzIiwiZXhwIjoxN"
    "Tg1MTE2NzMyLCJpYXQiOjE1ODUxMTYxMzIsInN1YiI6IjAwMDcyMy4yNWRhOGJlMzMyOTY0O"
    "TkxODk4NjMwOTQ3MjAyZmVmMC4wNDAyIiwibm9uY2UiOiI4MDliMzFmM2E4ZDQxOTMwIiwiY"
    "19oYXNoIjoiY0JvOXREYkRZOWlrYTFXNlZmTzBCdyIsImVtYWlsIjoiZm9vYmFyQHByaXZhd"
    "GVyZWxheS5hcHBsZWlkLmNvbSIsImVtYWlsX3ZlcmlmaWVkIjoidHJ1ZSIsImlzX3ByaXZhd"
    "GVfZW1haWwiOiJ0cnVlIiwiYXV0aF90aW1lIjoxNTg1MTE2MTMyLCJub25jZV9zdXBwb3J0Z"
    "WQiOnRydWV9"
)
"""Header and claims of a token issued by Apple with the optional claims.

Adds ``nonce``, ``c_hash``, ``email``, ``email_verified`` and
``is_private_email`` (both as the string ``"true"``), ``auth_time``, and
``nonce_supported`` (as a JSON boolean).
"""

SAMPLE_SIGNATURE = (
    "jDV-AVFM-Yx_lxc-hsJNF2mgD2PoRlQ8SJjharKom87pIKR1frQfaY_apO-AxyDrhvB3qOdf"
    "hZql08EHBHNWATlX3l6sAKL-bUPH6bzHxIZTWHZ9IOimPyvTOJNFyJWLsm6lGcqemKB1UQG2"
    "MQ06lI9qc6C6T8_obv2HPJ-Sm8OBE9z-CDyKGcFZ-R8b2Ut6TibmRyQ-kmB7na6ay9kGXm56"
    "I_TeA2QCMJGKH_X8C2M7kBPsO_WrYuogA3tnWLT8wi0TPD5zKnnBH0bXLgjeyE2lYRgboQtt"
    "X6WqTdR0dN-mLi8ShTPEGUCkC7_jFJH9XpC7LfCeKl9tD3qzC_Dx1Q"
)
"""Signature segment of the sample token."""

TEST_CLIENT_ID = "com.example.signin"
"""Client ID used for tokens created by the test suite."""

TEST_KID = "test-kid"
"""Key ID of `TEST_KEYPAIR` in mocked key sets."""

TEST_KEYPAIR = RSAKeyPair.generate()
"""RSA key pair standing in for Apple's signing key.

Generating this takes a surprisingly long time when summed across every test,
so generate one statically at import time for each test run.
"""
