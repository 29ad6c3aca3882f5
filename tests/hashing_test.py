"""Tests for hashes binding a token to other OAuth values."""

from __future__ import annotations

import pytest

from appleid.exceptions import UnknownAlgorithmError
from appleid.hashing import HashBinder


def test_compute() -> None:
    binder = HashBinder("RS256")

    # Example c_hash from the OpenID Connect Core specification.
    code = "Qcb0Orv1zh30vL1MPRsbm-diHiMwcLyZvn1arpZv-Jxf_11jnpEX3Tgfvk"
    assert binder.compute(code) == "LDktKdoQak3Pk0cnXxCltA"

    access_token = "jHkWEdUXMU1BwAsC4vtUsZwnNCuJpQy"
    assert binder.compute(access_token) == "rRJW_ZrNqiRhyzNqEoDURA"
    assert binder.compute("some-state") == "1DFxCPoklrWabhfPO9ZDmg"


def test_digest_size() -> None:
    result = HashBinder("RS384").compute("some-state")
    assert result == "WsAH50ILCkPk2R_w9PI0sWB8YapKp8y2"
    result = HashBinder("ES512").compute("some-state")
    assert result == "HpbIFL4exSmD-gk1SGcdhRYa4JCAiA9RvIqgcmXOFQs"
    assert HashBinder("PS256").compute("x") == HashBinder("RS256").compute("x")


@pytest.mark.parametrize("algorithm", ["none", "EdDSA", "RS1", "rs256", ""])
def test_unknown_algorithm(algorithm: str) -> None:
    with pytest.raises(UnknownAlgorithmError):
        HashBinder(algorithm)


def test_matches() -> None:
    computed = HashBinder("RS256").compute("some-state")
    assert HashBinder.matches("1DFxCPoklrWabhfPO9ZDmg", computed)
    assert not HashBinder.matches(None, computed)
    assert not HashBinder.matches("", computed)
    assert not HashBinder.matches("1DFxCPoklrWabhfPO9ZDmg=", computed)
    assert not HashBinder.matches("1dfxcpoklrwabhfpo9zdmg", computed)


def test_verify() -> None:
    binder = HashBinder("RS256")
    assert binder.verify("1DFxCPoklrWabhfPO9ZDmg", "some-state")
    assert not binder.verify("1DFxCPoklrWabhfPO9ZDmg", "other-state")
    assert not binder.verify(None, "some-state")
