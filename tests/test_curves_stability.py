"""Stability tests for the secp256k1 implementation.

Lock-in exact outputs for fixed inputs so that any change in curve code
(optimizations, refactors) is detected.
"""

from __future__ import annotations

import pytest
from conftest import PRIV_01, PUB_01

from rlpxcrypto import (DecodingError, InvalidPoint, InvalidScalar,
                        compress_pubkey, decompress_pubkey, privkey_to_pubkey,
                        recover_pubkey, sha256, sign_recoverable)
from rlpxcrypto.curves import decode_pubkey, encode_pubkey, multiply

_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# --- secp256k1: locked-in outputs for fixed inputs ---
SECP_PRIV = bytes.fromhex(
    "0000000000000000000000000000000000000000000000000000000000000001"
)
SECP_MSG_HASH = bytes.fromhex(
    "a0dc65ffca799873cbea0ac274015b9526505daaaed385155425f7337704883e"
)  # sha256(b"Satoshi Nakamoto")
SECP_PUB_EXPECTED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
SECP_R_EXPECTED = 0x934B1EA10A4B3C1757E2B0C017D0B6143CE3C9A7E6A4A49860D7A6AB210EE3D8
SECP_S_EXPECTED = 0x2442CE9D2B916064108014783E923EC36B49743E2FFA1C4496F01A512AAFD9E5
SECP_RECID_EXPECTED = 1

PUB_01_COMPRESSED = bytes.fromhex(
    "031b84c5567b126440995d3ed5aaba0565d71e1834604819ff9c17f5e9d5dd078f"
)


def test_secp256k1_privkey_to_pubkey_stable() -> None:
    """Exact pubkey for fixed privkey must not change."""
    assert privkey_to_pubkey(SECP_PRIV) == SECP_PUB_EXPECTED
    assert privkey_to_pubkey(PRIV_01) == PUB_01


def test_secp256k1_compressed_pubkey_stable() -> None:
    assert privkey_to_pubkey(PRIV_01, compressed=True) == PUB_01_COMPRESSED
    assert compress_pubkey(PUB_01) == PUB_01_COMPRESSED
    assert decompress_pubkey(PUB_01_COMPRESSED) == PUB_01


def test_secp256k1_sign_recoverable_stable() -> None:
    """RFC 6979 vector: exact (r, s, recid) for privkey 1 must not change."""
    r, s, recid = sign_recoverable(SECP_PRIV, SECP_MSG_HASH)
    assert r == SECP_R_EXPECTED
    assert s == SECP_S_EXPECTED
    assert recid == SECP_RECID_EXPECTED


def test_secp256k1_recover_pubkey_stable() -> None:
    """Recovered pubkey must match expected and equal privkey_to_pubkey."""
    r, s, recid = sign_recoverable(SECP_PRIV, SECP_MSG_HASH)
    recovered = recover_pubkey(SECP_MSG_HASH, r, s, recid)
    assert recovered == SECP_PUB_EXPECTED
    assert recovered == privkey_to_pubkey(SECP_PRIV)


def test_secp256k1_msg_hash_consistent() -> None:
    """SECP_MSG_HASH must equal sha256(b'Satoshi Nakamoto') (used by stability tests)."""
    assert SECP_MSG_HASH == sha256(b"Satoshi Nakamoto")


def test_secp256k1_encode_decode_stable() -> None:
    point = decode_pubkey(PUB_01)
    assert decode_pubkey(PUB_01_COMPRESSED) == point
    assert encode_pubkey(point) == PUB_01
    assert encode_pubkey(point, compressed=True) == PUB_01_COMPRESSED


def test_secp256k1_multiply_by_one_is_identity() -> None:
    assert multiply(SECP_PRIV, PUB_01) == decode_pubkey(PUB_01)


@pytest.mark.parametrize(
    "privkey",
    [
        bytes(32),
        _N.to_bytes(32, "big"),
        b"\xff" * 32,
        bytes(31) + b"\x01" + b"\x00",
        bytes(31),
    ],
)
def test_secp256k1_rejects_invalid_privkey(privkey: bytes) -> None:
    with pytest.raises(InvalidScalar):
        privkey_to_pubkey(privkey)


@pytest.mark.parametrize(
    "pubkey",
    [
        b"",
        PUB_01[1:],  # 64-byte node id, no tag
        PUB_01[:-1],
        b"\x05" + PUB_01[1:],
        b"\x04" + (1).to_bytes(32, "big") + (1).to_bytes(32, "big"),  # off curve
        b"\x02" + (5).to_bytes(32, "big"),  # 5**3 + 7 has no square root mod p
        b"\x02" + b"\xff" * 32,  # x >= p
        b"\x06" + PUB_01_COMPRESSED[1:],
    ],
)
def test_secp256k1_rejects_invalid_pubkey(pubkey: bytes) -> None:
    with pytest.raises(InvalidPoint):
        decode_pubkey(pubkey)


def test_secp256k1_recover_rejects_bad_inputs() -> None:
    r, s, recid = sign_recoverable(SECP_PRIV, SECP_MSG_HASH)
    with pytest.raises(DecodingError):
        recover_pubkey(SECP_MSG_HASH[:31], r, s, recid)
    with pytest.raises(DecodingError):
        recover_pubkey(SECP_MSG_HASH, r, s, 4)
    with pytest.raises(InvalidScalar):
        recover_pubkey(SECP_MSG_HASH, 0, s, recid)
    with pytest.raises(InvalidScalar):
        recover_pubkey(SECP_MSG_HASH, r, _N, recid)


def test_secp256k1_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        privkey_to_pubkey(bytes(32))
