"""ECDH-X shared secret."""

from __future__ import annotations

import pytest
from conftest import PRIV_01, PRIV_02, PUB_01, PUB_02

from rlpxcrypto import (InvalidPoint, InvalidScalar, compress_pubkey, ecdh_x,
                        privkey_to_pubkey)

# Shared secret for d = 0x01 * 32 against its own public key (d*d*G).
ECDH_01_01 = bytes.fromhex(
    "2b64e602e899bd260a5b50f89c24ac1b8fe5279b197cba3c63f1c874efc36fc2"
)
ECDH_01_02 = bytes.fromhex(
    "d0158a38faf6118af133af12d9bfa388eab4a08d1a2088ea6e6ec1269e03567f"
)


def test_ecdh_x_pinned_vector() -> None:
    assert ecdh_x(PRIV_01, PUB_01) == ECDH_01_01


def test_ecdh_x_is_symmetric() -> None:
    assert ecdh_x(PRIV_01, PUB_02) == ECDH_01_02
    assert ecdh_x(PRIV_02, PUB_01) == ECDH_01_02


@pytest.mark.parametrize("seed", [3, 7, 0x42, 0xFE])
def test_ecdh_x_symmetry_sweep(seed: int) -> None:
    d1 = bytes([seed]) * 32
    d2 = bytes([seed ^ 0x5A]) * 32
    assert ecdh_x(d1, privkey_to_pubkey(d2)) == ecdh_x(d2, privkey_to_pubkey(d1))


def test_ecdh_x_accepts_compressed_pubkey() -> None:
    assert ecdh_x(PRIV_02, compress_pubkey(PUB_01)) == ECDH_01_02


def test_ecdh_x_is_32_bytes_x_coordinate() -> None:
    # d = 1 leaves the remote point unchanged, so the secret is its x coordinate.
    one = bytes(31) + b"\x01"
    assert ecdh_x(one, PUB_02) == PUB_02[1:33]


def test_ecdh_x_rejects_zero_privkey() -> None:
    with pytest.raises(InvalidScalar):
        ecdh_x(bytes(32), PUB_01)


@pytest.mark.parametrize("pubkey", [PUB_01[:64], PUB_01 + b"\x00", b"\x04" + bytes(64)])
def test_ecdh_x_rejects_bad_pubkey(pubkey: bytes) -> None:
    with pytest.raises(InvalidPoint):
        ecdh_x(PRIV_01, pubkey)
