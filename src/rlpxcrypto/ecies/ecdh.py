"""
ECDH-X: the raw x-coordinate shared secret used by RLPx / devp2p ECIES.
"""

from __future__ import annotations

from ..curves import encode_pubkey, multiply


def ecdh_x(privkey: bytes, pubkey: bytes) -> bytes:
    """
    Shared secret between a local private key and a remote public key.

    The product point is serialized in compressed form (parity tag || x) and
    the tag byte is dropped, leaving the 32-byte big-endian x coordinate.
    ecdh_x(d1, Q2) == ecdh_x(d2, Q1) for any two key pairs.

    Args:
        privkey: 32-byte private key.
        pubkey: 33- or 65-byte SEC1 public key.

    Returns:
        32-byte shared secret.

    Raises:
        InvalidScalar: bad private key.
        InvalidPoint: bad public key.
    """
    compressed = encode_pubkey(multiply(privkey, pubkey), compressed=True)
    return compressed[1:]


__all__: tuple[str, ...] = ("ecdh_x",)
