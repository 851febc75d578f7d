"""
Recoverable ECDSA over secp256k1: 65-byte r || s || recid signatures.
"""

from __future__ import annotations

from ..curves import recover_pubkey, sign_recoverable
from ..errors import DecodingError

SIGNATURE_SIZE = 65


def ecdsa_sign(msg_hash: bytes, privkey: bytes) -> bytes:
    """
    Sign an already-hashed 32-byte message.

    Deterministic (RFC 6979) and low-s normalized, so the same
    (msg_hash, privkey) always yields the same signature.

    Args:
        msg_hash: 32-byte digest.
        privkey: 32-byte private key.

    Returns:
        65 bytes: r (32) || s (32) || recid (1), recid in {0, 1, 2, 3}.
    """
    r, s, recid = sign_recoverable(privkey, msg_hash)
    return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([recid])


def ecdsa_recover(msg_hash: bytes, signature: bytes) -> bytes:
    """Recover the 65-byte uncompressed signer key from an ecdsa_sign signature."""
    if len(signature) != SIGNATURE_SIZE:
        raise DecodingError(
            f"signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    return recover_pubkey(msg_hash, r, s, signature[64])


__all__: tuple[str, ...] = ("SIGNATURE_SIZE", "ecdsa_recover", "ecdsa_sign")
