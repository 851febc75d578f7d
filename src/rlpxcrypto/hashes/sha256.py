"""
SHA-256 and HMAC-SHA256 on top of the `cryptography` backend.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes, hmac

DIGEST_SIZE = 32


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of data."""
    d = hashes.Hash(hashes.SHA256())
    d.update(data)
    return d.finalize()


def hmac_sha256(key: bytes, *parts: bytes) -> bytes:
    """
    HMAC-SHA256 of the concatenation of parts.

    Parts are fed in order with no separators or length prefixes.
    """
    h = hmac.HMAC(key, hashes.SHA256())
    for part in parts:
        h.update(part)
    return h.finalize()


__all__: tuple[str, ...] = ("DIGEST_SIZE", "hmac_sha256", "sha256")
