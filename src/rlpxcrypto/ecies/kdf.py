"""
NIST SP 800-56A single-step concatenation KDF with SHA-256.
"""

from __future__ import annotations

from ..errors import LengthTooLarge
from ..hashes import DIGEST_SIZE, sha256
from ..settings import Settings


def concat_kdf(key_material: bytes, length: int) -> bytes:
    """
    Stretch key_material into ``length`` bytes.

    Block i (counter starting at 1) is SHA256(counter as 4-byte big-endian ||
    key_material); blocks are concatenated and the last one is truncated.
    A shorter output is always a prefix of a longer one for the same input.

    Raises:
        ValueError: negative length.
        LengthTooLarge: length above Settings.KDF_MAX_LENGTH.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if length > Settings.KDF_MAX_LENGTH:
        raise LengthTooLarge(
            f"requested {length} bytes, limit is {Settings.KDF_MAX_LENGTH}"
        )
    blocks = []
    for counter in range(1, -(-length // DIGEST_SIZE) + 1):
        blocks.append(sha256(counter.to_bytes(4, "big") + key_material))
    return b"".join(blocks)[:length]


__all__: tuple[str, ...] = ("concat_kdf",)
