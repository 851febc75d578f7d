"""
Cryptographically-secure randomness, passed around as a capability.

A RandomSource is any callable ``source(length) -> bytes``. Production code
uses ``system_random`` (the OS CSPRNG, safe to call from any thread); tests
substitute a deterministic source.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .curves import privkey_to_scalar
from .errors import EntropySourceUnavailable, InvalidScalar

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]

# Probability of 64 consecutive out-of-range draws is below 2**-8000.
_MAX_PRIVKEY_DRAWS = 64


def system_random(length: int) -> bytes:
    return os.urandom(length)


def random_bytes(length: int, rng: Optional[RandomSource] = None) -> bytes:
    """
    Draw ``length`` bytes from ``rng`` (default: the OS CSPRNG).

    Raises:
        EntropySourceUnavailable: the source failed or returned a short read.
    """
    source = rng if rng is not None else system_random
    try:
        data = source(length)
    except (OSError, NotImplementedError) as exc:
        logger.error("random source failed while drawing %d bytes", length)
        raise EntropySourceUnavailable(f"random source failed: {exc}") from exc
    if len(data) != length:
        raise EntropySourceUnavailable(
            f"random source returned {len(data)} bytes, expected {length}"
        )
    return bytes(data)


def random_privkey(rng: Optional[RandomSource] = None) -> bytes:
    """Fresh secp256k1 private key by rejection sampling 32-byte draws."""
    for _ in range(_MAX_PRIVKEY_DRAWS):
        candidate = random_bytes(32, rng)
        try:
            privkey_to_scalar(candidate)
        except InvalidScalar:
            logger.debug("discarding out-of-range private key draw")
            continue
        return candidate
    raise EntropySourceUnavailable("random source never produced a valid private key")


__all__: tuple[str, ...] = (
    "RandomSource",
    "random_bytes",
    "random_privkey",
    "system_random",
)
