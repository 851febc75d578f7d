"""Shared fixtures: deterministic random sources and fixed key material."""

from __future__ import annotations

from typing import Callable, List

import pytest

PRIV_01 = bytes([0x01]) * 32
PRIV_02 = bytes([0x02]) * 32
PRIV_03 = bytes([0x03]) * 32

PUB_01 = bytes.fromhex(
    "041b84c5567b126440995d3ed5aaba0565d71e1834604819ff9c17f5e9d5dd078f"
    "70beaf8f588b541507fed6a642c5ab42dfdf8120a7f639de5122d47a69a8e8d1"
)
PUB_02 = bytes.fromhex(
    "044d4b6cd1361032ca9bd2aeb9d900aa4d45d9ead80ac9423374c451a7254d0766"
    "2a3eada2d0fe208b6d257ceb0f064284662e857f57b66b54c198bd310ded36d0"
)


class FixedRandom:
    """Random source that replays pre-arranged chunks, one per draw."""

    def __init__(self, *chunks: bytes) -> None:
        self._chunks: List[bytes] = list(chunks)
        self.draws: List[int] = []

    def __call__(self, length: int) -> bytes:
        self.draws.append(length)
        if not self._chunks:
            raise AssertionError("FixedRandom exhausted")
        return self._chunks.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._chunks)


@pytest.fixture
def fixed_random() -> Callable[..., FixedRandom]:
    return FixedRandom
