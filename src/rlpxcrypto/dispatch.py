"""
Tagged requests: one frozen dataclass per operation, parsed from JSON.

{"type": "Ecdhx", "privateKey": "<hex>", "publicKey": "<hex>"}
{"type": "EcdsaSign", "ephemeralPrivateKey": "<hex>", "msg": "<hex>"}
{"type": "TaggedKdf", "remotePublicKey": "<hex>", "msg": "<hex>", "macData": "<hex>"}
{"type": "ConcatKdf", "privateKey": "<hex>", "msg": "<hex>"}
"""

from __future__ import annotations

import binascii
import json
import logging
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, ClassVar, Mapping, Optional, Union

from .ecies import ecdh_x, ecies_encrypt
from .entropy import RandomSource
from .errors import DecodingError, UnrecognizedOperation
from .handshake import SIZE_PREFIX, ack_encryption_key
from .signing import ecdsa_sign

logger = logging.getLogger(__name__)

_PUBKEY_SIZES = (33, 65)


def _wire(name: str, **kwargs: Any) -> Any:
    return field(metadata={"wire": name}, **kwargs)


def _check_length(name: str, value: bytes, *allowed: int) -> None:
    if len(value) not in allowed:
        expected = " or ".join(str(n) for n in allowed)
        raise DecodingError(f"{name} must be {expected} bytes, got {len(value)}")


@dataclass(frozen=True)
class EcdhxRequest:
    """Raw ECDH-X shared secret (32 bytes)."""

    TAG: ClassVar[str] = "Ecdhx"

    private_key: bytes = _wire("privateKey")
    public_key: bytes = _wire("publicKey")

    def __post_init__(self) -> None:
        _check_length("privateKey", self.private_key, 32)
        _check_length("publicKey", self.public_key, *_PUBKEY_SIZES)

    def run(self, rng: Optional[RandomSource] = None) -> bytes:
        return ecdh_x(self.private_key, self.public_key)


@dataclass(frozen=True)
class EcdsaSignRequest:
    """Recoverable signature over a 32-byte digest (65 bytes)."""

    TAG: ClassVar[str] = "EcdsaSign"

    ephemeral_private_key: bytes = _wire("ephemeralPrivateKey")
    msg: bytes = _wire("msg")

    def __post_init__(self) -> None:
        _check_length("ephemeralPrivateKey", self.ephemeral_private_key, 32)
        _check_length("msg", self.msg, 32)

    def run(self, rng: Optional[RandomSource] = None) -> bytes:
        return ecdsa_sign(self.msg, self.ephemeral_private_key)


@dataclass(frozen=True)
class TaggedKdfRequest:
    """ECIES envelope for msg, tagged together with macData."""

    TAG: ClassVar[str] = "TaggedKdf"

    remote_public_key: bytes = _wire("remotePublicKey")
    msg: bytes = _wire("msg")
    mac_data: bytes = _wire("macData", default=b"")

    def __post_init__(self) -> None:
        _check_length("remotePublicKey", self.remote_public_key, *_PUBKEY_SIZES)

    def run(self, rng: Optional[RandomSource] = None) -> bytes:
        return ecies_encrypt(self.remote_public_key, self.msg, self.mac_data, rng)


@dataclass(frozen=True)
class ConcatKdfRequest:
    """AES key (16 bytes) for a size-prefixed ack message in msg."""

    TAG: ClassVar[str] = "ConcatKdf"

    private_key: bytes = _wire("privateKey")
    msg: bytes = _wire("msg")

    def __post_init__(self) -> None:
        _check_length("privateKey", self.private_key, 32)
        if len(self.msg) < SIZE_PREFIX + 65:
            raise DecodingError(
                f"msg must hold a size prefix and a 65-byte public key, got {len(self.msg)} bytes"
            )

    def run(self, rng: Optional[RandomSource] = None) -> bytes:
        return ack_encryption_key(self.msg, self.private_key)


Request = Union[EcdhxRequest, EcdsaSignRequest, TaggedKdfRequest, ConcatKdfRequest]

_REQUEST_TYPES = {
    cls.TAG: cls
    for cls in (EcdhxRequest, EcdsaSignRequest, TaggedKdfRequest, ConcatKdfRequest)
}


def _decode_hex(name: str, value: Any) -> bytes:
    if not isinstance(value, str):
        raise DecodingError(f"{name} must be a hex string")
    try:
        return binascii.unhexlify(value)
    except ValueError as exc:
        raise DecodingError(f"{name} is not valid hex: {exc}") from exc


def parse_request(payload: Union[str, bytes, Mapping[str, Any]]) -> Request:
    """
    Build a typed request from a JSON document or an already-decoded mapping.

    Raises:
        DecodingError: malformed JSON, missing field, bad hex or bad length.
        UnrecognizedOperation: unknown ``type`` tag.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DecodingError(f"request is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise DecodingError("request must be a JSON object")

    tag = payload.get("type")
    if not isinstance(tag, str) or tag not in _REQUEST_TYPES:
        raise UnrecognizedOperation(f"unknown operation type {tag!r}")
    cls = _REQUEST_TYPES[tag]

    kwargs = {}
    for f in fields(cls):
        wire = f.metadata["wire"]
        if wire in payload:
            kwargs[f.name] = _decode_hex(wire, payload[wire])
        elif f.default is MISSING:
            raise DecodingError(f"{tag} request is missing {wire!r}")
    return cls(**kwargs)


def execute(request: Request, rng: Optional[RandomSource] = None) -> bytes:
    """Run a parsed request and return its raw output bytes."""
    logger.debug("executing %s request", request.TAG)
    return request.run(rng)


__all__: tuple[str, ...] = (
    "ConcatKdfRequest",
    "EcdhxRequest",
    "EcdsaSignRequest",
    "Request",
    "TaggedKdfRequest",
    "execute",
    "parse_request",
)
