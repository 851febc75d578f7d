"""
Helpers for the initiator side of the RLPx (EIP-8) auth handshake.

auth = auth-size || enc-auth-body
auth-size = size of enc-auth-body, encoded as a big-endian 16-bit integer
enc-auth-body = ecies.encrypt(recipient-pubk, auth-body || auth-padding, auth-size)

The message bodies themselves (RLP lists) are built by the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from .curves import decode_pubkey, decompress_pubkey, privkey_to_pubkey
from .ecies import ECIES_OVERHEAD, concat_kdf, ecdh_x, ecies_encrypt
from .entropy import RandomSource, random_bytes
from .errors import DecodingError, LengthTooLarge
from .settings import Settings
from .signing import ecdsa_sign

logger = logging.getLogger(__name__)

NODE_ID_SIZE = 64
SIZE_PREFIX = 2
_MAX_SEALED_SIZE = 0xFFFF


def pubkey_to_node_id(pubkey: bytes) -> bytes:
    """64-byte node id: the uncompressed public key without its 0x04 tag."""
    return decompress_pubkey(pubkey)[1:]


def node_id_to_pubkey(node_id: bytes) -> bytes:
    """65-byte uncompressed public key for a 64-byte node id."""
    if len(node_id) != NODE_ID_SIZE:
        raise DecodingError(
            f"node id must be {NODE_ID_SIZE} bytes, got {len(node_id)}"
        )
    pubkey = b"\x04" + node_id
    decode_pubkey(pubkey)
    return pubkey


def privkey_to_node_id(privkey: bytes) -> bytes:
    return privkey_to_pubkey(privkey)[1:]


def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise DecodingError(f"cannot xor {len(a)} bytes with {len(b)} bytes")
    return bytes(x ^ y for x, y in zip(a, b))


def make_nonce(rng: Optional[RandomSource] = None) -> bytes:
    return random_bytes(Settings.NONCE_SIZE, rng)


def auth_signature(
    privkey: bytes, remote_node_id: bytes, nonce: bytes, eph_privkey: bytes
) -> bytes:
    """
    Signature field of the auth body.

    sig = sign(ephemeral-privk, static-shared-secret ^ initiator-nonce), where
    static-shared-secret = ecdh_x(privkey, remote-pubk).

    Returns:
        65-byte r || s || recid.
    """
    static_shared = ecdh_x(privkey, node_id_to_pubkey(remote_node_id))
    return ecdsa_sign(xor_bytes(static_shared, nonce), eph_privkey)


def seal_auth_message(
    body: bytes, remote_pubkey: bytes, rng: Optional[RandomSource] = None
) -> bytes:
    """
    Encrypt a handshake body (auth or ack) with its EIP-8 size prefix.

    The 2-byte prefix is also the envelope's shared MAC data.

    Returns:
        size prefix (2) || ECIES envelope.

    Raises:
        LengthTooLarge: the envelope does not fit the 16-bit prefix.
    """
    size = len(body) + ECIES_OVERHEAD
    if size > _MAX_SEALED_SIZE:
        raise LengthTooLarge(f"sealed size {size} exceeds {_MAX_SEALED_SIZE}")
    prefix = size.to_bytes(SIZE_PREFIX, "big")
    logger.debug("sealing %d-byte handshake body", len(body))
    return prefix + ecies_encrypt(remote_pubkey, body, prefix, rng)


def ack_encryption_key(ack_message: bytes, privkey: bytes) -> bytes:
    """
    AES key protecting a received, size-prefixed ack message.

    Reads the sender's ephemeral public key right after the size prefix and
    returns the first 16 bytes of Concat-KDF(ecdh_x(privkey, that key), 32).
    """
    end = SIZE_PREFIX + 65
    if len(ack_message) < end:
        raise DecodingError(
            f"ack message must be at least {end} bytes, got {len(ack_message)}"
        )
    eph_pubkey = ack_message[SIZE_PREFIX:end]
    key = concat_kdf(ecdh_x(privkey, eph_pubkey), 2 * Settings.AES_KEY_SIZE)
    return key[: Settings.AES_KEY_SIZE]


__all__: tuple[str, ...] = (
    "NODE_ID_SIZE",
    "SIZE_PREFIX",
    "ack_encryption_key",
    "auth_signature",
    "make_nonce",
    "node_id_to_pubkey",
    "privkey_to_node_id",
    "pubkey_to_node_id",
    "seal_auth_message",
    "xor_bytes",
)
