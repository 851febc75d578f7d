"""
ECIES encryption as used by the RLPx auth handshake ("tagged KDF").

Envelope layout::

    ephemeral pubkey (65) || IV (16) || AES-128-CTR ciphertext (len(data)) || HMAC-SHA256 tag (32)

The tag covers IV || ciphertext || shared_mac_data. shared_mac_data is
appended without a length prefix, as the devp2p wire format requires, so
(ciphertext, shared_mac_data) pairs that concatenate to the same bytes share
a tag. Callers must not rely on the tag to separate the two.
"""

from __future__ import annotations

import logging
from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..curves import decode_pubkey, privkey_to_pubkey
from ..entropy import RandomSource, random_bytes, random_privkey
from ..hashes import hmac_sha256, sha256
from ..settings import Settings
from .ecdh import ecdh_x
from .kdf import concat_kdf

logger = logging.getLogger(__name__)

ECIES_OVERHEAD = 65 + Settings.IV_SIZE + Settings.MAC_SIZE


def derive_keys(shared_secret: bytes) -> tuple[bytes, bytes]:
    """
    Split Concat-KDF(shared_secret, 32) into (encryption key, MAC key).

    The MAC key is SHA256 of the second 16-byte half.
    """
    key = concat_kdf(shared_secret, 2 * Settings.AES_KEY_SIZE)
    ekey = key[: Settings.AES_KEY_SIZE]
    mkey = sha256(key[Settings.AES_KEY_SIZE :])
    return ekey, mkey


def aes_ctr(key: bytes, iv: bytes, data: bytes) -> bytes:
    """AES-CTR keystream applied to data; the whole 16-byte IV is the initial counter block."""
    enc = Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()
    return enc.update(data) + enc.finalize()


def ecies_encrypt(
    remote_pubkey: bytes,
    data: bytes,
    shared_mac_data: bytes = b"",
    rng: Optional[RandomSource] = None,
) -> bytes:
    """
    Encrypt data to the holder of remote_pubkey's private key and tag it.

    Draws a fresh ephemeral key and then a fresh IV from rng on every call.

    Args:
        remote_pubkey: 33- or 65-byte recipient public key.
        data: plaintext.
        shared_mac_data: extra bytes authenticated by the tag, not sent.
        rng: random source; defaults to the OS CSPRNG.

    Returns:
        Envelope of len(data) + ECIES_OVERHEAD bytes.

    Raises:
        InvalidPoint: remote_pubkey does not decode.
        EntropySourceUnavailable: rng failed.
    """
    decode_pubkey(remote_pubkey)
    eph_privkey = random_privkey(rng)
    eph_pubkey = privkey_to_pubkey(eph_privkey)
    ekey, mkey = derive_keys(ecdh_x(eph_privkey, remote_pubkey))

    iv = random_bytes(Settings.IV_SIZE, rng)
    ciphertext = aes_ctr(ekey, iv, data)
    tag = hmac_sha256(mkey, iv, ciphertext, shared_mac_data)

    logger.debug(
        "sealed %d-byte payload with %d bytes of shared MAC data",
        len(data),
        len(shared_mac_data),
    )
    return eph_pubkey + iv + ciphertext + tag


__all__: tuple[str, ...] = (
    "ECIES_OVERHEAD",
    "aes_ctr",
    "derive_keys",
    "ecies_encrypt",
)
