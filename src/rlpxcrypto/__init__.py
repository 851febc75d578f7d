"""
RLPx / devp2p handshake crypto over secp256k1: ECDH-X, Concat-KDF, ECIES
encryption with a shared-MAC-data tag, recoverable ECDSA.
Curve arithmetic is pure Python; AES and HMAC come from `cryptography`.
"""

from .__about__ import __version__
from .curves import (compress_pubkey, decompress_pubkey, privkey_to_pubkey,
                     recover_pubkey, sign_recoverable)
from .dispatch import (ConcatKdfRequest, EcdhxRequest, EcdsaSignRequest,
                       TaggedKdfRequest, execute, parse_request)
from .ecies import ECIES_OVERHEAD, concat_kdf, ecdh_x, ecies_encrypt
from .entropy import RandomSource, random_bytes, random_privkey, system_random
from .errors import (DecodingError, EntropySourceUnavailable, InvalidPoint,
                     InvalidScalar, LengthTooLarge, RlpxCryptoError,
                     UnrecognizedOperation)
from .handshake import (ack_encryption_key, auth_signature, make_nonce,
                        node_id_to_pubkey, privkey_to_node_id,
                        pubkey_to_node_id, seal_auth_message, xor_bytes)
from .hashes import hmac_sha256, sha256
from .signing import ecdsa_recover, ecdsa_sign

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "DecodingError",
    "EntropySourceUnavailable",
    "InvalidPoint",
    "InvalidScalar",
    "LengthTooLarge",
    "RlpxCryptoError",
    "UnrecognizedOperation",
    # Hashes
    "hmac_sha256",
    "sha256",
    # Curves: secp256k1
    "compress_pubkey",
    "decompress_pubkey",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    # Randomness
    "RandomSource",
    "random_bytes",
    "random_privkey",
    "system_random",
    # ECIES
    "ECIES_OVERHEAD",
    "concat_kdf",
    "ecdh_x",
    "ecies_encrypt",
    # Signing: recoverable ECDSA
    "ecdsa_recover",
    "ecdsa_sign",
    # Handshake (RLPx / EIP-8)
    "ack_encryption_key",
    "auth_signature",
    "make_nonce",
    "node_id_to_pubkey",
    "privkey_to_node_id",
    "pubkey_to_node_id",
    "seal_auth_message",
    "xor_bytes",
    # Requests
    "ConcatKdfRequest",
    "EcdhxRequest",
    "EcdsaSignRequest",
    "TaggedKdfRequest",
    "execute",
    "parse_request",
)
