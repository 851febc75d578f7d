"""Elliptic-curve arithmetic: secp256k1 (Ethereum/Bitcoin)."""

from .secp256k1 import (compress_pubkey, decode_pubkey, decompress_pubkey,
                        encode_pubkey, multiply, privkey_to_pubkey,
                        privkey_to_scalar, recover_pubkey, sign_recoverable)

__all__: tuple[str, ...] = (
    "compress_pubkey",
    "decode_pubkey",
    "decompress_pubkey",
    "encode_pubkey",
    "multiply",
    "privkey_to_pubkey",
    "privkey_to_scalar",
    "recover_pubkey",
    "sign_recoverable",
)
