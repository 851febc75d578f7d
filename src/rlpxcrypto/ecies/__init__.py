"""ECIES building blocks: ECDH-X, Concat-KDF, tagged AES-CTR encryption."""

from .ecdh import ecdh_x
from .encrypt import ECIES_OVERHEAD, aes_ctr, derive_keys, ecies_encrypt
from .kdf import concat_kdf

__all__: tuple[str, ...] = (
    "ECIES_OVERHEAD",
    "aes_ctr",
    "concat_kdf",
    "derive_keys",
    "ecdh_x",
    "ecies_encrypt",
)
