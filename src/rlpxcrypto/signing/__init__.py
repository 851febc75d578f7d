"""Signing schemas: recoverable ECDSA (r || s || recid)."""

from .recoverable import SIGNATURE_SIZE, ecdsa_recover, ecdsa_sign

__all__: tuple[str, ...] = (
    "SIGNATURE_SIZE",
    "ecdsa_recover",
    "ecdsa_sign",
)
