"""
Error kinds raised by rlpxcrypto. All derive from ValueError.
"""

from __future__ import annotations


class RlpxCryptoError(ValueError):
    """Base class for every error raised by this package."""


class DecodingError(RlpxCryptoError):
    """Malformed hex, missing field or wrong-length field."""


class InvalidPoint(RlpxCryptoError):
    """Public key bytes do not decode to a secp256k1 point."""


class InvalidScalar(RlpxCryptoError):
    """Private key is zero, not below the curve order, or not 32 bytes."""


class EntropySourceUnavailable(RlpxCryptoError):
    """Secure randomness could not be obtained."""


class UnrecognizedOperation(RlpxCryptoError):
    """Request carries an unknown operation tag."""


class LengthTooLarge(RlpxCryptoError):
    """Requested output or message length exceeds the allowed bound."""


__all__: tuple[str, ...] = (
    "DecodingError",
    "EntropySourceUnavailable",
    "InvalidPoint",
    "InvalidScalar",
    "LengthTooLarge",
    "RlpxCryptoError",
    "UnrecognizedOperation",
)
