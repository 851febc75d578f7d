"""
secp256k1 (Bitcoin/Ethereum curve): point encoding, scalar multiplication,
RFC 6979 ECDSA signing with recovery id, public key recovery.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from ..errors import DecodingError, InvalidPoint, InvalidScalar
from ..hashes import hmac_sha256

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# (0, 0) is not on the curve, so it stands in for the point at infinity.
_INFINITY = (0, 0)

Point = Tuple[int, int]


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    a %= n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> Point:
    """Add two points in affine coords; (0,0) is identity. Returns (rx, ry)."""
    if (px, py) == _INFINITY:
        return (qx, qy)
    if (qx, qy) == _INFINITY:
        return (px, py)
    if px == qx:
        if py != qy or py == 0:
            return _INFINITY
        lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> Point:
    """Scalar multiplication d * (x, y) by double-and-add; returns (rx, ry)."""
    d %= _N
    rx, ry = _INFINITY
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _is_on_curve(x: int, y: int) -> bool:
    return (y * y - x * x * x - 7) % _P == 0


def _lift_x(x: int, odd: bool) -> int:
    """y coordinate for x with the requested parity; p % 4 == 3 so sqrt is a power."""
    rhs = (x * x * x + 7) % _P
    y = pow(rhs, (_P + 1) // 4, _P)
    if (y * y) % _P != rhs:
        raise InvalidPoint("x coordinate is not on secp256k1")
    if (y & 1) != odd:
        y = _P - y
    return y


def privkey_to_scalar(privkey: bytes) -> int:
    """
    Validate a 32-byte private key and return it as an integer.

    Raises:
        InvalidScalar: wrong length, zero, or not below the curve order.
    """
    if len(privkey) != 32:
        raise InvalidScalar(f"privkey must be 32 bytes, got {len(privkey)}")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise InvalidScalar("privkey must be in [1, n-1]")
    return d


def decode_pubkey(pubkey: bytes) -> Point:
    """
    Decode a compressed (33 bytes, 0x02/0x03) or uncompressed (65 bytes, 0x04)
    public key into affine coordinates.

    Raises:
        InvalidPoint: unknown tag, wrong length, or not a curve point.
    """
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        x = int.from_bytes(pubkey[1:33], "big")
        y = int.from_bytes(pubkey[33:65], "big")
        if x >= _P or y >= _P or not _is_on_curve(x, y):
            raise InvalidPoint("public key is not a secp256k1 point")
        return (x, y)
    if len(pubkey) == 33 and pubkey[0] in (0x02, 0x03):
        x = int.from_bytes(pubkey[1:], "big")
        if x >= _P:
            raise InvalidPoint("x coordinate out of range")
        return (x, _lift_x(x, pubkey[0] == 0x03))
    raise InvalidPoint(
        f"public key must be 33 bytes (0x02/0x03) or 65 bytes (0x04), got {len(pubkey)}"
    )


def encode_pubkey(point: Point, compressed: bool = False) -> bytes:
    """Serialize affine coordinates as a 33- or 65-byte SEC1 public key."""
    x, y = point
    if compressed:
        return bytes([0x03 if y & 1 else 0x02]) + x.to_bytes(32, "big")
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def compress_pubkey(pubkey: bytes) -> bytes:
    return encode_pubkey(decode_pubkey(pubkey), compressed=True)


def decompress_pubkey(pubkey: bytes) -> bytes:
    return encode_pubkey(decode_pubkey(pubkey), compressed=False)


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the public key for a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: return the 33-byte form instead of 65 bytes.

    Returns:
        SEC1-encoded public key (0x04 || x || y, or 0x02/0x03 || x).
    """
    d = privkey_to_scalar(privkey)
    return encode_pubkey(_point_mul(d, _Gx, _Gy), compressed=compressed)


def multiply(privkey: bytes, pubkey: bytes) -> Point:
    """
    Scalar product privkey * pubkey.

    Raises:
        InvalidScalar: bad private key.
        InvalidPoint: bad public key, or the product is the point at infinity.
    """
    d = privkey_to_scalar(privkey)
    x, y = decode_pubkey(pubkey)
    product = _point_mul(d, x, y)
    if product == _INFINITY:
        raise InvalidPoint("scalar product is the point at infinity")
    return product


def _rfc6979_nonces(d: int, msg_hash: bytes) -> Iterator[int]:
    """RFC 6979 section 3.2 nonce stream (HMAC-SHA256, qlen == hlen == 256)."""
    x = d.to_bytes(32, "big")
    h1 = (int.from_bytes(msg_hash, "big") % _N).to_bytes(32, "big")
    v = b"\x01" * 32
    k = b"\x00" * 32
    k = hmac_sha256(k, v, b"\x00", x, h1)
    v = hmac_sha256(k, v)
    k = hmac_sha256(k, v, b"\x01", x, h1)
    v = hmac_sha256(k, v)
    while True:
        v = hmac_sha256(k, v)
        candidate = int.from_bytes(v, "big")
        if 1 <= candidate < _N:
            yield candidate
        k = hmac_sha256(k, v, b"\x00")
        v = hmac_sha256(k, v)


def _recover_pubkey_from_sig(msg_hash: bytes, r: int, s: int, recid: int) -> Point:
    """Recover public key from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    if recid & 2:
        if r + _N >= _P:
            raise InvalidPoint("recid 2/3 but r+n >= p")
        x = r + _N
    else:
        x = r
    y = _lift_x(x, bool(recid & 1))
    r_inv = _mod_inv(r, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    u1 = (-z * r_inv) % _N
    u2 = (s * r_inv) % _N
    g_mul = _point_mul(u1, _Gx, _Gy)
    r_mul = _point_mul(u2, x, y)
    q = _point_add(g_mul[0], g_mul[1], r_mul[0], r_mul[1])
    if q == _INFINITY:
        raise InvalidPoint("recovered point at infinity")
    return q


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    """
    Recover uncompressed public key (65 bytes) from ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key.
    """
    if len(msg_hash) != 32:
        raise DecodingError("msg_hash must be 32 bytes")
    if recid not in (0, 1, 2, 3):
        raise DecodingError(f"recid must be in 0..3, got {recid}")
    if not (0 < r < _N and 0 < s < _N):
        raise InvalidScalar("signature scalars must be in [1, n-1]")
    return encode_pubkey(_recover_pubkey_from_sig(msg_hash, r, s, recid))


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with deterministic RFC 6979 nonce and low-s normalization.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, recid) where recid in {0, 1, 2, 3} matches the normalized s.
    """
    if len(msg_hash) != 32:
        raise DecodingError("msg_hash must be 32 bytes")
    d = privkey_to_scalar(privkey)
    z = int.from_bytes(msg_hash, "big")
    for k in _rfc6979_nonces(d, msg_hash):
        kx, ky = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0:
            continue
        s = _mod_inv(k, _N) * (z + r * d) % _N
        if s == 0:
            continue
        recid = (ky & 1) | (2 if kx >= _N else 0)
        # Negating s mirrors R, which flips the parity bit of the recovery id.
        if s > _N // 2:
            s = _N - s
            recid ^= 1
        return (r, s, recid)
    raise AssertionError("unreachable: RFC 6979 nonce stream is infinite")


__all__: tuple[str, ...] = (
    "Point",
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
