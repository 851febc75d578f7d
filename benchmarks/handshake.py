"""
Benchmark the handshake primitives (pure-Python curve, `cryptography` AES/HMAC).

Run from repo root:

  PYTHONPATH=src python benchmarks/handshake.py
"""

from __future__ import annotations

import time

from rlpxcrypto import (concat_kdf, ecdh_x, ecdsa_recover, ecdsa_sign,
                        ecies_encrypt, privkey_to_pubkey, sha256)

PRIV = bytes([0x01]) * 32
REMOTE_PUB = privkey_to_pubkey(bytes([0x02]) * 32)
MSG_HASH = sha256(b"bench message")
PAYLOAD = b"\xc0" * 300


def _time_it(fn, *args, n: int = 20, **kwargs) -> float:
    # Warmup
    for _ in range(2):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def main() -> None:
    n = 20
    n_fast = 2000  # kdf has no curve math
    print(f"Benchmark: rlpxcrypto  Iterations: {n} (curve ops), {n_fast} (kdf)")
    print()

    results: list[tuple[str, float]] = [
        ("privkey_to_pubkey", _time_it(privkey_to_pubkey, PRIV, n=n)),
        ("ecdh_x", _time_it(ecdh_x, PRIV, REMOTE_PUB, n=n)),
        ("concat_kdf(32)", _time_it(concat_kdf, MSG_HASH, 32, n=n_fast)),
        ("ecies_encrypt(300B)", _time_it(ecies_encrypt, REMOTE_PUB, PAYLOAD, b"\x01\x9d", n=n)),
        ("ecdsa_sign", _time_it(ecdsa_sign, MSG_HASH, PRIV, n=n)),
    ]
    sig = ecdsa_sign(MSG_HASH, PRIV)
    results.append(("ecdsa_recover", _time_it(ecdsa_recover, MSG_HASH, sig, n=n)))

    for name, t in results:
        print(f"  {name:<22} {t*1e3:8.3f} ms")


if __name__ == "__main__":
    main()
