import os


class Settings:
    """Package-wide configuration, read once at import."""

    # ── kdf ──────────────────────────────────────────────────────
    KDF_MAX_LENGTH = int(os.environ.get("RLPXCRYPTO_KDF_MAX_LENGTH", 1 << 20))

    # ── ecies ────────────────────────────────────────────────────
    AES_KEY_SIZE = 16          # AES-128-CTR
    IV_SIZE      = 16
    MAC_SIZE     = 32          # HMAC-SHA256

    # ── handshake ────────────────────────────────────────────────
    NONCE_SIZE   = 32

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL  = os.environ.get("RLPXCRYPTO_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
