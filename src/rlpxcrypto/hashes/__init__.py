"""Hash functions: SHA-256, HMAC-SHA256."""

from .sha256 import DIGEST_SIZE, hmac_sha256, sha256

__all__: tuple[str, ...] = ("DIGEST_SIZE", "hmac_sha256", "sha256")
