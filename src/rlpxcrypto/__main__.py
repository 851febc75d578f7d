"""
Command-line entry point: one JSON request in, one hex line out.

    python -m rlpxcrypto '{"type": "Ecdhx", "privateKey": "...", "publicKey": "..."}'
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .__about__ import __version__
from .dispatch import execute, parse_request
from .errors import RlpxCryptoError
from .settings import Settings

logger = logging.getLogger("rlpxcrypto")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlpxcrypto",
        description="Run one RLPx handshake crypto operation and print the hex result.",
    )
    parser.add_argument("request", help="JSON request object with a 'type' tag")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=Settings.LOG_LEVEL, format=Settings.LOG_FORMAT, stream=sys.stderr)
    try:
        result = execute(parse_request(args.request))
    except RlpxCryptoError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    print(result.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
