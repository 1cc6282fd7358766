#!/usr/bin/env python3
"""Demo script decoding and re-encoding the moves of a short game."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sanmove.codec import decode, encode
from sanmove.config import configure_logging, load_env
from sanmove.exceptions import InvalidNotationError

# Load environment variables
load_env()

# Opera game (Morphy, 1858) plus a couple of malformed tokens
MOVE_TOKENS = (
    "e4 e5 Nf3 d6 d4 Bg4 dxe5 Bxf3 Qxf3 dxe5 Bc4 Nf6 Qb3 Qe7 Nc3 c6 Bg5 b5 "
    "Nxb5 cxb5 Bxb5+ Nbd7 O-O-O Rd8 Rxd7 Rxd7 Rd1 Qe6 Bxd7+ Nxd7 Qb8+ Nxb8 Rd8# "
    "Kx9 e8=K"
).split()


def main() -> None:
    """Decode each token, print its structure and its canonical SAN."""
    configure_logging()

    decoded = 0
    rejected = 0
    for token in MOVE_TOKENS:
        try:
            move = decode(token)
        except InvalidNotationError as e:
            rejected += 1
            print(f"{token:>8}  ->  rejected: {e}")
            continue
        decoded += 1
        print(f"{token:>8}  ->  {encode(move):<8} {move!r}")

    print("-" * 60)
    print(f"Decoded: {decoded}")
    print(f"Rejected: {rejected}")


if __name__ == "__main__":
    main()
