"""Encrypt and decrypt the reference test vectors and print the results."""
from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from .cipher_core import PresentCipher
from .config import PresentConfig, load_config

logger = logging.getLogger("presentcipher")


def _as_int(block: bytearray) -> int:
    return int.from_bytes(block, byteorder="little")


def main(argv=None) -> int:
    defaults = load_config()

    parser = argparse.ArgumentParser(prog="presentcipher", description=__doc__)
    parser.add_argument("--key-size", type=int, choices=[80, 128], default=defaults.key_size)
    parser.add_argument("--rounds", type=int, default=defaults.rounds)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = PresentConfig(key_size=args.key_size, rounds=args.rounds)
    except ValidationError as exc:
        parser.error(str(exc))

    cipher = PresentCipher(config)
    key_bytes = cipher.key_size

    vectors = [
        (bytearray(8), bytes(key_bytes)),
        (bytearray(8), b"\xff" * key_bytes),
        (bytearray(b"\xff" * 8), bytes(key_bytes)),
        (bytearray(b"\xff" * 8), b"\xff" * key_bytes),
    ]

    for index, (block, key) in enumerate(vectors, start=1):
        cipher.encrypt_block(block, key)
        print(f"Cipher Text {index}: {_as_int(block):016x}")

    print("-" * 30)

    for index, (block, key) in enumerate(vectors, start=1):
        cipher.decrypt_block(block, key)
        print(f"Decipher Text {index}: {_as_int(block):016x}")

    logger.info("PRESENT-%d, %d rounds", args.key_size, args.rounds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
