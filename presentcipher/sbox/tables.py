"""
PRESENT Substitution Layer

This module holds the 4-bit PRESENT S-box and its inverse, together with
the helpers that apply them to a nibble, a byte, and a whole text block.
"""

from typing import Sequence

from ..errors import require, require_block

# Each index is the current nibble value, each element the substituted one
SBOX = (
    0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD,
    0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2,
)

SBOX_INV = (
    0x5, 0xE, 0xF, 0x8, 0xC, 0x1, 0x2, 0xD,
    0xB, 0x4, 0x6, 0x3, 0x0, 0x7, 0x9, 0xA,
)


def _table(inverse: bool) -> Sequence[int]:
    return SBOX_INV if inverse else SBOX


def substitute_nibble(value: int, inverse: bool = False) -> int:
    """
    Substitute a single 4-bit value.

    Args:
        value: Nibble value in the range 0..15
        inverse: Whether to use the inverse S-box (for decryption)

    Returns:
        The substituted nibble
    """
    require(0 <= value <= 0xF, f"nibble out of range: {value}")
    return _table(inverse)[value]


def substitute_byte(value: int, inverse: bool = False) -> int:
    """
    Substitute both nibbles of a byte independently.

    Args:
        value: Byte value in the range 0..255
        inverse: Whether to use the inverse S-box (for decryption)

    Returns:
        The byte with its high and low nibbles substituted
    """
    require(0 <= value <= 0xFF, f"byte out of range: {value}")
    table = _table(inverse)
    return (table[value >> 4] << 4) | table[value & 0x0F]


def substitute_block(block: bytearray, inverse: bool = False) -> None:
    """
    Apply the S-box to every byte of the block in place.

    Args:
        block: The 8-byte text block
        inverse: Whether to use the inverse S-box (for decryption)
    """
    require_block(block)
    table = _table(inverse)
    for i, byte in enumerate(block):
        block[i] = (table[byte >> 4] << 4) | table[byte & 0x0F]
