"""
Bit Permutation Layer

This module implements the PRESENT pLayer: bit i of the 64-bit state moves
to position (16 * i) mod 63, and bit 63 stays in place. Bit 0 is the least
significant bit of byte 0 of the text block.
"""

from typing import Sequence, Tuple

from ..config import BLOCK_BITS
from ..errors import require, require_block


def _build_permutation_table() -> Tuple[int, ...]:
    """
    Build the forward permutation table.

    Returns:
        Tuple where entry i is the destination position of source bit i
    """
    last = BLOCK_BITS - 1
    return tuple((16 * i) % last if i < last else last for i in range(BLOCK_BITS))


def _create_inverse_permutation(perm_table: Sequence[int]) -> Tuple[int, ...]:
    """
    Create the inverse permutation table for decryption.

    Args:
        perm_table: The forward permutation table

    Returns:
        Tuple containing the inverse permutation
    """
    inv_perm = [0] * len(perm_table)
    for i, val in enumerate(perm_table):
        inv_perm[val] = i
    return tuple(inv_perm)


PERMUTATION = _build_permutation_table()
INVERSE_PERMUTATION = _create_inverse_permutation(PERMUTATION)


def permute_bits(value: int, inverse: bool = False) -> int:
    """
    Apply the bit permutation to a 64-bit integer.

    Args:
        value: The 64-bit state
        inverse: Whether to use the inverse permutation (for decryption)

    Returns:
        The permuted 64-bit state
    """
    require(0 <= value < (1 << BLOCK_BITS), "value must fit in 64 bits")

    perm_table = INVERSE_PERMUTATION if inverse else PERMUTATION
    result = 0
    for src, dst in enumerate(perm_table):
        result |= ((value >> src) & 1) << dst
    return result


def permute_block(block: bytearray, inverse: bool = False) -> None:
    """
    Apply the bit permutation to the block in place.

    Args:
        block: The 8-byte text block
        inverse: Whether to use the inverse permutation (for decryption)
    """
    require_block(block)

    # Convert bytes to bits, least significant bit of byte 0 first
    bits = []
    for byte in block:
        for i in range(8):
            bits.append((byte >> i) & 1)

    perm_table = INVERSE_PERMUTATION if inverse else PERMUTATION
    permuted_bits = [0] * BLOCK_BITS
    for src, dst in enumerate(perm_table):
        permuted_bits[dst] = bits[src]

    # Convert bits back to bytes
    result = bytearray(len(block))
    for i, bit in enumerate(permuted_bits):
        result[i // 8] |= bit << (i % 8)

    block[:] = result
