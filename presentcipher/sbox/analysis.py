"""
S-box Analysis

This module measures the cryptographic properties the PRESENT S-box was
chosen for: bijectivity, differential uniformity and linearity. The tables
are built with numpy so they can be inspected directly.
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from .tables import SBOX

logger = logging.getLogger(__name__)

# 4-bit S-box (16 entries)
SBOX_SIZE = 4


def invert_sbox(sbox: Sequence[int]) -> List[int]:
    """
    Create the inverse of a bijective S-box.

    Args:
        sbox: The forward S-box

    Returns:
        List containing the inverse S-box
    """
    if sorted(sbox) != list(range(len(sbox))):
        raise ValueError("S-box is not a permutation and has no inverse")

    inv_sbox = [0] * len(sbox)
    for i, val in enumerate(sbox):
        inv_sbox[val] = i
    return inv_sbox


def difference_distribution_table(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the difference distribution table of an S-box.

    Entry [dx, dy] counts the inputs x for which S(x) ^ S(x ^ dx) == dy.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A square integer array indexed by input and output difference
    """
    size = len(sbox)
    ddt = np.zeros((size, size), dtype=np.int32)

    for x in range(size):
        for dx in range(size):
            dy = sbox[x] ^ sbox[x ^ dx]
            ddt[dx, dy] += 1

    return ddt


def differential_uniformity(sbox: Sequence[int]) -> int:
    """Maximum DDT entry over all non-zero input differences (lower is better)."""
    ddt = difference_distribution_table(sbox)
    return int(np.max(ddt[1:, :]))


def linear_approximation_table(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the linear approximation table of an S-box.

    Entry [a, b] is the number of inputs x where the parity of x & a equals
    the parity of S(x) & b, minus half the table size, so an unbiased
    approximation scores 0.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A square signed integer array indexed by input and output mask
    """
    size = len(sbox)
    lat = np.zeros((size, size), dtype=np.int32)

    for input_mask in range(size):
        for output_mask in range(size):
            count = 0
            for x in range(size):
                input_parity = bin(x & input_mask).count('1') % 2
                output_parity = bin(sbox[x] & output_mask).count('1') % 2
                if input_parity == output_parity:
                    count += 1
            lat[input_mask, output_mask] = count - size // 2

    return lat


def linearity(sbox: Sequence[int]) -> int:
    """Maximum absolute LAT entry excluding the zero output mask (lower is better)."""
    lat = linear_approximation_table(sbox)
    return int(np.max(np.abs(lat[:, 1:])))


def evaluate_sbox(sbox: Sequence[int]) -> Dict[str, object]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary with the bijectivity flag, differential uniformity and
        linearity of the S-box
    """
    bijective = sorted(sbox) == list(range(len(sbox)))
    return {
        'bijective': bijective,
        'differential': differential_uniformity(sbox),
        'linear': linearity(sbox),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    metrics = evaluate_sbox(SBOX)
    logger.info("Bijective: %s", metrics['bijective'])
    logger.info("Differential uniformity: %s", metrics['differential'])
    logger.info("Linearity: %s", metrics['linear'])
