"""
Permutation Package

This package implements the PRESENT 64-bit bit permutation and its inverse.
"""

from .bit_permutation import PERMUTATION, INVERSE_PERMUTATION, permute_bits, permute_block

__all__ = ['PERMUTATION', 'INVERSE_PERMUTATION', 'permute_bits', 'permute_block']
