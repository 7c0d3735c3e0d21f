"""
S-box Package

This package holds the PRESENT 4-bit substitution tables, the helpers that
apply them to nibbles, bytes and text blocks, and tools for measuring the
cryptographic properties of an S-box.
"""

from .tables import SBOX, SBOX_INV, substitute_nibble, substitute_byte, substitute_block
from .analysis import (
    invert_sbox,
    difference_distribution_table,
    differential_uniformity,
    linear_approximation_table,
    linearity,
    evaluate_sbox,
)

__all__ = [
    'SBOX', 'SBOX_INV', 'substitute_nibble', 'substitute_byte', 'substitute_block',
    'invert_sbox', 'difference_distribution_table', 'differential_uniformity',
    'linear_approximation_table', 'linearity', 'evaluate_sbox',
]
