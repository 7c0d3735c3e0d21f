"""
Cipher Core Package

This package implements the PRESENT round engine: add-key, substitution,
permutation and key update composed into block encryption and decryption.
"""

from .block_cipher import PresentCipher, encrypt_block, decrypt_block, encrypt, decrypt

__all__ = ['PresentCipher', 'encrypt_block', 'decrypt_block', 'encrypt', 'decrypt']
