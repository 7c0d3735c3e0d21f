"""
PRESENT - Ultra-Lightweight Block Cipher Library

This library implements the PRESENT symmetric block cipher, a
substitution-permutation network with a 64-bit block and an 80-bit or
128-bit key, aimed at constrained environments.

Key Features:
- 64-bit block, 80-bit or 128-bit key (configurable)
- 31 rounds plus final key whitening (round count configurable 1..31)
- 4-bit S-box and fixed bit permutation layer
- Forward and inverse key schedules
- In-place processing of one 8-byte block per call
"""

from .cipher_core import PresentCipher, encrypt_block, decrypt_block, encrypt, decrypt
from .config import PresentConfig, load_config
from .errors import ContractViolation

__version__ = '0.1.0'
__author__ = 'PRESENT Cipher Team'

__all__ = [
    'PresentCipher', 'PresentConfig', 'ContractViolation', 'load_config',
    'encrypt_block', 'decrypt_block', 'encrypt', 'decrypt',
]
