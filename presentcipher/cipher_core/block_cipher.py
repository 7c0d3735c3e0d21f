"""
Block Cipher Implementation

This module provides the PRESENT round engine, a Substitution-Permutation
Network (SPN) block cipher with a 64-bit block and an 80-bit or 128-bit key.
Blocks are processed in place, one 8-byte block per call.
"""

import logging
from typing import Optional

from ..config import PresentConfig, load_config, BLOCK_SIZE
from ..errors import require, require_block
from ..key_schedule.present_key_schedule import KeySchedule, schedule_for
from ..permutation.bit_permutation import permute_block
from ..sbox.tables import substitute_block

logger = logging.getLogger(__name__)


class PresentCipher:
    """
    PRESENT block cipher with a fixed key width and round count.

    The instance only holds configuration; every call builds its own working
    key state, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[PresentConfig] = None):
        """
        Initialize the block cipher with the given configuration.

        Args:
            config: Key width and round count (default: load_config())
        """
        self.config = config if config is not None else load_config()
        self.key_size = self.config.key_bytes
        self.num_rounds = self.config.rounds

        # Resolve the key schedule variant once for this configuration
        self._schedule_cls = schedule_for(self.config.key_size)

        logger.debug("PRESENT-%d configured with %d rounds", self.config.key_size, self.num_rounds)

    def _new_schedule(self, key: bytes) -> KeySchedule:
        # Copies the key; the caller's buffer is never written
        return self._schedule_cls(key)

    @staticmethod
    def _add_round_key(block: bytearray, schedule: KeySchedule) -> None:
        """
        XOR the current subkey into the block.

        Args:
            block: The text block
            schedule: The working key state
        """
        for i, key_byte in enumerate(schedule.subkey_bytes()):
            block[i] ^= key_byte

    def encrypt_block(self, block: bytearray, key: bytes) -> bytearray:
        """
        Encrypt a single block in place.

        Args:
            block: The plaintext block, a writable 8-byte buffer
            key: The cipher key, unchanged by the call

        Returns:
            The same block, now holding the ciphertext
        """
        require_block(block)
        schedule = self._new_schedule(key)

        for round_counter in range(1, self.num_rounds + 1):
            self._add_round_key(block, schedule)
            substitute_block(block)
            permute_block(block)
            schedule.forward_step(round_counter)

        # Whitening with the last subkey
        self._add_round_key(block, schedule)

        return block

    def decrypt_block(self, block: bytearray, key: bytes) -> bytearray:
        """
        Decrypt a single block in place.

        Args:
            block: The ciphertext block, a writable 8-byte buffer
            key: The cipher key, unchanged by the call

        Returns:
            The same block, now holding the plaintext
        """
        require_block(block)
        schedule = self._new_schedule(key)
        schedule.generate_decrypt_key(self.num_rounds)

        self._add_round_key(block, schedule)

        for round_counter in range(self.num_rounds, 0, -1):
            permute_block(block, inverse=True)
            substitute_block(block, inverse=True)
            schedule.backward_step(round_counter)
            self._add_round_key(block, schedule)

        return block

    @staticmethod
    def _copy_block(data: bytes, name: str) -> bytearray:
        require(isinstance(data, (bytes, bytearray, memoryview)), f"{name} must be a bytes-like object")
        require(memoryview(data).nbytes == BLOCK_SIZE, f"{name} must be exactly {BLOCK_SIZE} bytes")
        return bytearray(memoryview(data).tobytes())

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        """Encrypt an immutable block and return the ciphertext as new bytes."""
        return bytes(self.encrypt_block(self._copy_block(plaintext, "plaintext"), key))

    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        """Decrypt an immutable block and return the plaintext as new bytes."""
        return bytes(self.decrypt_block(self._copy_block(ciphertext, "ciphertext"), key))


def _cipher(key_size: Optional[int], rounds: Optional[int]) -> PresentCipher:
    if key_size is None and rounds is None:
        return PresentCipher()

    defaults = load_config()
    config = PresentConfig(
        key_size=defaults.key_size if key_size is None else key_size,
        rounds=defaults.rounds if rounds is None else rounds,
    )
    return PresentCipher(config)


def encrypt_block(block: bytearray, key: bytes,
                  key_size: Optional[int] = None,
                  rounds: Optional[int] = None) -> bytearray:
    """
    Convenience function to encrypt a single block in place.

    Args:
        block: The plaintext block, a writable 8-byte buffer
        key: The cipher key
        key_size: Key width in bits (default: configured width)
        rounds: Number of rounds (default: configured round count)

    Returns:
        The same block, now holding the ciphertext
    """
    return _cipher(key_size, rounds).encrypt_block(block, key)


def decrypt_block(block: bytearray, key: bytes,
                  key_size: Optional[int] = None,
                  rounds: Optional[int] = None) -> bytearray:
    """
    Convenience function to decrypt a single block in place.

    Args:
        block: The ciphertext block, a writable 8-byte buffer
        key: The cipher key
        key_size: Key width in bits (default: configured width)
        rounds: Number of rounds (default: configured round count)

    Returns:
        The same block, now holding the plaintext
    """
    return _cipher(key_size, rounds).decrypt_block(block, key)


def encrypt(plaintext: bytes, key: bytes,
            key_size: Optional[int] = None,
            rounds: Optional[int] = None) -> bytes:
    """Convenience function returning the ciphertext of an immutable block."""
    return _cipher(key_size, rounds).encrypt(plaintext, key)


def decrypt(ciphertext: bytes, key: bytes,
            key_size: Optional[int] = None,
            rounds: Optional[int] = None) -> bytes:
    """Convenience function returning the plaintext of an immutable block."""
    return _cipher(key_size, rounds).decrypt(ciphertext, key)
