"""
PRESENT Key Schedule Implementation

This module implements the PRESENT key schedule for 80-bit and 128-bit keys.
The working key state is rotated, partly substituted and mixed with the
round counter once per round; the most significant 64 bits of the state are
the round subkey. The backward step undoes the forward step exactly, which
is what decryption walks through.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..config import BLOCK_BITS, BLOCK_SIZE, ROUND_COUNT_MIN, ROUND_COUNT_MAX
from ..errors import require
from ..sbox.tables import substitute_nibble, substitute_byte


def rotate_left(value: int, shift: int, size: int) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value

    Returns:
        The rotated value
    """
    return ((value << shift) | (value >> (size - shift))) & ((1 << size) - 1)


def rotate_right(value: int, shift: int, size: int) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by
        size: The bit size of the value

    Returns:
        The rotated value
    """
    return ((value >> shift) | (value << (size - shift))) & ((1 << size) - 1)


class KeySchedule(ABC):
    """
    Working key state of one encrypt or decrypt call.

    Subclasses fix the key width, the bits that receive the round counter and
    how many top nibbles go through the S-box.
    """

    key_bits: int = 0
    counter_shift: int = 0
    rotation: int = 61

    def __init__(self, key: bytes):
        """
        Copy the key into a fresh working state.

        Args:
            key: The cipher key, least significant byte first
        """
        require(key is not None, "key is missing")
        require(isinstance(key, (bytes, bytearray, memoryview)), "key must be a bytes-like object")
        # Count bytes, not items: a cast memoryview can hold wider items
        key_bytes = memoryview(key).nbytes
        require(key_bytes == self.key_size,
                f"key must be exactly {self.key_size} bytes for a {self.key_bits}-bit schedule, got {key_bytes}")

        self.state = int.from_bytes(bytes(key), byteorder='little')

    @property
    def key_size(self) -> int:
        """Key size in bytes."""
        return self.key_bits // 8

    @property
    def subkey(self) -> int:
        """The most significant 64 bits of the key state."""
        return self.state >> (self.key_bits - BLOCK_BITS)

    def subkey_bytes(self) -> bytes:
        return self.subkey.to_bytes(BLOCK_SIZE, byteorder='little')

    @abstractmethod
    def _substitute_top(self, state: int, inverse: bool) -> int:
        """Pass the top nibble(s) of the state through the S-box."""

    def _require_round(self, round_counter: int) -> None:
        require(ROUND_COUNT_MIN <= round_counter <= ROUND_COUNT_MAX,
                f"round counter must be in [{ROUND_COUNT_MIN}, {ROUND_COUNT_MAX}], got {round_counter}")

    def forward_step(self, round_counter: int) -> None:
        """
        Advance the key state by one encryption round.

        Args:
            round_counter: Index of the round just finished, 1..31
        """
        self._require_round(round_counter)

        state = rotate_left(self.state, self.rotation, self.key_bits)
        state = self._substitute_top(state, inverse=False)
        self.state = state ^ (round_counter << self.counter_shift)

    def backward_step(self, round_counter: int) -> None:
        """
        Undo the forward step of the given round.

        Args:
            round_counter: Index of the round being undone, 1..31
        """
        self._require_round(round_counter)

        state = self.state ^ (round_counter << self.counter_shift)
        state = self._substitute_top(state, inverse=True)
        self.state = rotate_right(state, self.rotation, self.key_bits)

    def generate_decrypt_key(self, rounds: int = ROUND_COUNT_MAX) -> None:
        """
        Run the forward schedule to the key state of the last round.

        Args:
            rounds: Number of cipher rounds
        """
        require(ROUND_COUNT_MIN <= rounds <= ROUND_COUNT_MAX,
                f"round count must be in [{ROUND_COUNT_MIN}, {ROUND_COUNT_MAX}], got {rounds}")

        for round_counter in range(1, rounds + 1):
            self.forward_step(round_counter)


class KeySchedule80(KeySchedule):
    """80-bit schedule: one substituted nibble, round counter in bits 15-19."""

    key_bits = 80
    counter_shift = 15

    def _substitute_top(self, state: int, inverse: bool) -> int:
        low_bits = self.key_bits - 4
        top = substitute_nibble(state >> low_bits, inverse)
        return (top << low_bits) | (state & ((1 << low_bits) - 1))


class KeySchedule128(KeySchedule):
    """128-bit schedule: two substituted nibbles, round counter in bits 62-66."""

    key_bits = 128
    counter_shift = 62

    def _substitute_top(self, state: int, inverse: bool) -> int:
        low_bits = self.key_bits - 8
        top = substitute_byte(state >> low_bits, inverse)
        return (top << low_bits) | (state & ((1 << low_bits) - 1))


KEY_SCHEDULES: Dict[int, Type[KeySchedule]] = {
    KeySchedule80.key_bits: KeySchedule80,
    KeySchedule128.key_bits: KeySchedule128,
}


def schedule_for(key_bits: int) -> Type[KeySchedule]:
    """
    Look up the key schedule class for a key width.

    Args:
        key_bits: Key width in bits (80 or 128)

    Returns:
        The matching KeySchedule subclass
    """
    require(key_bits in KEY_SCHEDULES, f"unsupported key size: {key_bits}")
    return KEY_SCHEDULES[key_bits]


def round_keys(key: bytes, key_bits: int = 80, rounds: int = ROUND_COUNT_MAX) -> List[int]:
    """
    List the subkeys that encryption applies, in order.

    Args:
        key: The cipher key
        key_bits: Key width in bits (80 or 128)
        rounds: Number of cipher rounds

    Returns:
        rounds + 1 subkeys as 64-bit integers, the last one being the
        whitening key
    """
    require(ROUND_COUNT_MIN <= rounds <= ROUND_COUNT_MAX,
            f"round count must be in [{ROUND_COUNT_MIN}, {ROUND_COUNT_MAX}], got {rounds}")

    schedule = schedule_for(key_bits)(key)
    subkeys = [schedule.subkey]
    for round_counter in range(1, rounds + 1):
        schedule.forward_step(round_counter)
        subkeys.append(schedule.subkey)
    return subkeys


def generate_key(key_bits: int = 80) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_bits: Key width in bits (80 or 128)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(schedule_for(key_bits).key_bits // 8)


if __name__ == "__main__":
    for index, subkey in enumerate(round_keys(bytes(10)), start=1):
        print(f"K{index:02d}: {subkey:016x}")
