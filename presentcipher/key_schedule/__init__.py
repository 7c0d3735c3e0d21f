"""
Key Schedule Package

This package implements the PRESENT key schedule that turns an 80-bit or
128-bit key into the sequence of round subkeys, forward for encryption and
backward for decryption.
"""

from .present_key_schedule import (
    KeySchedule,
    KeySchedule80,
    KeySchedule128,
    KEY_SCHEDULES,
    schedule_for,
    round_keys,
    generate_key,
    rotate_left,
    rotate_right,
)

__all__ = [
    'KeySchedule', 'KeySchedule80', 'KeySchedule128', 'KEY_SCHEDULES',
    'schedule_for', 'round_keys', 'generate_key', 'rotate_left', 'rotate_right',
]
