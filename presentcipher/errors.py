"""
Contract Violation Handling

This module defines the error raised when a caller breaks the contract of
the cipher primitives: wrong buffer sizes, read-only blocks, round indexes
outside the configured range, and so on. Such violations are caller bugs,
so nothing is retried or corrected and no partial result is returned.
"""

import inspect
import logging
from typing import Any

from .config import BLOCK_SIZE

logger = logging.getLogger(__name__)


class ContractViolation(ValueError):
    """Raised when an argument breaks the contract of a cipher primitive."""

    def __init__(self, message: str, location: str = "<unknown>"):
        super().__init__(f"{message} (in {location})")
        self.location = location


def _caller_name() -> str:
    # First frame outside this module is the component that made the check
    frame = inspect.currentframe()
    try:
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        return frame.f_code.co_name if frame is not None else "<unknown>"
    finally:
        del frame


def require(condition: bool, message: str) -> None:
    """
    Check a precondition and raise ContractViolation when it does not hold.

    Args:
        condition: The precondition to check
        message: Description of the violated precondition

    Raises:
        ContractViolation: If the condition is false
    """
    if condition:
        return

    location = _caller_name()
    logger.error("Contract violation in %s: %s", location, message)
    raise ContractViolation(message, location)


def require_block(block: Any) -> None:
    """
    Check that a block is a writable buffer of exactly BLOCK_SIZE bytes.

    Args:
        block: The text block to check

    Raises:
        ContractViolation: If the block is missing, read-only or mis-sized
    """
    require(block is not None, "block is missing")

    if isinstance(block, memoryview):
        require(not block.readonly, "block must be writable")
        require(block.format == 'B' and block.ndim == 1 and block.contiguous,
                "block must be a contiguous unsigned byte buffer")
    else:
        require(isinstance(block, bytearray), "block must be a bytearray or writable memoryview")

    require(len(block) == BLOCK_SIZE, f"block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
