from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ROUND_COUNT_MIN = 1
ROUND_COUNT_MAX = 31

BLOCK_BITS = 64
BLOCK_SIZE = BLOCK_BITS // 8

SUPPORTED_KEY_SIZES = (80, 128)


class PresentConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    key_size: int = Field(default=80, description="Key width in bits (80 or 128)")
    rounds: int = Field(default=ROUND_COUNT_MAX, ge=ROUND_COUNT_MIN, le=ROUND_COUNT_MAX)

    @field_validator("key_size")
    @classmethod
    def check_key_size(cls, value: int) -> int:
        if value not in SUPPORTED_KEY_SIZES:
            raise ValueError(f"key_size must be one of {SUPPORTED_KEY_SIZES}, got {value}")
        return value

    @property
    def key_bytes(self) -> int:
        return self.key_size // 8


@lru_cache(maxsize=1)
def load_config() -> PresentConfig:
    # Load .env if present
    load_dotenv()

    # Raw strings; pydantic coerces them and rejects non-numeric values
    return PresentConfig(
        key_size=os.getenv("PRESENT_KEY_SIZE", "80"),
        rounds=os.getenv("PRESENT_ROUND_COUNT", str(ROUND_COUNT_MAX)),
    )
