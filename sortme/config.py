"""
Playback settings.

Environment Variables:
    SORTME_ALGORITHM: Algorithm name - default: bubble
    SORTME_SIZE: Number of values to generate - default: 40
    SORTME_SPEED: Playback speed, 1 (slow) to 100 (fast) - default: 60
    SORTME_SEED: Random seed for reproducible inputs - default: unset
"""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .playback.speed import MAX_SPEED, MIN_SPEED, delay_from_speed
from .random_source import DEFAULT_HIGH, DEFAULT_LOW, UniformRandomSource
from .runners.registry import available_algorithms

MAX_SIZE = 500


class PlaybackSettings(BaseModel):
    algorithm: str = "bubble"
    size: int = Field(default=40, ge=1, le=MAX_SIZE)
    speed: int = Field(default=60, ge=MIN_SPEED, le=MAX_SPEED)
    seed: Optional[int] = None
    low: int = Field(default=DEFAULT_LOW, ge=1)
    high: int = Field(default=DEFAULT_HIGH, ge=1)

    @field_validator("algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in available_algorithms():
            raise ValueError(f"unknown algorithm {value!r}, expected one of {available_algorithms()}")
        return value

    @model_validator(mode="after")
    def _ordered_bounds(self) -> "PlaybackSettings":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    @property
    def delay_ms(self) -> int:
        return delay_from_speed(self.speed)

    def random_source(self) -> UniformRandomSource:
        return UniformRandomSource(low=self.low, high=self.high, seed=self.seed)

    @classmethod
    def from_env(cls, **overrides: Any) -> "PlaybackSettings":
        """
        Build settings from SORTME_* variables; keyword overrides win.

        Overrides that are None are ignored so CLI options can pass through
        unset values.

        Raises:
            pydantic.ValidationError: If any value is out of range
        """
        data: Dict[str, Any] = {}
        env_map = {
            "algorithm": "SORTME_ALGORITHM",
            "size": "SORTME_SIZE",
            "speed": "SORTME_SPEED",
            "seed": "SORTME_SEED",
        }
        for key, var in env_map.items():
            val = os.getenv(var)
            if val:
                data[key] = val
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
