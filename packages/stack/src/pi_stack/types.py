"""
Stack options.
"""
from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator


class StackOptions(BaseModel):
    """
    Options of a stack.

    ``size`` is the maximum number of items; ``None`` means unbounded.
    ``strict_size`` makes overflow raise instead of evicting the oldest item.
    """

    size: int | None = None
    strict_size: bool = Field(default=False, alias="strictSize")

    # Unknown keys are rejected; strict_size also accepts "strictSize"
    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    @field_validator("size", mode="before")
    @classmethod
    def _unbounded_size(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("size must be an integer, not a bool")
        # Zero and infinity both mean "no limit"
        if value is None or value == 0 or value == math.inf:
            return None
        return value

    @field_validator("size")
    @classmethod
    def _non_negative_size(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError(f"size must not be negative, got {value}")
        return value

    @property
    def max_size(self) -> int | float:
        """The size limit, with ``math.inf`` standing for unbounded."""
        return math.inf if self.size is None else self.size


DEFAULT_OPTIONS = StackOptions()
