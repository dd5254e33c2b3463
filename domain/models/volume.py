"""
TrainingVolume value object (weight x repetitions).
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field, field_validator


class TrainingVolume(BaseModel):
    """
    Value object representing training volume in kg (weight x reps).

    Volume is never negative: construction clamps negative input to zero
    instead of raising, so summing volumes never needs re-validation.

    Examples:
        >>> TrainingVolume(value=-5).value
        0.0

        >>> str(TrainingVolume.create(100) + TrainingVolume.create(42.5))
        '143'
    """

    value: float = Field(default=0.0, description="Volume in kg (weight x reps)")

    @field_validator("value")
    @classmethod
    def clamp_negative(cls, v: float) -> float:
        """Clamp negative input to zero."""
        if v < 0:
            return 0.0
        return v

    @classmethod
    def create(cls, value: float) -> "TrainingVolume":
        """Build a volume from a raw number."""
        return cls(value=value)

    @classmethod
    def zero(cls) -> "TrainingVolume":
        """The additive identity."""
        return cls(value=0.0)

    def add(self, other: "TrainingVolume") -> "TrainingVolume":
        """
        Return a new volume holding the sum of both values.

        Args:
            other: Volume to add.

        Returns:
            New TrainingVolume instance.
        """
        return TrainingVolume(value=self.value + other.value)

    def __add__(self, other: object) -> "TrainingVolume":
        if not isinstance(other, TrainingVolume):
            return NotImplemented
        return self.add(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TrainingVolume):
            return NotImplemented
        return self.value > other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TrainingVolume):
            return NotImplemented
        return self.value < other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TrainingVolume):
            return NotImplemented
        return self.value >= other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TrainingVolume):
            return NotImplemented
        return self.value <= other.value

    def __str__(self) -> str:
        """Whole-number text form, rounded half up."""
        if not math.isfinite(self.value):
            return str(self.value)
        rounded = Decimal(repr(self.value)).to_integral_value(rounding=ROUND_HALF_UP)
        return format(rounded, "f")

    model_config = {
        "frozen": True,  # Make immutable (value object semantics)
        "json_schema_extra": {"examples": [{"value": 2400.0}]},
    }
