"""
Exercise records supplied by the exercise catalog.

Exercises are immutable: a logged SetEntry holds a reference to the exact
record it was performed with, so edits produce a new record via
``with_updates`` instead of mutating the one already referenced.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


MIN_NAME_LENGTH = 2
DEFAULT_REST_SECONDS = 120


class ExerciseType(str, Enum):
    """
    Kind of training an exercise belongs to.

    - STRENGTH: Resistance work logged as weight x reps
    - CARDIO: Conditioning work (bike, rower, treadmill...)
    - RECOVERY: Mobility, stretching and other regeneration work
    """

    STRENGTH = "strength"
    CARDIO = "cardio"
    RECOVERY = "recovery"


class Exercise(BaseModel):
    """
    Value object representing one exercise of the catalog.

    Examples:
        >>> bench = Exercise(
        ...     name="Bench Press",
        ...     type=ExerciseType.STRENGTH,
        ...     device="Barbell",
        ...     primary_muscles=["Chest", "Triceps"],
        ... )
        >>> str(bench)
        'Bench Press (strength, Barbell)'
    """

    # Identity
    id: Optional[int] = Field(
        default=None,
        description="Identifier assigned by the catalog that created the record",
    )
    name: str = Field(..., description="Exercise name shown in set lists")
    type: ExerciseType = Field(..., description="Training category")

    # Equipment and muscles
    device: str = Field(..., description="Device or equipment used")
    primary_muscles: Tuple[str, ...] = Field(
        ..., description="Primary muscle groups, unique and in display order"
    )

    created_at: datetime = Field(
        default_factory=datetime.now, description="When the record was created"
    )

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> Any:
        """Trim the name and enforce the minimum length."""
        name = (v or "").strip() if isinstance(v, str) or v is None else v
        if isinstance(name, str) and len(name) < MIN_NAME_LENGTH:
            raise ValueError(
                f"Exercise name must have at least {MIN_NAME_LENGTH} characters"
            )
        return name

    @field_validator("device", mode="before")
    @classmethod
    def validate_device(cls, v: Any) -> Any:
        """Trim the device and require one to be chosen."""
        device = (v or "").strip() if isinstance(v, str) or v is None else v
        if device == "":
            raise ValueError("A device must be selected")
        return device

    @field_validator("primary_muscles", mode="before")
    @classmethod
    def validate_primary_muscles(cls, v: Any) -> Tuple[str, ...]:
        """Trim, drop blanks and deduplicate muscle names, keeping order."""
        if isinstance(v, str):
            v = [v]
        unique = []
        for muscle in v or ():
            if not isinstance(muscle, str) or not muscle.strip():
                continue
            muscle = muscle.strip()
            if muscle not in unique:
                unique.append(muscle)
        if not unique:
            raise ValueError("At least one muscle group must be selected")
        return tuple(unique)

    @property
    def is_strength(self) -> bool:
        """Check if this is a strength exercise."""
        return self.type == ExerciseType.STRENGTH

    def with_updates(self, **changes: Any) -> "Exercise":
        """
        Return a new, re-validated Exercise with the given fields changed.

        The id and creation timestamp are carried over unchanged.

        Args:
            **changes: Field values to replace (name, type, device,
                primary_muscles, ...).

        Returns:
            New Exercise instance of the same class.

        Raises:
            pydantic.ValidationError: If the updated values are invalid.
        """
        data = self.model_dump()
        data.update(changes)
        data["id"] = self.id
        data["created_at"] = self.created_at
        return type(self).model_validate(data)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.name} ({self.type.value}, {self.device})"

    model_config = {
        "frozen": True,  # Make immutable (value object semantics)
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Bench Press",
                    "type": "strength",
                    "device": "Barbell",
                    "primary_muscles": ["Chest", "Triceps"],
                },
                {
                    "name": "Rowing",
                    "type": "cardio",
                    "device": "Rowing machine",
                    "primary_muscles": ["Back", "Legs"],
                },
            ]
        },
    }


class StrengthExercise(Exercise):
    """
    Strength exercise with a default rest period between sets.

    Examples:
        >>> squat = StrengthExercise(
        ...     name="Squat", device="Rack", primary_muscles=["Quadriceps"]
        ... )
        >>> squat.default_rest_seconds
        120
    """

    type: Literal[ExerciseType.STRENGTH] = Field(
        default=ExerciseType.STRENGTH, description="Always strength"
    )
    default_rest_seconds: int = Field(
        default=DEFAULT_REST_SECONDS,
        ge=0,
        description="Suggested rest between sets in seconds",
    )
