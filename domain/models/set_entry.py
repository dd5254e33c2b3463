"""
SetEntry value object - one performed set of an exercise.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise
from domain.models.volume import TrainingVolume


MIN_RPE = 1
MAX_RPE = 10


class SetEntry(BaseModel):
    """
    Immutable record of one logged set.

    All constraints are checked at construction, so an invalid set never
    exists: a negative weight, zero reps, an RPE outside 1-10 or a missing
    exercise raise ``pydantic.ValidationError``.

    Examples:
        >>> entry = SetEntry(exercise=bench, weight_kg=80, reps=5, rpe=8)
        >>> entry.volume().value
        400.0
    """

    exercise: Exercise = Field(..., description="Exercise performed (catalog record)")
    weight_kg: float = Field(..., ge=0, description="Weight lifted in kilograms")
    reps: int = Field(..., gt=0, description="Repetitions performed")
    rpe: int = Field(
        ..., ge=MIN_RPE, le=MAX_RPE, description="Rate of perceived exertion (1-10)"
    )
    created_at: datetime = Field(
        default_factory=datetime.now, description="When the set was logged"
    )

    @classmethod
    def create(
        cls, exercise: Exercise, weight_kg: float, reps: int, rpe: int
    ) -> "SetEntry":
        """Positional shorthand for building a set entry."""
        return cls(exercise=exercise, weight_kg=weight_kg, reps=reps, rpe=rpe)

    def volume(self) -> TrainingVolume:
        """
        Get the training volume of this set.

        Returns:
            TrainingVolume of weight_kg x reps.
        """
        return TrainingVolume(value=self.weight_kg * self.reps)

    # Display helpers for set lists

    @property
    def exercise_name(self) -> str:
        return self.exercise.name

    @property
    def volume_value(self) -> float:
        return self.volume().value

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.exercise.name} {self.weight_kg:g} kg x {self.reps} @ RPE {self.rpe}"

    model_config = {
        "frozen": True,  # Make immutable (value object semantics)
        "json_schema_extra": {
            "examples": [
                {
                    "exercise": {
                        "name": "Bench Press",
                        "type": "strength",
                        "device": "Barbell",
                        "primary_muscles": ["Chest"],
                    },
                    "weight_kg": 80,
                    "reps": 5,
                    "rpe": 8,
                }
            ]
        },
    }
