"""
Domain layer for the workout tracker.

This package contains pure domain models that are independent of
infrastructure concerns (storage, UI, external services).
"""

from domain.models import (
    Exercise,
    ExerciseType,
    SessionState,
    SetEntry,
    StrengthExercise,
    TrainingVolume,
    WorkoutSession,
)

__all__ = [
    "Exercise",
    "ExerciseType",
    "SessionState",
    "SetEntry",
    "StrengthExercise",
    "TrainingVolume",
    "WorkoutSession",
]
