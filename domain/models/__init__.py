"""
Domain models for the workout tracker.

This package contains pure domain models that are independent of
infrastructure concerns (storage, UI, external services).

These models represent the core training concepts:
- TrainingVolume: Weight x reps value object
- Exercise: Immutable exercise record supplied by the catalog
- SetEntry: One logged set of an exercise
- WorkoutSession: Pause-aware timed container of logged sets

Usage:
    >>> from domain.models import Exercise, ExerciseType, SetEntry, WorkoutSession

    >>> bench = Exercise(
    ...     name="Bench Press",
    ...     type=ExerciseType.STRENGTH,
    ...     device="Barbell",
    ...     primary_muscles=["Chest", "Triceps"],
    ... )
    >>> session = WorkoutSession()
    >>> session.start()
    >>> session.add_set(SetEntry(exercise=bench, weight_kg=80, reps=5, rpe=8))
    >>> str(session.total_volume)
    '400'
"""

from domain.models.exercise import (
    DEFAULT_REST_SECONDS,
    MIN_NAME_LENGTH,
    Exercise,
    ExerciseType,
    StrengthExercise,
)
from domain.models.session import (
    Clock,
    SessionState,
    SessionSummary,
    SetChangeKind,
    SetsChanged,
    WorkoutSession,
    format_duration,
)
from domain.models.set_entry import MAX_RPE, MIN_RPE, SetEntry
from domain.models.volume import TrainingVolume

__all__ = [
    # Main entities
    "WorkoutSession",
    "SetEntry",
    "Exercise",
    "StrengthExercise",
    "TrainingVolume",
    "SessionSummary",
    "SetsChanged",
    # Enums
    "ExerciseType",
    "SessionState",
    "SetChangeKind",
    # Helpers and constants
    "Clock",
    "format_duration",
    "MIN_NAME_LENGTH",
    "DEFAULT_REST_SECONDS",
    "MIN_RPE",
    "MAX_RPE",
]
