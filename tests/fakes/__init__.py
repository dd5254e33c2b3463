"""
Fakes and Factories for Testing.

This package provides in-memory fakes and factory functions for fast,
isolated testing. No clock, file or external dependencies required.

Usage:
    from tests.fakes import FakeClock, make_exercise, make_session

    clock = FakeClock()
    session = make_session(clock, weights=[80, 100, 60])
"""
from datetime import datetime
from typing import Iterable, Optional, Sequence

from domain.models import Exercise, ExerciseType, SetEntry, WorkoutSession
from tests.fakes.clock import DEFAULT_START, FakeClock


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercise(
    name: str = "Bench Press",
    *,
    muscles: Sequence[str] = ("Chest", "Triceps"),
    type: ExerciseType = ExerciseType.STRENGTH,
    device: str = "Barbell",
) -> Exercise:
    """Create a valid Exercise with sensible defaults."""
    return Exercise(name=name, type=type, device=device, primary_muscles=list(muscles))


def make_set(
    exercise: Optional[Exercise] = None,
    weight_kg: float = 80,
    reps: int = 5,
    rpe: int = 8,
) -> SetEntry:
    """Create a valid SetEntry."""
    return SetEntry(
        exercise=exercise or make_exercise(),
        weight_kg=weight_kg,
        reps=reps,
        rpe=rpe,
    )


def make_session(
    clock: Optional[FakeClock] = None,
    *,
    started_at: Optional[datetime] = None,
    weights: Iterable[float] = (),
    reps: int = 5,
    exercise: Optional[Exercise] = None,
    end: bool = True,
) -> WorkoutSession:
    """
    Create a started session holding one set per weight.

    Args:
        clock: Clock to use. A new FakeClock is created if omitted.
        started_at: Moment the session starts.
        weights: Weight of each set, in log order.
        reps: Reps of every set.
        exercise: Exercise of every set.
        end: Whether to end the session after logging.
    """
    clock = clock or FakeClock()
    if started_at is not None:
        clock.set(started_at)
    session = WorkoutSession(clock=clock)
    session.start()
    for weight in weights:
        session.add_set(make_set(exercise, weight_kg=weight, reps=reps))
    if end:
        session.end()
    return session


__all__ = [
    "DEFAULT_START",
    "FakeClock",
    "make_exercise",
    "make_set",
    "make_session",
]
