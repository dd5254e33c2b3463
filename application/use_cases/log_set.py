"""
LogSet Use Case.

Turns raw set input from the UI (catalog exercise id, weight, reps, RPE) into
a validated SetEntry and records it in a workout session, either appended or
replacing an existing row.

Invalid input never reaches the session: validation and lookup failures are
returned as an unsuccessful result carrying messages the UI can show.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import ValidationError

from backend.core.catalog import ExerciseCatalog, ExerciseNotFoundError
from domain.models import SetEntry, WorkoutSession

logger = logging.getLogger(__name__)


@dataclass
class LogSetResult:
    """Result of the LogSet use case execution."""

    success: bool
    entry: Optional[SetEntry] = None
    index: Optional[int] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


def _format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages


class LogSetUseCase:
    """
    Use case for logging a performed set into a session.

    Orchestrates the following workflow:
    1. Look up the exercise in the catalog
    2. Build (and thereby validate) the SetEntry
    3. Append it to the session, or replace the row at ``replace_index``

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = LogSetUseCase(catalog=catalog)
        >>> result = use_case.execute(session, exercise_id=1, weight_kg=80, reps=5, rpe=8)
        >>> if not result.success:
        ...     show_errors(result.validation_errors)
    """

    def __init__(self, catalog: ExerciseCatalog) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            catalog: Catalog supplying exercise records
        """
        self._catalog = catalog

    def execute(
        self,
        session: WorkoutSession,
        exercise_id: int,
        weight_kg: float,
        reps: int,
        rpe: int,
        *,
        replace_index: Optional[int] = None,
    ) -> LogSetResult:
        """
        Execute the log set workflow.

        Args:
            session: Session receiving the set
            exercise_id: Catalog id of the exercise performed
            weight_kg: Weight lifted in kilograms
            reps: Repetitions performed
            rpe: Rate of perceived exertion (1-10)
            replace_index: Row to replace instead of appending. An index
                outside the session's sets leaves the session unchanged and
                the result has ``index=None``.

        Returns:
            LogSetResult with the created entry on success
        """
        try:
            exercise = self._catalog.get(exercise_id)
        except ExerciseNotFoundError as e:
            logger.warning("Cannot log set: %s", e)
            return LogSetResult(success=False, error=str(e))

        try:
            entry = SetEntry(exercise=exercise, weight_kg=weight_kg, reps=reps, rpe=rpe)
        except ValidationError as e:
            errors = _format_validation_errors(e)
            logger.warning("Rejected set for %s: %s", exercise.name, errors)
            return LogSetResult(
                success=False,
                error="Set validation failed",
                validation_errors=errors,
            )

        if replace_index is None:
            session.add_set(entry)
            index: Optional[int] = session.set_count - 1
        else:
            in_range = 0 <= replace_index < session.set_count
            session.replace_set_at(replace_index, entry)
            index = replace_index if in_range else None

        logger.debug("Logged set %s at index %s", entry, index)
        return LogSetResult(success=True, entry=entry, index=index)
