"""
Training statistics over logged workout sessions.

This module provides pure functions over a collection of sessions:
- Personal record (heaviest set) detection
- Cumulative volume since a date
- Muscle groups trained since a date

Nothing is cached; every call recomputes from the sessions it is given.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from domain.models import SetEntry, TrainingVolume, WorkoutSession

logger = logging.getLogger(__name__)


# =============================================================================
# Report DTOs
# =============================================================================


class StatisticsReport(BaseModel):
    """Statistics for the sessions started on or after ``since``."""

    since: datetime
    session_count: int = Field(..., ge=0, description="Sessions counted")
    total_volume: TrainingVolume
    muscles: List[str] = Field(default_factory=list)
    personal_record: Optional[SetEntry] = Field(
        default=None, description="Heaviest set across all given sessions"
    )

    model_config = {"frozen": True}


# =============================================================================
# Calculations
# =============================================================================


def _started_since(
    sessions: Optional[Iterable[WorkoutSession]], since: datetime
) -> List[WorkoutSession]:
    """Sessions started at or after ``since``; never-started sessions are skipped."""
    if sessions is None:
        return []
    return [s for s in sessions if s.start_time is not None and s.start_time >= since]


def overall_personal_record_by_weight(
    sessions: Optional[Iterable[WorkoutSession]],
) -> Optional[SetEntry]:
    """
    Find the heaviest set across all sessions.

    On equal weights the first set encountered is kept.

    Args:
        sessions: Sessions to scan, in order

    Returns:
        The set with the greatest weight, or None if there are no sets
    """
    if sessions is None:
        return None

    best: Optional[SetEntry] = None
    for session in sessions:
        for entry in session.sets:
            if best is None or entry.weight_kg > best.weight_kg:
                best = entry
    return best


def volume_since(
    sessions: Optional[Iterable[WorkoutSession]], since: datetime
) -> TrainingVolume:
    """
    Sum the total volume of sessions started on or after ``since``.

    Args:
        sessions: Sessions to aggregate
        since: Inclusive lower bound on the session start time

    Returns:
        Combined TrainingVolume
    """
    total = TrainingVolume.zero()
    for session in _started_since(sessions, since):
        total = total + session.total_volume
    return total


def muscles_since(
    sessions: Optional[Iterable[WorkoutSession]], since: datetime
) -> List[str]:
    """
    Collect the primary muscles trained in sessions started on or after ``since``.

    Names are de-duplicated case-insensitively, keeping the first spelling
    seen, and sorted case-insensitively.

    Args:
        sessions: Sessions to scan
        since: Inclusive lower bound on the session start time

    Returns:
        Sorted list of unique muscle names
    """
    muscles = {}
    for session in _started_since(sessions, since):
        for entry in session.sets:
            for muscle in entry.exercise.primary_muscles:
                muscles.setdefault(muscle.casefold(), muscle)

    return sorted(muscles.values(), key=lambda name: (name.casefold(), name))


def build_report(
    sessions: Optional[Iterable[WorkoutSession]], since: datetime
) -> StatisticsReport:
    """
    Compute every statistic for the given sessions.

    The personal record covers all sessions; volume and muscles only those
    started on or after ``since``.

    Args:
        sessions: Sessions to report on
        since: Inclusive lower bound on the session start time

    Returns:
        StatisticsReport
    """
    all_sessions = list(sessions) if sessions is not None else []
    recent = _started_since(all_sessions, since)
    logger.debug(
        "Building statistics report: %d of %d sessions since %s",
        len(recent),
        len(all_sessions),
        since,
    )

    return StatisticsReport(
        since=since,
        session_count=len(recent),
        total_volume=volume_since(recent, since),
        muscles=muscles_since(recent, since),
        personal_record=overall_personal_record_by_weight(all_sessions),
    )
