"""
WorkoutSession entity - pause-aware session timing and the logged sets.

Unlike the value objects (TrainingVolume, Exercise, SetEntry), a session is
mutable and owned by a single caller. All timestamps come from an injected
clock so timing can be driven deterministically.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, Field

from domain.models.set_entry import SetEntry
from domain.models.volume import TrainingVolume

logger = logging.getLogger(__name__)


Clock = Callable[[], datetime]


class SessionState(str, Enum):
    """
    Lifecycle states of a workout session.

    - INERT: Constructed, never started
    - ACTIVE: Running, time is counted
    - PAUSED: Running but paused, time is not counted
    - ENDED: Finished, duration is frozen until the next start
    """

    INERT = "inert"
    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class SetChangeKind(str, Enum):
    """Kinds of change applied to a session's set list."""

    ADDED = "added"
    REMOVED = "removed"
    REPLACED = "replaced"
    RESET = "reset"


@dataclass(frozen=True)
class SetsChanged:
    """Notification sent to listeners after the set list changed."""

    kind: SetChangeKind
    index: Optional[int] = None
    entry: Optional[SetEntry] = None


SetsListener = Callable[[SetsChanged], None]


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as HH:MM:SS.

    Hours are not wrapped at 24, so a 25 hour duration reads ``25:00:00``.
    """
    total_seconds = max(0, int(duration.total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class SessionSummary(BaseModel):
    """Read-only snapshot of a session for list display."""

    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    state: SessionState
    duration_seconds: float = Field(..., ge=0)
    duration_text: str
    set_count: int = Field(..., ge=0)
    total_volume: TrainingVolume

    model_config = {"frozen": True}


class WorkoutSession:
    """
    A timed container of logged sets.

    Duration counts only active training time: time spent paused is
    accumulated separately and subtracted. Every query recomputes from the
    current clock and set list; nothing is cached.

    Misuse of the state machine (pausing twice, resuming while not paused,
    ending an inactive session) and out-of-range indices are silent no-ops.

    Usage:
        >>> session = WorkoutSession()
        >>> session.start()
        >>> session.add_set(SetEntry(exercise=bench, weight_kg=80, reps=5, rpe=8))
        >>> session.pause()
        >>> session.resume()
        >>> session.end()
        >>> session.total_volume.value
        400.0
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """
        Create an inert session.

        Args:
            clock: Callable returning "now". Defaults to ``datetime.now``.
        """
        self._clock: Clock = clock or datetime.now
        self._sets: List[SetEntry] = []
        self._listeners: List[SetsListener] = []

        self._start: Optional[datetime] = None
        self._end: Optional[datetime] = None
        self._paused_total = timedelta(0)
        self._pause_started: Optional[datetime] = None
        self._active = False

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def start_time(self) -> Optional[datetime]:
        """When the session was last started, None if never started."""
        return self._start

    @property
    def end_time(self) -> Optional[datetime]:
        """When the session ended, None while unset."""
        return self._end

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def is_paused(self) -> bool:
        return self._pause_started is not None

    @property
    def is_ended(self) -> bool:
        return not self._active and self._end is not None

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        if self._active:
            return SessionState.PAUSED if self.is_paused else SessionState.ACTIVE
        if self._end is not None:
            return SessionState.ENDED
        return SessionState.INERT

    @property
    def paused_duration(self) -> timedelta:
        """Paused time accumulated by completed pauses."""
        return self._paused_total

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """
        (Re)start the session.

        Valid from any state. Discards previously logged sets, resets pause
        accounting and marks the session active.
        """
        self._sets.clear()
        self._paused_total = timedelta(0)
        self._pause_started = None

        self._start = self._clock()
        self._end = None
        self._active = True
        logger.debug("Session started at %s", self._start)
        self._notify(SetsChanged(kind=SetChangeKind.RESET))

    def pause(self) -> None:
        """Pause an active session. No-op if inactive or already paused."""
        if not self._active or self._pause_started is not None:
            logger.debug("Ignoring pause in state %s", self.state.value)
            return
        self._pause_started = self._clock()
        logger.debug("Session paused at %s", self._pause_started)

    def resume(self) -> None:
        """Resume a paused session. No-op unless active and paused."""
        if not self._active or self._pause_started is None:
            logger.debug("Ignoring resume in state %s", self.state.value)
            return
        now = self._clock()
        self._paused_total += now - self._pause_started
        self._pause_started = None
        logger.debug("Session resumed, paused total %s", self._paused_total)

    def end(self) -> None:
        """
        Finish the session. No-op if not active.

        A paused session is resumed first so the final pause counts as
        paused time.
        """
        if not self._active:
            logger.debug("Ignoring end in state %s", self.state.value)
            return
        if self._pause_started is not None:
            self.resume()
        self._end = self._clock()
        self._active = False
        logger.debug("Session ended at %s", self._end)

    # -------------------------------------------------------------------------
    # Timing
    # -------------------------------------------------------------------------

    @property
    def duration(self) -> timedelta:
        """
        Active training time, excluding all paused time.

        Zero for a session that was never started. Clamped to zero if the
        clock moved backwards.
        """
        if not self._active and self._end is None:
            return timedelta(0)

        now = self._clock()
        reference = now if self._active else self._end
        raw = reference - self._start - self._paused_total

        if self._pause_started is not None:
            raw -= now - self._pause_started

        if raw < timedelta(0):
            return timedelta(0)
        return raw

    @property
    def duration_text(self) -> str:
        """Duration formatted as HH:MM:SS."""
        return format_duration(self.duration)

    # -------------------------------------------------------------------------
    # Sets
    # -------------------------------------------------------------------------

    @property
    def sets(self) -> Tuple[SetEntry, ...]:
        """Snapshot of the logged sets in log order."""
        return tuple(self._sets)

    @property
    def set_count(self) -> int:
        return len(self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    def add_set(self, entry: SetEntry) -> None:
        """Append a set to the log."""
        self._sets.append(entry)
        self._notify(
            SetsChanged(kind=SetChangeKind.ADDED, index=len(self._sets) - 1, entry=entry)
        )

    def remove_set_at(self, index: int) -> None:
        """Remove the set at ``index``. Out-of-range indices are ignored."""
        if not self._in_range(index):
            logger.debug("Ignoring remove at index %d of %d sets", index, len(self._sets))
            return
        entry = self._sets.pop(index)
        self._notify(SetsChanged(kind=SetChangeKind.REMOVED, index=index, entry=entry))

    def replace_set_at(self, index: int, entry: SetEntry) -> None:
        """Replace the set at ``index``. Out-of-range indices are ignored."""
        if not self._in_range(index):
            logger.debug("Ignoring replace at index %d of %d sets", index, len(self._sets))
            return
        self._sets[index] = entry
        self._notify(SetsChanged(kind=SetChangeKind.REPLACED, index=index, entry=entry))

    def _in_range(self, index: int) -> bool:
        # Negative indices are out of range, not counted from the end
        return 0 <= index < len(self._sets)

    @property
    def total_volume(self) -> TrainingVolume:
        """Sum of the volume of every logged set."""
        total = TrainingVolume.zero()
        for entry in self._sets:
            total = total + entry.volume()
        return total

    @property
    def total_volume_value(self) -> float:
        return self.total_volume.value

    # -------------------------------------------------------------------------
    # Change notification
    # -------------------------------------------------------------------------

    def subscribe(self, listener: SetsListener) -> None:
        """Register a callable invoked after every change to the set list."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SetsListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change: SetsChanged) -> None:
        for listener in list(self._listeners):
            listener(change)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def summary(self) -> SessionSummary:
        """
        Build a read-only snapshot for list display.

        Returns:
            SessionSummary with timing and volume at the time of the call.
        """
        duration = self.duration
        return SessionSummary(
            start_time=self._start,
            end_time=self._end,
            state=self.state,
            duration_seconds=duration.total_seconds(),
            duration_text=format_duration(duration),
            set_count=len(self._sets),
            total_volume=self.total_volume,
        )

    def __str__(self) -> str:
        """Human-readable string representation."""
        started = (
            self._start.strftime("%d.%m.%Y %H:%M") if self._start else "--.--.---- --:--"
        )
        return f"{started} ({self.duration_text}), Vol={self.total_volume}"

    def __repr__(self) -> str:
        return (
            f"WorkoutSession(state={self.state.value}, sets={len(self._sets)}, "
            f"duration={self.duration_text})"
        )
