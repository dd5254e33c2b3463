"""
Time sources for workout sessions.

A session reads "now" through a plain callable so that timing can be driven
by a controllable clock in tests. Sessions built with create_session() follow
the ``session_clock`` setting; a bare WorkoutSession() uses local time.
"""

from datetime import datetime, timezone
from typing import Optional

from backend.settings import Settings, get_settings
from domain.models.session import Clock, WorkoutSession


def local_now() -> datetime:
    """Naive local wall-clock time."""
    return datetime.now()


def utc_now() -> datetime:
    """Timezone-aware UTC time."""
    return datetime.now(tz=timezone.utc)


def system_clock(settings: Optional[Settings] = None) -> Clock:
    """
    Get the configured wall clock.

    Args:
        settings: Optional Settings instance. Defaults to get_settings().

    Returns:
        ``utc_now`` when ``session_clock`` is "utc", ``local_now`` otherwise.
    """
    if settings is None:
        settings = get_settings()
    if settings.session_clock == "utc":
        return utc_now
    return local_now


def create_session(settings: Optional[Settings] = None) -> WorkoutSession:
    """
    Create an inert WorkoutSession timed by the configured wall clock.

    ``WorkoutSession()`` on its own always uses local time; use this factory
    so that ``session_clock`` applies.

    Args:
        settings: Optional Settings instance. Defaults to get_settings().
    """
    return WorkoutSession(clock=system_clock(settings))
