"""
Application Use Cases for the workout tracker.

This package contains application-level use cases that orchestrate domain logic
and coordinate between the catalog and workout sessions. Use cases are the
entry points for operations triggered from the UI.

- Use cases orchestrate domain objects
- Dependencies are injected via constructors for testability
- Use cases return result objects, never raise on invalid user input

Usage:
    from application.use_cases import LogSetUseCase, LogSetResult

    log_set = LogSetUseCase(catalog=catalog)
    result = log_set.execute(session, exercise_id=1, weight_kg=80, reps=5, rpe=8)
"""

from application.use_cases.log_set import LogSetResult, LogSetUseCase

__all__ = [
    # LogSet
    "LogSetUseCase",
    "LogSetResult",
]
