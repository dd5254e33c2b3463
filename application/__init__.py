"""
Application Layer for the workout tracker.

This package contains:
- use_cases/: Workflows coordinating the exercise catalog and sessions
"""
