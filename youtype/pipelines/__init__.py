"""Pipeline modules for orchestrating practice workflows."""

from .practice_session import AttemptResult, PracticeSession

__all__ = [
    "AttemptResult",
    "PracticeSession",
]
