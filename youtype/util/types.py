"""Core data types for the YouType dictation pipeline.

This module defines the data structures passed between the parsers, the
segment merger, the bilingual aligner and the grading engine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class TimedSegment:
    """A timed span of reference text derived from one or more subtitle cues.

    Attributes:
        start: Seconds from video start
        duration: Length in seconds (always > 0 for parsed segments)
        text: Primary-language text
        secondary_text: Aligned translation, None when no match was found

    A merged segment spans from its first cue's start to its last cue's end,
    so gaps between cues are part of ``duration``.
    """
    start: float
    duration: float
    text: str
    secondary_text: Optional[str] = None

    @property
    def end(self) -> float:
        return self.start + self.duration


@dataclass
class WordComparison:
    """One token of a word-level diff between a learner's answer and the reference.

    Attributes:
        word: Token typed by the learner ("" for a missing reference word)
        expected: Reference token ("" for an extra learner token)
        is_correct: Tokens match after normalization
        is_missing: Reference token the learner skipped
        is_extra: Learner token with no reference counterpart

    At most one flag is set. All three False means a substitution: both
    ``word`` and ``expected`` are present but differ.
    """
    word: str
    expected: str
    is_correct: bool = False
    is_missing: bool = False
    is_extra: bool = False

    @property
    def is_substitution(self) -> bool:
        return not (self.is_correct or self.is_missing or self.is_extra)


@dataclass
class GradeResult:
    """Verdict for one answer: pass/fail plus the integer accuracy percentage."""
    is_correct: bool
    accuracy: int
