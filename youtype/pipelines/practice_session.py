"""Dictation practice session.

A session walks a learner through merged practice segments: it tracks the
current segment and which segments were already answered correctly, and
grades each attempt against the current segment's reference text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from ..analysis.grading import grade_answer
from ..analysis.segments import find_segment_index
from ..analysis.word_diff import diff_words
from ..config import PracticeSettings
from ..parsers.subtitles import SubtitleParseError
from ..util.types import GradeResult, TimedSegment, WordComparison


@dataclass
class AttemptResult:
    """Outcome of one submitted answer."""
    segment_index: int
    grade: GradeResult
    # empty when the answer passed
    diff: List[WordComparison] = field(default_factory=list)

    @property
    def is_correct(self) -> bool:
        return self.grade.is_correct


class PracticeSession:
    """Stateful walk over practice segments for one learner."""

    def __init__(self, segments: Sequence[TimedSegment], settings: Optional[PracticeSettings] = None):
        if not segments:
            raise SubtitleParseError("could not parse subtitles")
        self.segments: List[TimedSegment] = list(segments)
        self.settings = (settings or PracticeSettings()).clamped()
        self.current_index = 0
        self.completed: Set[int] = set()
        self.attempts = 0

    @property
    def current(self) -> TimedSegment:
        return self.segments[self.current_index]

    @property
    def total(self) -> int:
        return len(self.segments)

    @property
    def progress(self) -> float:
        """Fraction of segments answered correctly (0.0 .. 1.0)."""
        return len(self.completed) / self.total

    @property
    def is_finished(self) -> bool:
        return len(self.completed) == self.total

    def go_to(self, index: int) -> bool:
        """Jump to ``index``; out-of-range indices are ignored. Returns True on a move."""
        if 0 <= index < self.total:
            self.current_index = index
            return True
        return False

    def next(self) -> bool:
        return self.go_to(self.current_index + 1)

    def previous(self) -> bool:
        return self.go_to(self.current_index - 1)

    def seek(self, time: float) -> int:
        """Move to the segment playing at ``time`` seconds and return its index."""
        self.current_index = find_segment_index(self.segments, time)
        return self.current_index

    def mark_completed(self, index: int) -> None:
        if 0 <= index < self.total:
            self.completed.add(index)

    def submit(self, answer: str) -> AttemptResult:
        """Grade ``answer`` against the current segment.

        A correct answer marks the segment completed but does not advance;
        the host decides when to move on.
        """
        self.attempts += 1
        reference = self.current.text
        grade = grade_answer(reference, answer, self.settings.accuracy_threshold)
        result = AttemptResult(segment_index=self.current_index, grade=grade)
        if grade.is_correct:
            self.mark_completed(self.current_index)
        else:
            result.diff = diff_words(reference, answer)
        return result
