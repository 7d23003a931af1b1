"""Merge short subtitle cues into practice-sized segments.

Subtitle cues are often only a few words long. For dictation each unit should
carry at least ``min_words`` words, so adjacent cues are folded together in a
single left-to-right pass. The merged duration runs from the first cue's start
to the last cue's end, so gaps between cues are kept inside the segment.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from ..util.types import TimedSegment


def count_words(text: str) -> int:
	"""Number of whitespace-delimited tokens in ``text``."""
	return len(text.split())


def _join_secondary(left: Optional[str], right: Optional[str]) -> Optional[str]:
	parts = [t for t in (left, right) if t]
	return " ".join(parts) if parts else None


def _merge(
	segments: Sequence[TimedSegment],
	min_words: int,
	*,
	keep_secondary: bool,
) -> List[TimedSegment]:
	if not segments:
		return []

	merged: List[TimedSegment] = []
	current = replace(segments[0])
	for seg in segments[1:]:
		if count_words(current.text) >= min_words:
			merged.append(current)
			current = replace(seg)
			continue
		# fold seg into the accumulator
		current.text = f"{current.text} {seg.text}"
		if keep_secondary and (current.secondary_text or seg.secondary_text):
			current.secondary_text = _join_secondary(current.secondary_text, seg.secondary_text)
		current.duration = seg.start + seg.duration - current.start
	# the trailing accumulator is emitted even when it is short
	merged.append(current)
	return merged


def merge_segments(segments: Sequence[TimedSegment], min_words: int) -> List[TimedSegment]:
	"""Merge adjacent segments until each holds at least ``min_words`` words.

	- A segment already at ``min_words`` is flushed before the next one is read
	- The final segment may stay below ``min_words``
	- ``min_words <= 0`` never merges
	- Input segments are not modified
	"""
	return _merge(segments, min_words, keep_secondary=False)


def merge_segments_with_secondary(segments: Sequence[TimedSegment], min_words: int) -> List[TimedSegment]:
	"""Like ``merge_segments`` but also joins ``secondary_text`` of folded segments.

	Absent translations are skipped when joining, so a merged segment has a
	translation as soon as one of its parts has one.
	"""
	return _merge(segments, min_words, keep_secondary=True)


def find_segment_index(segments: Sequence[TimedSegment], time: float) -> int:
	"""Index of the segment whose ``[start, end)`` contains ``time``.

	Times before the first segment map to 0 and times past the last one (or in
	no segment at all) map to the last index. An empty list returns 0.
	"""
	if not segments:
		return 0
	for i, seg in enumerate(segments):
		if seg.start <= time < seg.end:
			return i
	if time < segments[0].start:
		return 0
	return len(segments) - 1
