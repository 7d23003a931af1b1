"""Subtitle parsers (SRT, VTT) producing timed practice segments.

This module turns already-read subtitle text into ``TimedSegment`` lists and
back into SRT text. A small loading helper chains parsing, bilingual alignment
and merging for hosts that just want practice-ready segments.
"""

from __future__ import annotations

import io
import logging
import re
from datetime import timedelta
from typing import List, Optional, Sequence

import srt
import webvtt
from webvtt.errors import MalformedCaptionError, MalformedFileError

from ..analysis.alignment import AlignmentConfig, align_translation
from ..analysis.segments import merge_segments, merge_segments_with_secondary
from ..util.types import TimedSegment
from .timestamps import parse_timestamp


logger = logging.getLogger(__name__)

_block_split_re = re.compile(r"\n\s*\n")
_cue_timing_re = re.compile(
	r"(\d{2}:\d{2}:\d{2}[,.]\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2}[,.]\d{3})"
)


class SubtitleParseError(ValueError):
	"""Raised by hosts when a subtitle source yields no usable segments."""


def _strip_bom(text: str) -> str:
	return text[1:] if text.startswith("\ufeff") else text


def _make_segment(start: Optional[float], end: Optional[float], text: str) -> Optional[TimedSegment]:
	"""Build a segment, or None if the cue can't be timed or has no text."""
	if start is None or end is None:
		return None
	text = text.strip()
	if not text or end - start <= 0:
		return None
	return TimedSegment(start=start, duration=end - start, text=text)


def parse_srt_text(source_text: str) -> List[TimedSegment]:
	"""Parse SRT text into segments in source order.

	Each blank-line separated block needs a ``-->`` timing line; anything before
	it (the cue index) is ignored and the lines after it form the text. Blocks
	without timing, with unparseable timestamps, empty text or a non-positive
	duration are skipped. Input with no usable block yields an empty list.
	"""
	segments: List[TimedSegment] = []
	content = _strip_bom(source_text).replace("\r\n", "\n").replace("\r", "\n").strip()
	if not content:
		return segments

	for block_no, block in enumerate(_block_split_re.split(content), 1):
		lines = block.strip().split("\n")
		timing_idx = next((i for i, line in enumerate(lines) if "-->" in line), None)
		if timing_idx is None:
			logger.debug("Skipping block %d: no timing line", block_no)
			continue

		match = _cue_timing_re.search(lines[timing_idx])
		if not match:
			logger.debug("Skipping block %d: malformed timing %r", block_no, lines[timing_idx])
			continue

		text = " ".join(line.strip() for line in lines[timing_idx + 1:] if line.strip())
		segment = _make_segment(parse_timestamp(match.group(1)), parse_timestamp(match.group(2)), text)
		if segment is None:
			logger.debug("Skipping block %d: empty text or non-positive duration", block_no)
			continue
		segments.append(segment)

	return segments


def parse_srt_bytes(data: bytes) -> List[TimedSegment]:
	"""Decode SRT bytes (UTF-8, BOM tolerated) and parse them."""
	return parse_srt_text(data.decode("utf-8", errors="replace"))


def parse_vtt_text(source_text: str) -> List[TimedSegment]:
	"""Parse WebVTT text into segments with the same retention rules as SRT."""
	segments: List[TimedSegment] = []
	try:
		vtt = webvtt.from_buffer(io.StringIO(_strip_bom(source_text)))
	except (MalformedFileError, MalformedCaptionError) as e:
		logger.warning("Could not read WebVTT input: %s", e)
		return segments

	for caption in vtt:
		text = (caption.text or "").replace("\n", " ")
		segment = _make_segment(parse_timestamp(caption.start), parse_timestamp(caption.end), text)
		if segment is not None:
			segments.append(segment)
	return segments


def parse_subtitle_text(source_text: str, fmt: str = "srt") -> List[TimedSegment]:
	"""Dispatch on subtitle format ('srt' | 'vtt')."""
	fmt = fmt.lower().lstrip(".")
	if fmt == "srt":
		return parse_srt_text(source_text)
	if fmt == "vtt":
		return parse_vtt_text(source_text)
	raise ValueError(f"Unsupported subtitle format: {fmt}")


def compose_srt(segments: Sequence[TimedSegment]) -> str:
	"""Serialize segments back to SRT text with 1-based sequential indices.

	Timestamps are truncated to whole milliseconds.
	"""
	# srt writes microseconds // 1000, so passing raw timedeltas truncates.
	# reindex=False keeps the given order (srt would sort by start otherwise).
	subs = [
		srt.Subtitle(
			index=i,
			start=timedelta(seconds=seg.start),
			end=timedelta(seconds=seg.end),
			content=seg.text,
		)
		for i, seg in enumerate(segments, 1)
	]
	return srt.compose(subs, reindex=False)


def load_practice_segments(
	primary_text: str,
	*,
	min_words: int,
	secondary_text: Optional[str] = None,
	fmt: str = "srt",
	alignment: Optional[AlignmentConfig] = None,
) -> List[TimedSegment]:
	"""Parse, optionally align a translation track, and merge into practice segments.

	Raises SubtitleParseError when the primary track has no usable cue. An
	unparseable secondary track only means every line stays monolingual.
	"""
	primary = parse_subtitle_text(primary_text, fmt)
	if not primary:
		raise SubtitleParseError("could not parse subtitles")

	if secondary_text is None:
		return merge_segments(primary, min_words)

	secondary = parse_subtitle_text(secondary_text, fmt)
	if not secondary:
		logger.warning("Secondary subtitles yielded no segments; continuing without translation")
	aligned = align_translation(primary, secondary, alignment)
	return merge_segments_with_secondary(aligned, min_words)
