"""Conversion between subtitle timestamps and seconds.

Subtitle files write times as ``HH:MM:SS,mmm`` (SRT) or ``HH:MM:SS.mmm``
(WebVTT). Internally every time is a float number of seconds.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Optional

import srt


_timestamp_re = re.compile(r"(\d{2}):(\d{2}):(\d{2})\.(\d{3})")


def parse_timestamp(text: str) -> Optional[float]:
	"""Parse ``HH:MM:SS,mmm`` or ``HH:MM:SS.mmm`` into seconds.

	Returns None when the text holds no timestamp, so a failed parse can't be
	confused with a real ``00:00:00,000``.
	"""
	match = _timestamp_re.search(text.replace(",", "."))
	if not match:
		return None
	hours, minutes, seconds, millis = (int(g) for g in match.groups())
	return hours * 3600 + minutes * 60 + seconds + millis / 1000


def _to_timedelta(seconds: float) -> timedelta:
	# timedelta snaps to whole microseconds, which absorbs float noise such as
	# 1.001 -> 1.00099999 before the millisecond truncation below
	return timedelta(seconds=max(seconds, 0.0))


def _split_millis(seconds: float) -> tuple[int, int]:
	"""Return (whole_seconds, millis) with millis truncated, not rounded."""
	delta = _to_timedelta(seconds)
	whole = delta.days * 86400 + delta.seconds
	return whole, delta.microseconds // 1000


def format_srt_timestamp(seconds: float) -> str:
	"""Format seconds as an SRT timestamp ``HH:MM:SS,mmm`` (truncated)."""
	return srt.timedelta_to_srt_timestamp(_to_timedelta(seconds))


def format_seconds(seconds: float) -> str:
	"""Format seconds as ``MM:SS.mmm``; minutes keep counting past 59."""
	whole, millis = _split_millis(seconds)
	minutes, secs = divmod(whole, 60)
	return f"{minutes:02d}:{secs:02d}.{millis:03d}"


def format_clock(seconds: float) -> str:
	"""Format seconds as a short ``M:SS`` clock for progress displays."""
	whole, _ = _split_millis(seconds)
	minutes, secs = divmod(whole, 60)
	return f"{minutes}:{secs:02d}"
