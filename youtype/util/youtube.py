"""Helpers for YouTube video references."""

from __future__ import annotations

import re
from typing import Optional


_video_id_patterns = [
	re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
	re.compile(r"^([a-zA-Z0-9_-]{11})$"),
]


def extract_video_id(url: str) -> Optional[str]:
	"""Return the video id from a watch/short/embed URL or a bare 11-char id.

	- "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42" → "dQw4w9WgXcQ"
	- "https://youtu.be/dQw4w9WgXcQ" → "dQw4w9WgXcQ"
	- "not a video" → None
	"""
	url = url.strip()
	for pattern in _video_id_patterns:
		match = pattern.search(url)
		if match:
			return match.group(1)
	return None


def watch_url(video_id: str, start_seconds: Optional[float] = None) -> str:
	"""Build a watch URL, optionally starting at a whole second."""
	url = f"https://www.youtube.com/watch?v={video_id}"
	if start_seconds is not None:
		url += f"&t={int(start_seconds)}s"
	return url
