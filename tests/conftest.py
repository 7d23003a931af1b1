"""Shared fixtures for the youtype test suite.

Subtitle samples are small, hand-timed SRT/VTT documents so that expected
segment boundaries can be checked by hand.
"""

import pytest

from youtype.util.types import TimedSegment


SAMPLE_SRT = """1
00:00:01,000 --> 00:00:04,000
Hello world

2
00:00:05,000 --> 00:00:08,500
This is a test
"""

# German track for the same video, cut slightly differently
SAMPLE_SRT_DE = """1
00:00:01,200 --> 00:00:03,900
Hallo Welt

2
00:00:05,400 --> 00:00:08,400
Das ist ein Test
"""

SAMPLE_VTT = """WEBVTT

00:00:01.000 --> 00:00:04.000
Hello world

00:00:05.000 --> 00:00:08.500
This is a test
"""


@pytest.fixture
def sample_srt():
    return SAMPLE_SRT


@pytest.fixture
def sample_srt_de():
    return SAMPLE_SRT_DE


@pytest.fixture
def sample_vtt():
    return SAMPLE_VTT


@pytest.fixture
def short_segments():
    """Three short cues: 2, 4 and 2 words."""
    return [
        TimedSegment(start=0.0, duration=2.0, text="Hello world"),
        TimedSegment(start=2.0, duration=3.0, text="this is a test"),
        TimedSegment(start=5.0, duration=2.0, text="of merging"),
    ]


@pytest.fixture
def srt_file(tmp_path, sample_srt):
    path = tmp_path / "lesson.srt"
    path.write_text(sample_srt, encoding="utf-8")
    return path


@pytest.fixture
def srt_file_de(tmp_path, sample_srt_de):
    path = tmp_path / "lesson.de.srt"
    path.write_text(sample_srt_de, encoding="utf-8")
    return path
