"""Unit tests for the practice session and host-side settings."""

import importlib.util
import logging

import pytest

import youtype.config
from youtype.config import PracticeSettings
from youtype.parsers.subtitles import SubtitleParseError, load_practice_segments
from youtype.pipelines import PracticeSession
from youtype.util.types import TimedSegment


@pytest.fixture
def session(sample_srt):
    segments = load_practice_segments(sample_srt, min_words=0)
    return PracticeSession(segments, PracticeSettings(min_words=0, accuracy_threshold=90))


class TestPracticeSettings:

    def test_clamped(self):
        settings = PracticeSettings(min_words=-4, accuracy_threshold=140).clamped()
        assert settings.min_words == 0
        assert settings.accuracy_threshold == 100

    def test_clamped_low_threshold(self):
        assert PracticeSettings(accuracy_threshold=-1).clamped().accuracy_threshold == 0

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("YTWH_MIN_WORDS", "12")
        monkeypatch.setenv("YTWH_ACCURACY_THRESHOLD", "75")
        settings = PracticeSettings.from_env()
        assert settings.min_words == 12
        assert settings.accuracy_threshold == 75

    def test_from_env_rejects_non_numeric(self, monkeypatch):
        monkeypatch.setenv("YTWH_MIN_WORDS", "many")
        with pytest.raises(ValueError, match="YTWH_MIN_WORDS"):
            PracticeSettings.from_env()

    def test_import_falls_back_on_non_numeric(self, monkeypatch, caplog):
        monkeypatch.setenv("YTWH_MIN_WORDS", "many")
        monkeypatch.setenv("YTWH_ACCURACY_THRESHOLD", "high")
        # Load a separate copy so the shared module keeps its classes.
        spec = importlib.util.spec_from_file_location("_fresh_config", youtype.config.__file__)
        fresh = importlib.util.module_from_spec(spec)
        with caplog.at_level(logging.WARNING):
            spec.loader.exec_module(fresh)
        assert fresh.MIN_WORDS_PER_SUBTITLE == 8
        assert fresh.ACCURACY_THRESHOLD == 90
        assert "YTWH_MIN_WORDS" in caplog.text
        with pytest.raises(ValueError, match="YTWH_MIN_WORDS"):
            fresh.PracticeSettings.from_env()


class TestPracticeSession:

    def test_empty_segments_rejected(self):
        with pytest.raises(SubtitleParseError):
            PracticeSession([])

    def test_settings_are_clamped(self):
        seg = TimedSegment(start=0.0, duration=1.0, text="hi")
        session = PracticeSession([seg], PracticeSettings(accuracy_threshold=500))
        assert session.settings.accuracy_threshold == 100

    def test_initial_state(self, session):
        assert session.current_index == 0
        assert session.current.text == "Hello world"
        assert session.total == 2
        assert session.progress == 0.0
        assert not session.is_finished

    def test_correct_answer_marks_completed(self, session):
        attempt = session.submit("hello world")
        assert attempt.is_correct
        assert attempt.grade.accuracy == 100
        assert attempt.diff == []
        assert attempt.segment_index == 0
        assert session.completed == {0}
        assert session.progress == 0.5
        # the host decides when to move on
        assert session.current_index == 0

    def test_wrong_answer_has_diff(self, session):
        attempt = session.submit("hello there")
        assert not attempt.is_correct
        assert [d.expected for d in attempt.diff] == ["Hello", "world"]
        assert session.completed == set()

    def test_navigation(self, session):
        assert session.next()
        assert session.current_index == 1
        assert not session.next()
        assert session.current_index == 1
        assert session.previous()
        assert not session.previous()
        assert not session.go_to(5)
        assert session.go_to(1)

    def test_seek(self, session):
        assert session.seek(6.0) == 1
        assert session.current.text == "This is a test"
        assert session.seek(0.0) == 0

    def test_finish(self, session):
        session.submit("Hello world")
        session.next()
        session.submit("this is a test")
        assert session.is_finished
        assert session.progress == 1.0
        assert session.attempts == 2

    def test_mark_completed_ignores_out_of_range(self, session):
        session.mark_completed(7)
        assert session.completed == set()
