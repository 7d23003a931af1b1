"""Unit tests for bilingual alignment."""

import pytest

from youtype.analysis.alignment import AlignmentConfig, align_translation
from youtype.util.types import TimedSegment


def _seg(start, text):
    return TimedSegment(start=start, duration=1.0, text=text)


class TestAlignTranslation:

    def test_exact_tick(self):
        aligned = align_translation([_seg(2.0, "hello")], [_seg(2.1, "hallo")])
        assert aligned[0].secondary_text == "hallo"

    def test_previous_tick_probed_before_next(self):
        primary = [_seg(2.0, "hello")]
        secondary = [_seg(2.5, "later"), _seg(1.5, "earlier")]
        assert align_translation(primary, secondary)[0].secondary_text == "earlier"

    def test_next_tick(self):
        aligned = align_translation([_seg(2.0, "hello")], [_seg(2.6, "hallo")])
        assert aligned[0].secondary_text == "hallo"

    def test_outside_window_is_unmatched(self):
        aligned = align_translation([_seg(2.0, "hello")], [_seg(3.1, "hallo")])
        assert aligned[0].secondary_text is None

    def test_rounds_half_up(self):
        # 1.25 rounds to the 1.5 tick, so a cue at 2.0 is one tick away
        aligned = align_translation([_seg(1.25, "hello")], [_seg(2.0, "hallo")])
        assert aligned[0].secondary_text == "hallo"

    def test_collision_last_write_wins(self):
        secondary = [_seg(2.0, "first"), _seg(2.2, "second")]
        assert align_translation([_seg(2.0, "x")], secondary)[0].secondary_text == "second"

    def test_collision_keep_closest(self):
        secondary = [_seg(2.0, "first"), _seg(2.2, "second")]
        config = AlignmentConfig(keep_closest=True)
        assert align_translation([_seg(2.0, "x")], secondary, config)[0].secondary_text == "first"

    def test_one_secondary_can_match_many_primaries(self):
        primary = [_seg(2.0, "a"), _seg(2.4, "b")]
        aligned = align_translation(primary, [_seg(2.1, "t")])
        assert [s.secondary_text for s in aligned] == ["t", "t"]

    def test_custom_tick(self):
        config = AlignmentConfig(tick_seconds=1.0)
        aligned = align_translation([_seg(2.0, "a")], [_seg(2.9, "t")], config)
        assert aligned[0].secondary_text == "t"

    def test_empty_secondary(self):
        primary = [_seg(1.0, "a")]
        assert align_translation(primary, []) == primary

    def test_stale_translation_cleared(self):
        primary = [TimedSegment(start=0.0, duration=1.0, text="a", secondary_text="old")]
        assert align_translation(primary, [])[0].secondary_text is None
        aligned = align_translation(primary, [_seg(9.0, "t")])
        assert aligned[0].secondary_text is None

    def test_inputs_not_mutated(self):
        primary = [_seg(1.0, "a")]
        aligned = align_translation(primary, [_seg(1.0, "t")])
        assert primary[0].secondary_text is None
        assert aligned[0] is not primary[0]
        assert aligned[0].start == pytest.approx(1.0)
