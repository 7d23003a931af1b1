"""Bilingual alignment of a translation track onto a primary subtitle track.

Two subtitle tracks for the same video are rarely cut at identical times. This
module performs an approximate time join: every secondary cue is bucketed by
its start time rounded to the nearest tick (0.5 s by default), and every
primary cue probes its own bucket and the two neighbouring ones.

Alignment runs on raw (unmerged) cues; merging afterwards concatenates the
matched translations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

from youtype.util.types import TimedSegment


logger = logging.getLogger(__name__)


@dataclass
class AlignmentConfig:
    """Configuration for the time-based translation join."""
    tick_seconds: float = 0.5
    # False: colliding secondary cues overwrite each other (last one wins).
    # True: keep all of them and pick the one closest in start time.
    keep_closest: bool = False


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _tick_index(start: float, tick_seconds: float) -> int:
    """Round ``start`` half-up to a tick and return the tick number."""
    # Examples (tick 0.5): 1.24 → 2 (1.0s), 1.25 → 3 (1.5s), 1.74 → 3 (1.5s)
    return math.floor(start / tick_seconds + 0.5)


def _build_lookup(
    secondary: Sequence[TimedSegment],
    config: AlignmentConfig,
) -> Dict[int, List[TimedSegment]]:
    lookup: Dict[int, List[TimedSegment]] = {}
    collisions = 0
    for seg in secondary:
        key = _tick_index(seg.start, config.tick_seconds)
        if key in lookup:
            collisions += 1
            if not config.keep_closest:
                lookup[key] = [seg]
                continue
            lookup[key].append(seg)
        else:
            lookup[key] = [seg]
    if collisions:
        logger.debug("%d secondary cue(s) share a tick with an earlier cue", collisions)
    return lookup


def _probe(
    lookup: Dict[int, List[TimedSegment]],
    seg: TimedSegment,
    config: AlignmentConfig,
) -> Optional[TimedSegment]:
    key = _tick_index(seg.start, config.tick_seconds)
    for probe in (key, key - 1, key + 1):
        candidates = lookup.get(probe)
        if not candidates:
            continue
        if len(candidates) == 1:
            return candidates[0]
        return min(candidates, key=lambda c: abs(c.start - seg.start))
    return None


# =============================================================================
# PUBLIC API
# =============================================================================

def align_translation(
    primary: Sequence[TimedSegment],
    secondary: Sequence[TimedSegment],
    config: Optional[AlignmentConfig] = None,
) -> List[TimedSegment]:
    """Annotate primary segments with the text of time-matched secondary segments.

    Args:
        primary: Cues of the track the learner transcribes
        secondary: Cues of the translation track
        config: Tick size and collision policy (defaults to 0.5 s, last wins)

    Returns:
        New segments, one per primary segment, with ``secondary_text`` set where
        a match was found within one tick. Unmatched lines get
        ``secondary_text = None``, dropping any translation from an earlier run.
    """
    if config is None:
        config = AlignmentConfig()

    lookup = _build_lookup(secondary, config)
    aligned: List[TimedSegment] = []
    matched = 0
    for seg in primary:
        hit = _probe(lookup, seg, config)
        if hit is None:
            aligned.append(replace(seg, secondary_text=None))
            continue
        matched += 1
        aligned.append(replace(seg, secondary_text=hit.text))

    logger.debug("Aligned %d of %d primary cues to a translation", matched, len(primary))
    return aligned
