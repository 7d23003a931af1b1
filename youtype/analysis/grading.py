"""Answer grading by edit distance on normalized text.

The verdict for one attempt is an integer accuracy percentage derived from the
character-level Levenshtein distance between the normalized reference and the
normalized answer, compared against a pass threshold.
"""

from __future__ import annotations

import math

import numpy as np

from youtype.util.types import GradeResult
from youtype.analysis.normalization import normalize_text


DEFAULT_ACCURACY_THRESHOLD = 90


def levenshtein_distance(a: str, b: str) -> int:
    """Character-level edit distance with unit insert/delete/substitute costs."""
    m = len(a)
    n = len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    dp = np.zeros((m + 1, n + 1), dtype=np.int32)
    dp[:, 0] = np.arange(m + 1)
    dp[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]
            else:
                dp[i, j] = 1 + min(
                    dp[i - 1, j],      # deletion
                    dp[i, j - 1],      # insertion
                    dp[i - 1, j - 1],  # substitution
                )
    return int(dp[m, n])


def accuracy_percent(reference: str, answer: str) -> int:
    """Similarity of two already normalized strings as a rounded percentage."""
    if reference == answer:
        return 100
    max_len = max(len(reference), len(answer))
    if max_len == 0:
        return 100
    distance = levenshtein_distance(reference, answer)
    # round half up, e.g. 78.95 → 79, 82.5 → 83
    return int(math.floor((max_len - distance) / max_len * 100 + 0.5))


def grade_answer(
    reference: str,
    user_input: str,
    accuracy_threshold: int = DEFAULT_ACCURACY_THRESHOLD,
) -> GradeResult:
    """Grade a learner's answer against the reference line.

    Both texts are normalized first, so case, punctuation and spacing are
    ignored. Identical canonical forms score 100 without computing a distance.

    Args:
        reference: Subtitle text of the segment
        user_input: What the learner typed
        accuracy_threshold: Minimum accuracy (percent) to pass; not clamped here

    Returns:
        GradeResult with ``is_correct = accuracy >= accuracy_threshold``
    """
    accuracy = accuracy_percent(normalize_text(reference), normalize_text(user_input))
    return GradeResult(is_correct=accuracy >= accuracy_threshold, accuracy=accuracy)
