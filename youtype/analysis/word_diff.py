"""Word-level feedback for a graded answer.

A greedy two-pointer walk over the reference and answer tokens with one token
of lookahead. It handles the usual single extra or missing word; adjacent
transpositions and multi-word insertions come out as substitutions. The diff
is presentational only and never changes the verdict from ``grade_answer``.
"""

from __future__ import annotations

from typing import List

from youtype.util.types import WordComparison
from youtype.analysis.normalization import normalize_word


def _extra(word: str) -> WordComparison:
    return WordComparison(word=word, expected="", is_extra=True)


def _missing(expected: str) -> WordComparison:
    return WordComparison(word="", expected=expected, is_missing=True)


def diff_words(reference: str, user_input: str) -> List[WordComparison]:
    """Classify each token of ``user_input`` and ``reference`` for display.

    Tokens keep their original spelling in the output and are compared through
    ``normalize_word``. Every reference token appears once as ``expected`` and
    every answer token once as ``word``.
    """
    ref_words = reference.split()
    user_words = user_input.split()
    m = len(ref_words)
    n = len(user_words)

    result: List[WordComparison] = []
    i = 0
    j = 0
    while i < m or j < n:
        if i >= m:
            result.append(_extra(user_words[j]))
            j += 1
            continue
        if j >= n:
            result.append(_missing(ref_words[i]))
            i += 1
            continue

        ref_norm = normalize_word(ref_words[i])
        user_norm = normalize_word(user_words[j])
        if ref_norm == user_norm:
            result.append(WordComparison(word=user_words[j], expected=ref_words[i], is_correct=True))
            i += 1
            j += 1
        elif j + 1 < n and normalize_word(user_words[j + 1]) == ref_norm:
            # learner inserted a word before the expected one
            result.append(_extra(user_words[j]))
            j += 1
        elif i + 1 < m and normalize_word(ref_words[i + 1]) == user_norm:
            # learner skipped the expected word
            result.append(_missing(ref_words[i]))
            i += 1
        else:
            result.append(WordComparison(word=user_words[j], expected=ref_words[i]))
            i += 1
            j += 1

    return result
