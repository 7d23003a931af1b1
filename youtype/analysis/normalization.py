"""Text normalization for answer comparison.

Both the grading engine and the word diff compare canonical forms rather than
raw text, so case and punctuation never count against the learner.
"""

import re


def _drop_punctuation(text: str) -> str:
    """Remove everything that's not a word character or whitespace."""
    # Examples: "Hello, world!" → "Hello world", "don't" → "dont", "twenty-one" → "twentyone"
    return re.sub(r"[^\w\s]", "", text)


def _normalize_whitespace(text: str) -> str:
    """Collapse multiple spaces into single spaces and trim."""
    # Examples: "Hello   world  " → "Hello world", "\t\nHi  there\n" → "Hi there"
    return re.sub(r"\s+", " ", text).strip()


def normalize_text(text: str) -> str:
    """Canonical form of a whole line: lowercase, no punctuation, single spaces.

    Apostrophes and hyphens count as punctuation, so "Don't stop" and
    "dont stop" normalize to the same string.
    """
    if not text:
        return ""
    s = text.lower()
    s = _drop_punctuation(s)
    return _normalize_whitespace(s)


def normalize_word(token: str) -> str:
    """Canonical form of a single, already split token."""
    # Examples: "Fox." → "fox", "it's" → "its", "--" → ""
    return re.sub(r"[^\w]", "", token.lower())
