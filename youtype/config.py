"""Project-level configuration for practice defaults.

Defaults can be overridden via environment variables:
- YTWH_MIN_WORDS: minimum words per practice segment (defaults to 8)
- YTWH_ACCURACY_THRESHOLD: accuracy percent needed to pass (defaults to 90)

The core functions never validate these values; ``PracticeSettings.clamped``
is applied by hosts (the CLI, practice sessions) before calling them.
"""

import logging
import os
from dataclasses import dataclass
from typing import Final


logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
	"""Read an integer environment variable, rejecting non-numeric values."""
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return default
	try:
		return int(raw)
	except ValueError:
		raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_int_or_default(name: str, default: int) -> int:
	"""Like ``_env_int`` but falls back to ``default`` with a warning on bad input."""
	try:
		return _env_int(name, default)
	except ValueError as e:
		logger.warning("%s; using default %d", e, default)
		return default


_DEFAULT_MIN_WORDS: Final[int] = 8
_DEFAULT_ACCURACY_THRESHOLD: Final[int] = 90

MIN_WORDS_PER_SUBTITLE: Final[int] = _env_int_or_default("YTWH_MIN_WORDS", _DEFAULT_MIN_WORDS)
ACCURACY_THRESHOLD: Final[int] = _env_int_or_default("YTWH_ACCURACY_THRESHOLD", _DEFAULT_ACCURACY_THRESHOLD)


@dataclass
class PracticeSettings:
	"""Host-side settings for one practice run."""
	min_words: int = MIN_WORDS_PER_SUBTITLE
	accuracy_threshold: int = ACCURACY_THRESHOLD

	@classmethod
	def from_env(cls) -> "PracticeSettings":
		"""Settings from the current environment (read at call time)."""
		return cls(
			min_words=_env_int("YTWH_MIN_WORDS", _DEFAULT_MIN_WORDS),
			accuracy_threshold=_env_int("YTWH_ACCURACY_THRESHOLD", _DEFAULT_ACCURACY_THRESHOLD),
		)

	def clamped(self) -> "PracticeSettings":
		"""Copy with ``min_words >= 0`` and ``accuracy_threshold`` in [0, 100]."""
		return PracticeSettings(
			min_words=max(0, self.min_words),
			accuracy_threshold=min(100, max(0, self.accuracy_threshold)),
		)
