"""Decision engine for staged-file candidates.

Each candidate ends in exactly one terminal state::

    Extracted -> Allowlisted
    Extracted -> HighConfidence
    Extracted -> EntropyScored -> EntropyFlagged | EntropyClear

Source-level exclusion happens before extraction (see ``sources``).
"""

from __future__ import annotations

import re
from typing import Iterable, Tuple

from commitguard.config.loader import ConfigError
from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import Candidate, Classification, Finding
from commitguard.scanner.entropy import MIN_LENGTH, entropy_score
from commitguard.scanner.filters import is_allowlisted, is_high_confidence


class Classifier:
    """Immutable, stateless classifier built once per run."""

    __slots__ = ("_entropy_threshold", "_min_length", "_extra_allowlist")

    def __init__(
        self,
        entropy_threshold: int = 8,
        min_length: int = MIN_LENGTH,
        extra_allowlist: Iterable[re.Pattern[str]] = (),
    ) -> None:
        self._entropy_threshold = entropy_threshold
        self._min_length = min_length
        self._extra_allowlist: Tuple[re.Pattern[str], ...] = tuple(extra_allowlist)

    @classmethod
    def from_config(cls, config: CommitGuardConfig) -> "Classifier":
        try:
            extra = [re.compile(p, re.IGNORECASE) for p in config.allowlist.patterns]
        except re.error as exc:
            raise ConfigError(f"Invalid allowlist pattern: {exc}") from exc
        return cls(
            entropy_threshold=config.scan.entropy_threshold,
            min_length=config.scan.min_length,
            extra_allowlist=extra,
        )

    @property
    def entropy_threshold(self) -> int:
        return self._entropy_threshold

    def classify(self, candidate: Candidate) -> Finding:
        """Return the terminal classification of *candidate*."""
        if is_allowlisted(candidate.line, self._extra_allowlist):
            return Finding(candidate, Classification.ALLOWLISTED)

        if is_high_confidence(candidate.text):
            return Finding(candidate, Classification.HIGH_CONFIDENCE)

        score = entropy_score(candidate.text, self._min_length)
        if score > self._entropy_threshold:
            return Finding(candidate, Classification.ENTROPY_FLAGGED, entropy=score)
        return Finding(candidate, Classification.ENTROPY_CLEAR, entropy=score)
