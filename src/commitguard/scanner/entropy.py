"""Distinct-character entropy estimate.

This is deliberately not Shannon entropy: the score is the number of distinct
characters in the candidate. The file (8) and message (10) thresholds are
calibrated against this metric.
"""

from __future__ import annotations

MIN_LENGTH = 16


def entropy_score(s: str, min_length: int = MIN_LENGTH) -> int:
    """Return the count of distinct characters in *s*, or 0 if *s* is too short."""
    if len(s) < min_length:
        return 0
    return len(set(s))


def exceeds_threshold(s: str, threshold: int, min_length: int = MIN_LENGTH) -> bool:
    """Return True if the entropy score of *s* is strictly above *threshold*."""
    return entropy_score(s, min_length) > threshold
