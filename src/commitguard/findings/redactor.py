"""Truncation and redaction of matched values for output."""

from __future__ import annotations

REDACTED = "[REDACTED]"


def truncate(value: str, limit: int) -> str:
    """Return the first *limit* characters of *value*."""
    return value[:limit]


def redact(value: str, limit: int, *, full: bool = False) -> str:
    """Prepare a matched value or context line for display.

    Local runs show the first *limit* characters, which is what a developer
    needs to find the line. Full redaction (CI logs) never reveals any part.
    """
    if full:
        return REDACTED
    return truncate(value, limit)
