"""Path exclusion, line allowlist, high-confidence markers and span selection."""

from __future__ import annotations

import re
from fnmatch import fnmatch
from pathlib import PurePosixPath
from typing import Iterable, Optional, Sequence, Tuple

from commitguard.rules.models import Rule

# Unanchored search on the staged path: version-control metadata, caches,
# dependency and build output, and env example files.
EXCLUDE_PATTERN = re.compile(
    r"\.git/|\.env\.example$|\.gitignore$|artifacts/|\.pre-commit-cache/"
    r"|node_modules/|\.venv/|venv/|__pycache__/|\.pytest_cache/|\.mypy_cache/"
    r"|dist/|build/"
)

# Line-level context that marks a match as benign. Case-insensitive.
ALLOWLIST_PATTERN = re.compile(
    r"YOUR_API_KEY_HERE|your-api-key-here|example\.com|test_key|demo_key"
    r"|placeholder|CHANGE_ME|REPLACE_ME"
    r"|api_key\s*=|API_KEY\s*=|access_token\s*=|secret\s*="
    r"|https?://[a-zA-Z0-9.-]+|api/v[0-9]+|/api/"
    r"|^\s*#.*(?:api|key|token|secret)"
    r"|^\s*//.*(?:api|key|token|secret)"
    r"|^\s*\*.*(?:api|key|token|secret)",
    re.IGNORECASE,
)

# Case-sensitive: a match containing any of these skips the entropy gate.
HIGH_CONFIDENCE_PATTERN = re.compile(r"BEGIN|PRIVATE|KEY|ghp_|sk_|AIza|AKIA")


def is_excluded_path(path: str, ignore_globs: Sequence[str] = ()) -> bool:
    """Return True if *path* must not be scanned at all."""
    if EXCLUDE_PATTERN.search(path):
        return True
    basename = PurePosixPath(path).name
    return any(fnmatch(path, g) or fnmatch(basename, g) for g in ignore_globs)


def is_allowlisted(line: str, extra: Iterable[re.Pattern[str]] = ()) -> bool:
    """Return True if the whole *line* reads as placeholder or documentation."""
    if ALLOWLIST_PATTERN.search(line):
        return True
    return any(p.search(line) for p in extra)


def is_high_confidence(matched: str) -> bool:
    return HIGH_CONFIDENCE_PATTERN.search(matched) is not None


def find_first_match(line: str, rules: Sequence[Rule]) -> Optional[Tuple[Rule, str]]:
    """Return the leftmost match on *line* across *rules*, preferring the longest.

    Mirrors ``grep -o`` on an alternation: the earliest start wins, then the
    longest span, then the rule registered first.
    """
    best: Optional[Tuple[Rule, re.Match[str]]] = None
    for rule in rules:
        m = rule.compiled_pattern.search(line)
        if m is None:
            continue
        if best is None:
            best = (rule, m)
            continue
        _, current = best
        if m.start() < current.start() or (
            m.start() == current.start() and len(m.group(0)) > len(current.group(0))
        ):
            best = (rule, m)
    if best is None:
        return None
    return best[0], best[1].group(0)
