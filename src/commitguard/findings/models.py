"""Finding data models.

All values are transient and live for one invocation only. Results are frozen
once the scan completes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class Classification(str, Enum):
    """Terminal state of a candidate in the decision engine."""

    HIGH_CONFIDENCE = "high_confidence"
    ENTROPY_FLAGGED = "entropy_flagged"
    ENTROPY_CLEAR = "entropy_clear"
    ALLOWLISTED = "allowlisted"
    EXCLUDED = "excluded"

    @property
    def is_reported(self) -> bool:
        return self in (Classification.HIGH_CONFIDENCE, Classification.ENTROPY_FLAGGED)


@dataclass(frozen=True)
class Candidate:
    """A substring that matched a secret-shaped pattern."""

    text: str
    source: str  # staged file path
    rule_id: str
    line_no: Optional[int] = None  # file mode only
    line: str = ""  # full line, for context


@dataclass(frozen=True)
class Finding:
    """A candidate together with the classification it ended in."""

    candidate: Candidate
    classification: Classification
    entropy: int = 0

    @property
    def file(self) -> str:
        return self.candidate.source

    @property
    def line_no(self) -> int:
        return self.candidate.line_no or 0

    @property
    def rule_id(self) -> str:
        return self.candidate.rule_id


@dataclass(frozen=True)
class ScanResult:
    """Complete result of a staged-file scan."""

    findings: Tuple[Finding, ...] = ()
    staged_files: int = 0
    files_checked: int = 0
    skipped_files: Tuple[str, ...] = ()
    classifications: Dict[str, int] = field(default_factory=dict)

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def blocked(self) -> bool:
        return self.total_findings > 0


@dataclass(frozen=True)
class MessageIssue:
    """A blocking problem found in a commit message."""

    rule_id: str
    title: str  # never contains message text
    detail: str = ""  # excerpt shown after the title locally

    @property
    def description(self) -> str:
        return f"{self.title}: {self.detail}" if self.detail else self.title


@dataclass(frozen=True)
class MessageScanResult:
    """Complete result of a commit-message scan."""

    issues: Tuple[MessageIssue, ...] = ()
    emails: Tuple[str, ...] = ()  # non-blocking warning
    scanned: bool = False  # False when no message was obtainable

    @property
    def blocked(self) -> bool:
        return bool(self.issues)
