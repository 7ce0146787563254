"""Finding models and redaction."""

from commitguard.findings.models import (
    Candidate,
    Classification,
    Finding,
    MessageIssue,
    MessageScanResult,
    ScanResult,
)
from commitguard.findings.redactor import redact

__all__ = [
    "Candidate",
    "Classification",
    "Finding",
    "MessageIssue",
    "MessageScanResult",
    "ScanResult",
    "redact",
]
