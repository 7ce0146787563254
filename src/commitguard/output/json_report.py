"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import MessageScanResult, ScanResult
from commitguard.findings.redactor import REDACTED, redact

REPORT_VERSION = "1.0"


def scan_to_dict(result: ScanResult, config: CommitGuardConfig) -> Dict[str, Any]:
    """Convert a staged-file ScanResult to a JSON-serialisable dict."""
    full = config.output.redact
    findings_list: List[Dict[str, Any]] = []
    for f in result.findings:
        findings_list.append({
            "rule": f.rule_id,
            "file": f.file,
            "line": f.line_no,
            "classification": f.classification.value,
            "value": redact(f.candidate.text, config.scan.max_pattern_chars, full=full),
            "context": redact(f.candidate.line, config.scan.max_context_chars, full=full),
            "entropy": f.entropy,  # 0 for high-confidence matches, which skip scoring
        })

    return {
        "version": REPORT_VERSION,
        "mode": "files",
        "staged_files": result.staged_files,
        "files_checked": result.files_checked,
        "total_findings": result.total_findings,
        "blocked": result.blocked,
        "findings": findings_list,
        "skipped_files": list(result.skipped_files),
        "classifications": dict(sorted(result.classifications.items())),
    }


def message_to_dict(result: MessageScanResult, config: CommitGuardConfig) -> Dict[str, Any]:
    """Convert a MessageScanResult to a JSON-serialisable dict."""
    full = config.output.redact
    issues = [
        {
            "rule": issue.rule_id,
            "description": issue.title if full else issue.description,
        }
        for issue in result.issues
    ]
    warnings: List[Dict[str, Any]] = []
    if result.emails:
        warnings.append({
            "rule": "EMAIL_ADDRESS",
            "values": [REDACTED] * len(result.emails) if full else list(result.emails),
        })
    return {
        "version": REPORT_VERSION,
        "mode": "message",
        "scanned": result.scanned,
        "blocked": result.blocked,
        "issues": issues,
        "warnings": warnings,
    }


def render_scan(result: ScanResult, config: CommitGuardConfig) -> str:
    """Return formatted JSON string for a staged-file scan."""
    return json.dumps(scan_to_dict(result, config), indent=2)


def render_message(result: MessageScanResult, config: CommitGuardConfig) -> str:
    """Return formatted JSON string for a commit-message scan."""
    return json.dumps(message_to_dict(result, config), indent=2)
