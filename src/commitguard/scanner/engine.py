"""Core scan engine — staged-file pipeline.

Exception safety: the scan loop wraps all operations so that matched
secret values never leak into tracebacks or error messages.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence

from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import Candidate, Classification, Finding, ScanResult
from commitguard.rules.models import Rule
from commitguard.rules.registry import RuleRegistry
from commitguard.scanner.classifier import Classifier
from commitguard.scanner.filters import find_first_match
from commitguard.scanner.sources import load_staged_source

logger = logging.getLogger(__name__)

FindingCallback = Callable[[Finding], None]


class ScanError(Exception):
    """Raised on internal scanner error (never contains secret values)."""


def scan_text(
    text: str,
    source: str,
    rules: Sequence[Rule],
    classifier: Classifier,
) -> Iterator[Finding]:
    """Yield one classified finding per line of *text* that matches any rule."""
    for line_no, line in enumerate(text.split("\n"), 1):
        hit = find_first_match(line, rules)
        if hit is None:
            continue
        rule, matched = hit
        candidate = Candidate(
            text=matched,
            source=source,
            rule_id=rule.id,
            line_no=line_no,
            line=line,
        )
        yield classifier.classify(candidate)


def scan_files(
    paths: Sequence[str],
    config: CommitGuardConfig,
    registry: RuleRegistry,
    repo_root: Path,
    *,
    on_finding: Optional[FindingCallback] = None,
) -> ScanResult:
    """Scan staged *paths* and return the aggregate result.

    *on_finding* is called for every reported finding as soon as it is
    classified, so a reporter can stream output while the scan runs.
    """
    classifier = Classifier.from_config(config)
    rules = registry.file_rules()
    ignore_globs = config.ignore.paths

    findings: List[Finding] = []
    skipped: List[str] = []
    counts: Counter[str] = Counter()
    files_checked = 0

    try:
        for path in paths:
            source = load_staged_source(path, repo_root, ignore_globs)
            if source.skipped:
                logger.debug("Skipping %s (%s)", path, source.skip_reason)
                skipped.append(f"{path} ({source.skip_reason})")
                if source.skip_reason == "excluded":
                    counts[Classification.EXCLUDED.value] += 1
                continue

            files_checked += 1
            assert source.text is not None
            for finding in scan_text(source.text, path, rules, classifier):
                counts[finding.classification.value] += 1
                logger.debug(
                    "%s:%d %s -> %s",
                    path,
                    finding.line_no,
                    finding.rule_id,
                    finding.classification.value,
                )
                if not finding.classification.is_reported:
                    continue
                findings.append(finding)
                if on_finding is not None:
                    on_finding(finding)
    except Exception:
        # Do not let candidate text reach a traceback
        found = len(findings)
        findings.clear()
        raise ScanError(
            f"Internal scanner error after {found} findings. "
            "Secrets have been scrubbed from this error."
        ) from None

    return ScanResult(
        findings=tuple(findings),
        staged_files=len(paths),
        files_checked=files_checked,
        skipped_files=tuple(skipped),
        classifications=dict(counts),
    )
