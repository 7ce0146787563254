"""Commit-message scanner.

Unlike the file scanner there is no allowlist here: the checks are coarser
and each one contributes at most one issue. Email addresses only produce a
warning and never block.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import MessageIssue, MessageScanResult
from commitguard.rules.builtin.message import ALL_MESSAGE_RULES
from commitguard.rules.models import Rule
from commitguard.rules.registry import RuleRegistry
from commitguard.scanner.entropy import entropy_score

logger = logging.getLogger(__name__)

_BUILTIN_IDS = frozenset(r.id for r in ALL_MESSAGE_RULES)


def _all_matches(rule: Rule, lines: Sequence[str]) -> List[str]:
    """Every match of *rule* on every line, in order (``grep -o``)."""
    return [m.group(0) for line in lines for m in rule.compiled_pattern.finditer(line)]


def _any_line_matches(rule: Rule, lines: Sequence[str]) -> bool:
    return any(rule.compiled_pattern.search(line) for line in lines)


def _unique_sorted(values: Sequence[str], limit: int) -> List[str]:
    return sorted(set(values))[:limit]


def scan_message(
    text: str,
    config: CommitGuardConfig,
    registry: RuleRegistry,
) -> MessageScanResult:
    """Check one commit message and return its blocking issues and warnings."""
    if not text.strip():
        return MessageScanResult()

    msg_cfg = config.message
    lines = text.splitlines()
    issues: List[MessageIssue] = []

    rule = registry.message_rule("PRIVATE_IP")
    if rule is not None:
        ips = _unique_sorted(_all_matches(rule, lines), msg_cfg.max_ips)
        if ips:
            issues.append(MessageIssue(rule.id, "IP addresses detected", ", ".join(ips)))

    rule = registry.message_rule("PASSWORD_ASSIGNMENT")
    if rule is not None and _any_line_matches(rule, lines):
        issues.append(MessageIssue(rule.id, "Password or credential pattern detected"))

    rule = registry.message_rule("CREDENTIAL_ASSIGNMENT")
    if rule is not None and _any_line_matches(rule, lines):
        issues.append(MessageIssue(rule.id, "API key or token pattern detected"))

    rule = registry.message_rule("HIGH_ENTROPY_BLOB")
    if rule is not None:
        for match in _all_matches(rule, lines):
            if entropy_score(match, msg_cfg.min_length) > msg_cfg.entropy_threshold:
                shown = match[: msg_cfg.max_entropy_chars]
                issues.append(
                    MessageIssue(rule.id, "High-entropy string detected (potential secret)", f"{shown}...")
                )
                break  # only the first hit is reported

    for custom in registry.message_rules():
        if custom.id in _BUILTIN_IDS:
            continue
        if _any_line_matches(custom, lines):
            issues.append(MessageIssue(custom.id, f"{custom.name} detected"))

    emails: List[str] = []
    rule = registry.message_rule("EMAIL_ADDRESS")
    if rule is not None:
        emails = _unique_sorted(_all_matches(rule, lines), msg_cfg.max_emails)

    logger.debug("Commit message: %d issue(s), %d email(s)", len(issues), len(emails))
    return MessageScanResult(issues=tuple(issues), emails=tuple(emails), scanned=True)
