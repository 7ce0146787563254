"""Configuration schema — dataclasses for every config section.

Defaults reproduce the built-in hook behaviour exactly; a repository without a
``.commitguard.toml`` scans with these values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class ScanConfig:
    entropy_threshold: int = 8  # flag when distinct-char score is strictly above
    min_length: int = 16  # shorter candidates score 0
    max_pattern_chars: int = 50
    max_context_chars: int = 100


@dataclass
class MessageConfig:
    entropy_threshold: int = 10
    min_length: int = 16
    max_ips: int = 5
    max_emails: int = 3
    max_entropy_chars: int = 20


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    redact: bool = False


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)


@dataclass
class IgnoreConfig:
    paths: List[str] = field(default_factory=list)


@dataclass
class AllowlistConfig:
    patterns: List[str] = field(default_factory=list)


@dataclass
class CIConfig:
    annotation_format: Literal["github", "none"] = "none"


@dataclass
class CommitGuardConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    message: MessageConfig = field(default_factory=MessageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    ignore: IgnoreConfig = field(default_factory=IgnoreConfig)
    allowlist: AllowlistConfig = field(default_factory=AllowlistConfig)
    ci: CIConfig = field(default_factory=CIConfig)
