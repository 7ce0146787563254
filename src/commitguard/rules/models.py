"""Rule data model — pattern stored as string, compiled at load time."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Optional

Scope = Literal["file", "message"]


@dataclass
class Rule:
    """A single detection pattern.

    ``scope`` decides which scanner uses the rule: ``file`` rules form the
    staged-file secret family, ``message`` rules are checked against commit
    messages. The compiled regex is built lazily on first access via
    ``compiled_pattern``.
    """

    id: str
    name: str
    description: str
    category: str  # token | key | cloud | generic | network | credential | identity
    pattern: str
    scope: Scope = "file"
    ignore_case: bool = False
    enabled: bool = True

    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        if self._compiled_pattern is None:
            flags = re.IGNORECASE if self.ignore_case else 0
            self._compiled_pattern = re.compile(self.pattern, flags)
        return self._compiled_pattern
