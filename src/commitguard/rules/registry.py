"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

import dataclasses
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from commitguard.config.loader import ConfigError
from commitguard.config.schema import CommitGuardConfig
from commitguard.rules.models import Rule

logger = logging.getLogger(__name__)

CUSTOM_RULES_DIR = ".commitguard-rules"


class RuleRegistry:
    """Central store for all detection rules."""

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        # Registries own copies so enable/disable never leaks into module-level rules.
        self._rules[rule.id] = dataclasses.replace(rule)

    def register_many(self, rules: list[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def enabled_rules(self) -> List[Rule]:
        return [r for r in self._rules.values() if r.enabled]

    def file_rules(self) -> List[Rule]:
        """Rules forming the staged-file secret pattern family."""
        return [r for r in self.enabled_rules() if r.scope == "file"]

    def message_rules(self) -> List[Rule]:
        """Rules checked against commit messages."""
        return [r for r in self.enabled_rules() if r.scope == "message"]

    def message_rule(self, rule_id: str) -> Optional[Rule]:
        """Return an enabled message rule by id, or None when disabled/unknown."""
        rule = self._rules.get(rule_id)
        if rule is None or not rule.enabled or rule.scope != "message":
            return None
        return rule

    # ---- config filtering ----

    def apply_config(self, config: CommitGuardConfig) -> None:
        """Enable / disable rules based on config.rules."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        for rule in self._rules.values():
            # If an explicit enable-list exists, only those are enabled
            if enable_list:
                rule.enabled = rule.id in enable_list
            # Disable list always takes precedence
            if rule.id in disable_list:
                rule.enabled = False

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to load custom rules from {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
                raise ConfigError(f"{path}: every rule needs an 'id' and a 'pattern'")
            scope = entry.get("scope", "file")
            if scope not in ("file", "message"):
                raise ConfigError(f"{path}: rule {entry['id']} has unknown scope {scope!r}")
            rule = Rule(
                id=entry["id"],
                name=entry.get("name", entry["id"]),
                description=entry.get("description", ""),
                category=entry.get("category", "custom"),
                pattern=entry["pattern"],
                scope=scope,
                ignore_case=bool(entry.get("ignore_case", False)),
            )
            try:
                _ = rule.compiled_pattern
            except re.error as exc:
                raise ConfigError(f"{path}: rule {rule.id} has an invalid pattern: {exc}") from exc
            self.register(rule)
            count += 1
        logger.debug("Loaded %d custom rule(s) from %s", count, path)
        return count


def build_registry(config: CommitGuardConfig, repo_root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from commitguard.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)

    registry.load_custom_rules(repo_root / CUSTOM_RULES_DIR)

    registry.apply_config(config)

    # Force-compile patterns now (not inside the hot loop)
    for rule in registry.enabled_rules():
        _ = rule.compiled_pattern

    return registry
