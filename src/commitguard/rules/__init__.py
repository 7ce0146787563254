"""Rule engine — models, registry, built-in rules."""

from commitguard.rules.models import Rule
from commitguard.rules.registry import RuleRegistry, build_registry

__all__ = ["Rule", "RuleRegistry", "build_registry"]
