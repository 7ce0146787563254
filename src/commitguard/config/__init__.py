"""Configuration loading, schema, and defaults."""

from commitguard.config.loader import ConfigError, load_config
from commitguard.config.schema import CommitGuardConfig

__all__ = [
    "CommitGuardConfig",
    "ConfigError",
    "load_config",
]
