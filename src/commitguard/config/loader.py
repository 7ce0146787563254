"""Load and merge configuration from .commitguard.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional, get_args, get_origin, get_type_hints

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from commitguard.config.schema import (
    OUTPUT_FORMATS,
    AllowlistConfig,
    CIConfig,
    CommitGuardConfig,
    IgnoreConfig,
    MessageConfig,
    OutputConfig,
    RulesConfig,
    ScanConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".commitguard.toml"


class ConfigError(Exception):
    """Raised when config or custom rules are malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, val)
        return None


def _merge_env_overrides(cfg: CommitGuardConfig) -> None:
    """Apply COMMITGUARD_* environment variable overrides."""
    if val := os.environ.get("COMMITGUARD_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if (threshold := _env_int("COMMITGUARD_ENTROPY_THRESHOLD")) is not None:
        cfg.scan.entropy_threshold = threshold
    if (threshold := _env_int("COMMITGUARD_MESSAGE_ENTROPY_THRESHOLD")) is not None:
        cfg.message.entropy_threshold = threshold
    if val := os.environ.get("COMMITGUARD_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if val := os.environ.get("COMMITGUARD_IGNORE_PATHS"):
        cfg.ignore.paths.extend(p.strip() for p in val.split(os.pathsep) if p.strip())


def _check_value(section: str, name: str, value: Any, hint: Any) -> None:
    """Raise ConfigError unless *value* fits the annotated field type."""
    origin = get_origin(hint)
    if origin is Literal:
        allowed = get_args(hint)
        if value not in allowed:
            choices = ", ".join(repr(a) for a in allowed)
            raise ConfigError(f"[{section}] {name} must be one of {choices}, got {value!r}")
        return
    if origin is list:
        (item,) = get_args(hint)
        if not isinstance(value, list) or not all(isinstance(v, item) for v in value):
            raise ConfigError(f"[{section}] {name} must be a list of {item.__name__}, got {value!r}")
        return
    # bool is an int subclass; keep the two apart
    if isinstance(value, bool) != (hint is bool) or not isinstance(value, hint):
        raise ConfigError(f"[{section}] {name} must be {hint.__name__}, got {value!r}")


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(raw).__name__}")
    hints = get_type_hints(cls)
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    for name, value in filtered.items():
        _check_value(section, name, value, hints[name])
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> CommitGuardConfig:
    """Load, validate, and return a CommitGuardConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = CommitGuardConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = CommitGuardConfig(
            version=str(raw.get("version", "1.0")),
            scan=_build_section(raw, ScanConfig, "scan"),
            message=_build_section(raw, MessageConfig, "message"),
            output=_build_section(raw, OutputConfig, "output"),
            rules=_build_section(raw, RulesConfig, "rules"),
            ignore=_build_section(raw, IgnoreConfig, "ignore"),
            allowlist=_build_section(raw, AllowlistConfig, "allowlist"),
            ci=_build_section(raw, CIConfig, "ci"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format in {config_path}: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
