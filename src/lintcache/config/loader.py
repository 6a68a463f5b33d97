"""Config loading and normalization for lintcache."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml

from lintcache.config.model import LintCacheConfig
from lintcache.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME, DEFAULT_INCLUDED, VALID_SEVERITIES
from lintcache.exceptions import ConfigError
from lintcache.types import Severity


def load_config(root: Path, config_path: Path | None = None) -> LintCacheConfig:
    """Load and validate settings from ``lintcache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return LintCacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown_keys = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown_keys:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown_keys)}")

    cache_path_raw = raw.get("cache_path")
    if cache_path_raw is not None and (not isinstance(cache_path_raw, str) or not cache_path_raw.strip()):
        raise ConfigError("cache_path must be a non-empty string")

    use_cache = raw.get("use_cache", True)
    if not isinstance(use_cache, bool):
        raise ConfigError("use_cache must be a boolean")

    return LintCacheConfig(
        cache_path=Path(cache_path_raw).expanduser() if cache_path_raw is not None else None,
        use_cache=use_cache,
        rules=tuple(_ensure_string_list(raw.get("rules", []), "rules")),
        severity_overrides=_normalize_severity_overrides(raw.get("severity_overrides", {})),
        included=tuple(_ensure_string_list(raw.get("included", list(DEFAULT_INCLUDED)), "included")),
        excluded=tuple(_ensure_string_list(raw.get("excluded", []), "excluded")),
    )


def _ensure_string_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list of strings")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must contain only strings")
    return [item.strip() for item in value if item.strip()]


def _normalize_severity_overrides(value: Any) -> dict[str, Severity]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("severity_overrides must be a mapping")

    overrides: dict[str, Severity] = {}
    for rule_id, severity in value.items():
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise ConfigError("severity_overrides keys must be non-empty rule ids")
        if not isinstance(severity, str) or severity not in VALID_SEVERITIES:
            raise ConfigError(
                f"severity_overrides.{rule_id} must be one of {sorted(VALID_SEVERITIES)}, got {severity!r}"
            )
        overrides[rule_id.strip()] = cast(Severity, severity)
    return overrides
