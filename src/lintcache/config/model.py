"""Typed lintcache settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lintcache.constants.config import DEFAULT_INCLUDED
from lintcache.types import Severity


@dataclass(frozen=True)
class LintCacheConfig:
    """Settings that control cache location and the analysis fingerprint."""

    cache_path: Path | None = None
    use_cache: bool = True
    rules: tuple[str, ...] = ()
    severity_overrides: dict[str, Severity] = field(default_factory=dict)
    included: tuple[str, ...] = DEFAULT_INCLUDED
    excluded: tuple[str, ...] = ()
