"""Shared exception hierarchy for lintcache."""

from __future__ import annotations

from .base import LintCacheError
from .cache import (
    DifferentConfigurationError,
    DifferentVersionError,
    InconsistentLastRunDateError,
    InvalidFormatError,
    LinterCacheError,
)
from .config import ConfigError

__all__ = [
    "ConfigError",
    "DifferentConfigurationError",
    "DifferentVersionError",
    "InconsistentLastRunDateError",
    "InvalidFormatError",
    "LintCacheError",
    "LinterCacheError",
]
