"""Configuration-related exceptions."""

from __future__ import annotations

from lintcache.exceptions.base import LintCacheError


class ConfigError(LintCacheError, ValueError):
    """Raised when lintcache settings are invalid."""
