"""Reasons a persisted lint cache cannot be reused for the current run.

Each error is raised while constructing a ``LinterCache`` from a loaded
document. Callers are expected to discard the document and start from a
fresh cache; ``reason`` gives a stable token for logs and CLI output.
"""

from __future__ import annotations

from typing import ClassVar

from lintcache.exceptions.base import LintCacheError


class LinterCacheError(LintCacheError, ValueError):
    """Base class for cache invalidation errors."""

    reason: ClassVar[str] = "invalid_cache"


class InvalidFormatError(LinterCacheError):
    """Raised when the document's top-level value is not a mapping."""

    reason: ClassVar[str] = "invalid_format"


class DifferentVersionError(LinterCacheError):
    """Raised when the cache was written by another tool version."""

    reason: ClassVar[str] = "different_version"


class DifferentConfigurationError(LinterCacheError):
    """Raised when the cache was written under another configuration."""

    reason: ClassVar[str] = "different_configuration"


class InconsistentLastRunDateError(LinterCacheError):
    """Raised when the recorded last run lies in the future."""

    reason: ClassVar[str] = "inconsistent_last_run_date"
