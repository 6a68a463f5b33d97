"""Root exception type for lintcache."""

from __future__ import annotations


class LintCacheError(Exception):
    """Base class for all lintcache errors."""
