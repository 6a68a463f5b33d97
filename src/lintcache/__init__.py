"""Persisted per-file result cache for lint tools."""

from __future__ import annotations

__version__ = "0.4.0"

from lintcache.cache import LinterCache, load_cache  # noqa: E402
from lintcache.model import Finding, Location  # noqa: E402

__all__ = ["Finding", "LinterCache", "Location", "__version__", "load_cache"]
