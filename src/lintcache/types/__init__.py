"""Shared type aliases for lintcache."""

from .cache import CacheDocument, CachedViolation, CacheFileEntry
from .common import JsonObject, JsonScalar, JsonValue, Severity

__all__ = [
    "CacheDocument",
    "CacheFileEntry",
    "CachedViolation",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Severity",
]
