"""Typed cache payload structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from lintcache.types.common import JsonValue


class CachedViolation(TypedDict):
    """Serialized form of a single finding inside a file entry."""

    line: int | None
    character: int | None
    severity: str
    type: str
    rule_id: str
    reason: str


class CacheFileEntry(TypedDict):
    """Cached findings for a single analyzed file."""

    violations: list[CachedViolation]


class CacheDocument(TypedDict):
    """Top-level cache document persisted to disk.

    Cleared files hold an empty list instead of a ``CacheFileEntry``.
    """

    version: str
    configuration_hash: NotRequired[int]
    last_run_date: NotRequired[float]
    files: dict[str, CacheFileEntry | list[JsonValue]]
