"""Constants for the persisted lint cache document and its location."""

from __future__ import annotations

from datetime import UTC, datetime

# Timestamps in cache documents count seconds from this epoch, not the Unix epoch.
REFERENCE_EPOCH: datetime = datetime(2001, 1, 1, tzinfo=UTC)

CACHE_TEMP_PREFIX: str = ".lintcache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
CACHE_FILE_SUFFIX: str = ".json"
CACHE_DIRNAME: str = "lintcache"
CACHE_HOME_ENV: str = "XDG_CACHE_HOME"
ROOT_DIGEST_LENGTH: int = 16

VERSION_KEY: str = "version"
CONFIGURATION_HASH_KEY: str = "configuration_hash"
LAST_RUN_DATE_KEY: str = "last_run_date"
FILES_KEY: str = "files"
VIOLATIONS_KEY: str = "violations"
