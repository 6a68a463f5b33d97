"""Thread-safe, persisted store of lint findings keyed by file path."""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from lintcache.cache.serialization import as_optional_int, finding_to_record, findings_from_records
from lintcache.constants.cache import (
    CACHE_TEMP_PREFIX,
    CACHE_TEMP_SUFFIX,
    CONFIGURATION_HASH_KEY,
    FILES_KEY,
    LAST_RUN_DATE_KEY,
    VERSION_KEY,
    VIOLATIONS_KEY,
)
from lintcache.exceptions import (
    DifferentConfigurationError,
    DifferentVersionError,
    InconsistentLastRunDateError,
    InvalidFormatError,
)
from lintcache.io import dump_json_text, load_json_file, write_text_atomic
from lintcache.model import Finding
from lintcache.types import CacheDocument, CacheFileEntry
from lintcache.utils.timestamps import (
    as_timestamp,
    from_reference_timestamp,
    to_reference_timestamp,
    utc_now,
)

logger = logging.getLogger(__name__)


class LinterCache:
    """Cached findings for one tool invocation.

    The store wraps the raw JSON document and reinterprets file entries on
    each read, so documents written by other releases keep any extra keys
    across a save. A single lock guards every access to the document.
    """

    def __init__(self, current_version: str, configuration_hash: int | None = None) -> None:
        document: CacheDocument = {"version": current_version, "files": {}}
        if configuration_hash is not None:
            document["configuration_hash"] = configuration_hash
        self._document: dict[str, Any] = dict(document)
        self._lock = threading.Lock()

    @classmethod
    def from_document(
        cls,
        document: object,
        current_version: str,
        configuration_hash: int | None = None,
    ) -> LinterCache:
        """Adopt a loaded cache document after checking it is usable for this run.

        Checks run in a fixed order and raise on the first failure:
        format, version, configuration hash, last run date.
        """
        if not isinstance(document, dict):
            raise InvalidFormatError(f"Cache document must be a mapping, got {type(document).__name__}")

        version = document.get(VERSION_KEY)
        if not isinstance(version, str) or version != current_version:
            raise DifferentVersionError(f"Cache version {version!r} does not match {current_version!r}")

        cached_hash = as_optional_int(document.get(CONFIGURATION_HASH_KEY))
        if cached_hash != configuration_hash:
            raise DifferentConfigurationError(
                f"Cache configuration hash {cached_hash!r} does not match {configuration_hash!r}"
            )

        last_run = as_timestamp(document.get(LAST_RUN_DATE_KEY))
        if last_run is not None and last_run > to_reference_timestamp(utc_now()):
            raise InconsistentLastRunDateError(f"Cache last run date {last_run!r} is in the future")

        cache = cls(current_version, configuration_hash)
        cache._document = document
        return cache

    @classmethod
    def from_path(
        cls,
        path: Path,
        current_version: str,
        configuration_hash: int | None = None,
    ) -> LinterCache:
        """Load a cache document from ``path``; read and parse errors propagate."""
        document = load_json_file(path)
        return cls.from_document(document, current_version, configuration_hash)

    @property
    def version(self) -> str | None:
        with self._lock:
            version = self._document.get(VERSION_KEY)
        return version if isinstance(version, str) else None

    @property
    def configuration_hash(self) -> int | None:
        with self._lock:
            value = self._document.get(CONFIGURATION_HASH_KEY)
        return as_optional_int(value)

    @property
    def last_run_date(self) -> datetime | None:
        """Time of the last successful save, or None when not recorded."""
        with self._lock:
            value = self._document.get(LAST_RUN_DATE_KEY)
        timestamp = as_timestamp(value)
        if timestamp is None:
            return None
        return from_reference_timestamp(timestamp)

    @last_run_date.setter
    def last_run_date(self, moment: datetime | None) -> None:
        timestamp = to_reference_timestamp(moment) if moment is not None else None
        with self._lock:
            if timestamp is None:
                self._document.pop(LAST_RUN_DATE_KEY, None)
            else:
                self._document[LAST_RUN_DATE_KEY] = timestamp

    def cache_findings(self, findings: Iterable[Finding], file: str) -> None:
        """Replace the cached findings for ``file``."""
        entry: CacheFileEntry = {"violations": [finding_to_record(finding) for finding in findings]}
        with self._lock:
            self._files_for_write()[file] = entry

    def clear_findings(self, file: str) -> None:
        """Forget the cached findings for ``file``.

        The entry becomes an empty list, which later reads treat as absent.
        """
        with self._lock:
            self._files_for_write()[file] = []

    def findings(self, file: str) -> list[Finding] | None:
        """Return cached findings for ``file``, or None when nothing usable is cached."""
        with self._lock:
            files = self._document.get(FILES_KEY)
            entry = files.get(file) if isinstance(files, dict) else None
            records = entry.get(VIOLATIONS_KEY) if isinstance(entry, dict) else None
            if not isinstance(records, list):
                return None
            records = list(records)
        return findings_from_records(records, file)

    def cached_files(self) -> list[str]:
        """Return the file keys present in the document, in stored order."""
        with self._lock:
            files = self._document.get(FILES_KEY)
            return list(files) if isinstance(files, dict) else []

    def to_document(self) -> dict[str, Any]:
        """Return a deep copy of the raw cache document."""
        with self._lock:
            return copy.deepcopy(self._document)

    def save(self, path: Path) -> None:
        """Stamp the last run date and write the document atomically to ``path``."""
        self.last_run_date = utc_now()

        with self._lock:
            text = dump_json_text(self._document)
            files = self._document.get(FILES_KEY)
            file_count = len(files) if isinstance(files, dict) else 0

        write_text_atomic(path=path, text=text, temp_prefix=CACHE_TEMP_PREFIX, temp_suffix=CACHE_TEMP_SUFFIX)
        logger.debug("Saved lint cache with %d file entries to %s", file_count, path)

    def _files_for_write(self) -> dict[str, Any]:
        files = self._document.get(FILES_KEY)
        if not isinstance(files, dict):
            files = {}
            self._document[FILES_KEY] = files
        return files
