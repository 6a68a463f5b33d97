"""Parallel per-file analysis backed by a ``LinterCache``.

A file is served from the cache when it has not been modified since the
cache's last run date and the cache holds findings for it. Every other file
is analyzed on a worker thread and its findings are written back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from lintcache.cache import LinterCache
from lintcache.model import Finding

logger = logging.getLogger(__name__)

type Analyzer = Callable[[Path], list[Finding]]


@dataclass(frozen=True)
class LintRunResult:
    """Findings per file together with cache statistics for one run."""

    findings_by_file: dict[str, tuple[Finding, ...]]
    cache_hits: int
    cache_misses: int
    warnings: tuple[str, ...] = ()

    @property
    def findings(self) -> tuple[Finding, ...]:
        return tuple(finding for findings in self.findings_by_file.values() for finding in findings)


def lint_files(
    paths: Sequence[Path],
    analyze: Analyzer,
    *,
    cache: LinterCache | None = None,
    max_workers: int | None = None,
) -> LintRunResult:
    """Analyze ``paths``, reusing cached findings for files unchanged since the last run.

    Repeated paths are analyzed once and reported once.
    """
    last_run_date = cache.last_run_date if cache is not None else None
    results: dict[str, tuple[Finding, ...]] = {}
    pending: list[Path] = []
    cache_hits = 0

    unique_paths = list(dict.fromkeys(paths))
    for path in unique_paths:
        cached = _cached_findings(cache, path, last_run_date)
        if cached is None:
            pending.append(path)
            continue
        cache_hits += 1
        results[str(path)] = tuple(cached)

    warnings: list[str] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: dict[Path, Future[list[Finding]]] = {
            path: executor.submit(_analyze_file, path, analyze, cache) for path in pending
        }
        for path, future in futures.items():
            try:
                results[str(path)] = tuple(future.result())
            except OSError as exc:
                warning = f"Failed to analyze {path} ({exc})"
                warnings.append(warning)
                logger.warning(warning)

    logger.debug("Lint run finished: %d cache hits, %d cache misses", cache_hits, len(pending))
    ordered = {str(path): results[str(path)] for path in unique_paths if str(path) in results}
    return LintRunResult(
        findings_by_file=ordered,
        cache_hits=cache_hits,
        cache_misses=len(pending),
        warnings=tuple(warnings),
    )


def _cached_findings(
    cache: LinterCache | None,
    path: Path,
    last_run_date: datetime | None,
) -> list[Finding] | None:
    if cache is None or last_run_date is None:
        return None
    try:
        modified_at = datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)
    except OSError:
        return None
    if modified_at >= last_run_date:
        return None
    return cache.findings(str(path))


def _analyze_file(path: Path, analyze: Analyzer, cache: LinterCache | None) -> list[Finding]:
    try:
        findings = analyze(path)
    except OSError:
        if cache is not None:
            cache.clear_findings(str(path))
        raise
    if cache is not None:
        cache.cache_findings(findings, str(path))
    return findings
