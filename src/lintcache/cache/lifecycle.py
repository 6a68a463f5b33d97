"""Cache location and load-or-start-fresh helpers for tool runs."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from lintcache.cache.store import LinterCache
from lintcache.config.fingerprint import configuration_hash
from lintcache.config.model import LintCacheConfig
from lintcache.constants.cache import CACHE_DIRNAME, CACHE_FILE_SUFFIX, CACHE_HOME_ENV, ROOT_DIGEST_LENGTH
from lintcache.exceptions import LinterCacheError

logger = logging.getLogger(__name__)


def default_cache_path(root: Path, version: str) -> Path:
    """Return the per-user cache file for ``root`` under the given tool version."""
    cache_home = os.environ.get(CACHE_HOME_ENV)
    base = Path(cache_home) if cache_home else Path.home() / ".cache"
    digest = hashlib.sha256(str(root.resolve()).encode("utf-8")).hexdigest()[:ROOT_DIGEST_LENGTH]
    return base / CACHE_DIRNAME / version / f"{digest}{CACHE_FILE_SUFFIX}"


def resolve_cache_path(root: Path, config: LintCacheConfig, version: str) -> Path:
    """Resolve the configured cache path, falling back to the per-user default."""
    if config.cache_path is None:
        return default_cache_path(root, version)
    if config.cache_path.is_absolute():
        return config.cache_path
    return root / config.cache_path


def load_cache(
    path: Path,
    *,
    current_version: str,
    configuration_hash: int | None = None,
) -> LinterCache:
    """Load the cache at ``path`` if it is usable, otherwise return a fresh cache."""
    if not path.is_file():
        logger.debug("No lint cache at %s; starting fresh", path)
        return LinterCache(current_version, configuration_hash)

    try:
        return LinterCache.from_path(path, current_version, configuration_hash)
    except LinterCacheError as exc:
        logger.info("Discarding lint cache at %s (%s): %s", path, exc.reason, exc)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read lint cache at %s (%s); starting fresh", path, exc)

    return LinterCache(current_version, configuration_hash)


def open_project_cache(
    root: Path,
    config: LintCacheConfig,
    *,
    current_version: str,
) -> tuple[LinterCache, Path] | None:
    """Load the project's cache as configured, or return None when caching is disabled."""
    if not config.use_cache:
        logger.debug("Lint cache disabled by configuration")
        return None

    path = resolve_cache_path(root, config, current_version)
    cache = load_cache(path, current_version=current_version, configuration_hash=configuration_hash(config))
    return cache, path
