"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from lintcache.cache import LinterCache
from lintcache.cache.serialization import as_optional_int
from lintcache.constants.branding import NEVER_RUN_LABEL, NO_VALUE_LABEL
from lintcache.constants.cache import CONFIGURATION_HASH_KEY, VERSION_KEY
from lintcache.config import configuration_hash, load_config
from lintcache.exceptions import ConfigError, LinterCacheError
from lintcache.io import load_json_file


def handle_inspect(args: argparse.Namespace) -> int:
    """Print a summary of a cache file under its own recorded version and hash."""
    try:
        document = load_json_file(args.cache)
    except (OSError, ValueError) as exc:
        print(f"Cache error: failed to read {args.cache} ({exc})", file=sys.stderr)
        return 2

    version = document.get(VERSION_KEY) if isinstance(document, dict) else None
    recorded_hash = as_optional_int(document.get(CONFIGURATION_HASH_KEY)) if isinstance(document, dict) else None
    try:
        cache = LinterCache.from_document(
            document,
            current_version=version if isinstance(version, str) else "",
            configuration_hash=recorded_hash,
        )
    except LinterCacheError as exc:
        print(f"Cache is not usable ({exc.reason}): {exc}", file=sys.stderr)
        return 1

    if args.file is not None:
        findings = cache.findings(args.file)
        if findings is None:
            print(f"No cached findings for {args.file}")
            return 0
        for finding in findings:
            print(finding.format())
        return 0

    last_run_date = cache.last_run_date
    files = cache.cached_files()
    print(f"Cache: {args.cache}")
    print(f"Version: {cache.version}")
    print(f"Configuration hash: {recorded_hash if recorded_hash is not None else NO_VALUE_LABEL}")
    print(f"Last run: {last_run_date.isoformat() if last_run_date is not None else NEVER_RUN_LABEL}")
    print(f"Files: {len(files)}")
    for file in files:
        findings = cache.findings(file)
        status = f"{len(findings)} finding(s)" if findings is not None else "no findings cached"
        print(f"  {file}: {status}")
    return 0


def handle_validate(args: argparse.Namespace) -> int:
    """Report whether a cache file can be reused for the given version and hash."""
    result = _load_strict(args)
    if isinstance(result, int):
        return result

    print(f"Cache is valid: {len(result.cached_files())} file entries.")
    return 0


def handle_clear(args: argparse.Namespace) -> int:
    """Clear cached findings for the given file keys and save the cache."""
    result = _load_strict(args)
    if isinstance(result, int):
        return result

    for file in args.files:
        result.clear_findings(file)

    try:
        result.save(args.cache)
    except OSError as exc:
        print(f"Cache error: failed to write {args.cache} ({exc})", file=sys.stderr)
        return 2

    print(f"Cleared {len(args.files)} file entries.")
    return 0


def _load_strict(args: argparse.Namespace) -> LinterCache | int:
    """Load a validated cache, or print the problem and return an exit code."""
    path: Path = args.cache
    try:
        config_hash = _expected_config_hash(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        return LinterCache.from_path(path, args.tool_version, config_hash)
    except LinterCacheError as exc:
        print(f"Cache is not usable ({exc.reason}): {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Cache error: failed to read {path} ({exc})", file=sys.stderr)
        return 2


def _expected_config_hash(args: argparse.Namespace) -> int | None:
    """Return the hash given on the command line or computed from ``--config``."""
    if args.config is None:
        return args.config_hash
    config_path = args.config.resolve()
    return configuration_hash(load_config(config_path.parent, config_path))
