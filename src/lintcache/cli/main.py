"""CLI entrypoint for lintcache."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from lintcache import __version__
from lintcache.cli.handlers import handle_clear, handle_inspect, handle_validate
from lintcache.constants.branding import BRAND_NAME, CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="Summarize a cache file under its recorded version and hash")
    inspect.add_argument("cache", type=Path, help="Cache file path")
    inspect.add_argument("--file", default=None, help="Print cached findings for this file key")

    validate = subparsers.add_parser("validate", help="Check whether a cache file is usable for a run")
    validate.add_argument("cache", type=Path, help="Cache file path")
    _add_identity_arguments(validate)

    clear = subparsers.add_parser("clear", help="Clear cached findings for files and save")
    clear.add_argument("cache", type=Path, help="Cache file path")
    clear.add_argument("files", nargs="+", help="File keys to clear")
    _add_identity_arguments(clear)

    return parser


def _add_identity_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-t", "--tool-version", required=True, help="Tool version the cache must match")
    expected_hash = parser.add_mutually_exclusive_group()
    expected_hash.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file whose configuration hash the cache must match",
    )
    expected_hash.add_argument(
        "-c",
        "--config-hash",
        type=int,
        default=None,
        help="Configuration hash the cache must match (omit when none was recorded)",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "inspect":
        return handle_inspect(args)
    if args.command == "validate":
        return handle_validate(args)
    if args.command == "clear":
        return handle_clear(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
