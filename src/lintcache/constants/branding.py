"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "lintcache"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: inspect and maintain persisted lint result caches"
NO_VALUE_LABEL: str = "(none)"
NEVER_RUN_LABEL: str = "never"
