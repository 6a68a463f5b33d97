"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "lintcache.yaml"

DEFAULT_INCLUDED: tuple[str, ...] = ("**/*",)

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "cache_path",
        "use_cache",
        "rules",
        "severity_overrides",
        "included",
        "excluded",
    }
)

VALID_SEVERITIES: frozenset[str] = frozenset({"warning", "error"})

# Leading bytes of the SHA-256 digest folded into the integer configuration hash.
CONFIGURATION_HASH_BYTES: int = 8
