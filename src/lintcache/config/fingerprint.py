"""Config fingerprinting for cache invalidation."""

from __future__ import annotations

import hashlib
import json

from lintcache.config.model import LintCacheConfig
from lintcache.constants.config import CONFIGURATION_HASH_BYTES


def configuration_hash(config: LintCacheConfig) -> int:
    """Return a stable integer fingerprint of the analysis-relevant settings.

    Cache location settings are excluded so moving the cache does not
    invalidate it.
    """
    payload = {
        "rules": list(config.rules),
        "severity_overrides": sorted(config.severity_overrides.items()),
        "included": list(config.included),
        "excluded": list(config.excluded),
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(blob).digest()
    return int.from_bytes(digest[:CONFIGURATION_HASH_BYTES], "big", signed=True)
