"""Configuration loading and fingerprinting for lintcache."""

from __future__ import annotations

from lintcache.config.fingerprint import configuration_hash
from lintcache.config.loader import load_config
from lintcache.config.model import LintCacheConfig

__all__ = ["LintCacheConfig", "configuration_hash", "load_config"]
