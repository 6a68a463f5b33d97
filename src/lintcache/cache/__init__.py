"""Persisted lint result cache."""

from .lifecycle import default_cache_path, load_cache, open_project_cache, resolve_cache_path
from .store import LinterCache

__all__ = ["LinterCache", "default_cache_path", "load_cache", "open_project_cache", "resolve_cache_path"]
