"""Core data models for lintcache."""

from .entities import Finding, Location

__all__ = ["Finding", "Location"]
