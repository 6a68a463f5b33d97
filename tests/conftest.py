"""Shared pytest fixtures for cache tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from lintcache.model import Finding, Location


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding shipped JSON Schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture(scope="session")
def cache_schema(schemas_root: Path) -> dict[str, Any]:
    """Load the cache document JSON Schema."""
    return json.loads((schemas_root / "cache.schema.json").read_text(encoding="utf-8"))


@pytest.fixture()
def sample_findings() -> list[Finding]:
    """Two findings for ``foo.swift``; the second has no column."""
    return [
        Finding(
            rule_id="rule",
            rule_name="Some rule",
            severity="warning",
            location=Location(file="foo.swift", line=10, character=2),
            reason="Something is not right.",
        ),
        Finding(
            rule_id="rule",
            rule_name="Some rule",
            severity="error",
            location=Location(file="foo.swift", line=5, character=None),
            reason="Something is wrong.",
        ),
    ]
