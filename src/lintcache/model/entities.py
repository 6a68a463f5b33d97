"""Immutable finding records produced by analysis and stored in the cache."""

from __future__ import annotations

from dataclasses import dataclass

from lintcache.types.common import Severity


@dataclass(frozen=True)
class Location:
    """Position of a finding inside an analyzed file.

    ``line`` and ``character`` are optional and independent: a finding may
    carry a line without a column.
    """

    file: str
    line: int | None = None
    character: int | None = None

    def format(self) -> str:
        """Render as ``file[:line[:character]]``."""
        rendered = self.file
        if self.line is not None:
            rendered = f"{rendered}:{self.line}"
            if self.character is not None:
                rendered = f"{rendered}:{self.character}"
        return rendered


@dataclass(frozen=True)
class Finding:
    """A single diagnostic emitted by a lint rule."""

    rule_id: str
    rule_name: str
    severity: Severity
    location: Location
    reason: str

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        return f"{self.location.format()}: {self.severity}: {self.reason} ({self.rule_id})"
