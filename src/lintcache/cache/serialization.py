"""Conversion between findings and their cached record form."""

from __future__ import annotations

import logging
from typing import cast

from lintcache.constants.config import VALID_SEVERITIES
from lintcache.model import Finding, Location
from lintcache.types import CachedViolation, Severity

logger = logging.getLogger(__name__)


def finding_to_record(finding: Finding) -> CachedViolation:
    """Serialize a finding into the record stored under a file entry."""
    return {
        "line": finding.location.line,
        "character": finding.location.character,
        "severity": finding.severity,
        "type": finding.rule_name,
        "rule_id": finding.rule_id,
        "reason": finding.reason,
    }


def finding_from_record(record: object, file: str) -> Finding | None:
    """Rebuild a finding from a cached record, or return None when it is incomplete.

    Severity, rule id, rule name and reason are required. ``line`` and
    ``character`` fall back to ``None`` when missing or not integers.
    """
    if not isinstance(record, dict):
        return None

    severity = as_severity(record.get("severity"))
    rule_name = record.get("type")
    rule_id = record.get("rule_id")
    reason = record.get("reason")
    if severity is None:
        return None
    if not isinstance(rule_name, str) or not isinstance(rule_id, str) or not isinstance(reason, str):
        return None

    return Finding(
        rule_id=rule_id,
        rule_name=rule_name,
        severity=severity,
        location=Location(
            file=file,
            line=as_optional_int(record.get("line")),
            character=as_optional_int(record.get("character")),
        ),
        reason=reason,
    )


def findings_from_records(records: list[object], file: str) -> list[Finding]:
    """Rebuild every readable finding, dropping records that cannot be parsed."""
    findings: list[Finding] = []
    for record in records:
        finding = finding_from_record(record, file)
        if finding is None:
            logger.debug("Dropping unreadable cached finding for %s", file)
            continue
        findings.append(finding)
    return findings


def as_severity(value: object) -> Severity | None:
    """Return ``value`` as a severity when it names a known one."""
    if isinstance(value, str) and value in VALID_SEVERITIES:
        return cast(Severity, value)
    return None


def as_optional_int(value: object) -> int | None:
    """Return ``value`` when it is a JSON integer; booleans do not count."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
