"""Conversions between datetimes and reference-epoch timestamps."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

from lintcache.constants.cache import REFERENCE_EPOCH


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_reference_timestamp(moment: datetime) -> float:
    """Return seconds between the reference epoch and ``moment``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - REFERENCE_EPOCH).total_seconds()


def from_reference_timestamp(seconds: float) -> datetime | None:
    """Return the UTC datetime ``seconds`` after the reference epoch, if representable."""
    if not math.isfinite(seconds):
        return None
    try:
        return REFERENCE_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def as_timestamp(value: object) -> float | None:
    """Return ``value`` as a float timestamp when it is a JSON number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    try:
        return float(value)
    except OverflowError:
        return None
