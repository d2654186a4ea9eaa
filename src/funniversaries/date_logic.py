from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from funniversaries.models import (
    SECONDS_PER_UNIT,
    SELECT_ALL,
    SELECT_PAST,
    SELECTORS,
    UNITS,
    Anniversary,
)

LOGGER = logging.getLogger(__name__)


def signed_duration(count: int, unit: str) -> timedelta:
    """Convert ``count`` units into a timedelta.

    Raises OverflowError when the result does not fit in a timedelta.
    """
    try:
        unit_seconds = SECONDS_PER_UNIT[unit]
    except KeyError as exc:
        raise ValueError(f"Unsupported unit: {unit}") from exc
    return timedelta(seconds=count * unit_seconds)


def _require_aware(value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Reference instant must be timezone-aware")


def _anniversaries_for_unit(reference: datetime, counts: Sequence[int], unit: str) -> list[Anniversary]:
    anniversaries: list[Anniversary] = []

    for count in counts:
        try:
            target = (reference + signed_duration(count, unit)).astimezone(timezone.utc)
        except OverflowError:
            LOGGER.warning("Skipping %s %s: out of representable range", count, unit)
            continue
        anniversaries.append(Anniversary(count=count, unit=unit, date=target))

    return anniversaries


def generate_anniversaries(reference: datetime, counts: Sequence[int]) -> list[Anniversary]:
    """Build one anniversary per (unit, count), seconds first, then days, then weeks.

    Dates are normalized to UTC. Entries whose date falls outside the
    datetime range are skipped.
    """
    _require_aware(reference)

    anniversaries: list[Anniversary] = []
    for unit in UNITS:
        anniversaries.extend(_anniversaries_for_unit(reference, counts, unit))
    return anniversaries


def filter_anniversaries(entries: Iterable[Anniversary], now: datetime, want_past: bool) -> list[Anniversary]:
    if want_past:
        return [entry for entry in entries if entry.date < now]
    return [entry for entry in entries if entry.date >= now]


def find_anniversaries(
    reference: datetime,
    now: datetime,
    selector: str,
    counts: Sequence[int],
) -> list[Anniversary]:
    if selector not in SELECTORS:
        raise ValueError(f"Unsupported selector: {selector}")

    anniversaries = generate_anniversaries(reference, counts)
    if selector == SELECT_ALL:
        return anniversaries
    return filter_anniversaries(anniversaries, now, want_past=selector == SELECT_PAST)
