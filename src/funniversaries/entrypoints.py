from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from funniversaries.date_logic import find_anniversaries
from funniversaries.models import DEFAULT_COUNTS, SELECT_ALL, SELECT_FUTURE, SELECT_PAST, Anniversary


class ParseError(ValueError):
    pass


def parse_reference_instant(raw_text: str) -> datetime:
    """Parse an RFC 3339 timestamp such as ``1989-06-19T00:00:00.000Z`` into UTC.

    A ``Z`` or numeric offset suffix is required.
    """
    value = raw_text.strip()
    if not value:
        raise ParseError("Reference date must not be empty")

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ParseError(f"Invalid reference date: {raw_text!r}") from exc

    if parsed.tzinfo is None:
        raise ParseError(f"Reference date must include a Z or numeric offset: {raw_text!r}")

    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ParseError(f"Reference date is outside the supported UTC range: {raw_text!r}") from exc


def _find_from_text(
    raw_text: str,
    selector: str,
    counts: Sequence[int] | None,
    now: datetime | None,
) -> list[Anniversary]:
    reference = parse_reference_instant(raw_text)
    if counts is None:
        counts = DEFAULT_COUNTS
    if now is None:
        now = datetime.now(timezone.utc)
    return find_anniversaries(reference, now, selector, counts)


def find_anniversaries_future(
    raw_text: str,
    *,
    counts: Sequence[int] | None = None,
    now: datetime | None = None,
) -> list[Anniversary]:
    return _find_from_text(raw_text, SELECT_FUTURE, counts, now)


def find_anniversaries_past(
    raw_text: str,
    *,
    counts: Sequence[int] | None = None,
    now: datetime | None = None,
) -> list[Anniversary]:
    return _find_from_text(raw_text, SELECT_PAST, counts, now)


def find_anniversaries_all(
    raw_text: str,
    *,
    counts: Sequence[int] | None = None,
    now: datetime | None = None,
) -> list[Anniversary]:
    return _find_from_text(raw_text, SELECT_ALL, counts, now)


def render_anniversary(entry: Anniversary) -> str:
    return f"{entry.name}: {entry.date.isoformat()}"
