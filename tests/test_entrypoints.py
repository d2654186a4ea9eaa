from datetime import datetime, timezone

import pytest

from funniversaries.entrypoints import (
    ParseError,
    find_anniversaries_all,
    find_anniversaries_future,
    find_anniversaries_past,
    parse_reference_instant,
    render_anniversary,
)
from funniversaries.models import Anniversary

UTC = timezone.utc


def test_parse_reference_instant_with_z_suffix() -> None:
    parsed = parse_reference_instant("1989-06-19T00:00:00.000Z")

    assert parsed == datetime(1989, 6, 19, tzinfo=UTC)
    assert parsed.tzinfo == UTC


def test_parse_reference_instant_with_offset_keeps_fraction() -> None:
    parsed = parse_reference_instant("2010-01-02T03:04:05.250+01:00")

    assert parsed == datetime(2010, 1, 2, 2, 4, 5, 250000, tzinfo=UTC)


@pytest.mark.parametrize(
    "raw_text",
    [
        "",
        "   ",
        "2020:01:02T06:05:04.333Z",
        "not a date",
        "2020-01-02T06:05:04",
        "9999-12-31T23:30:00-01:00",
        "0001-01-01T00:00:00+01:00",
    ],
)
def test_parse_reference_instant_rejects_bad_input(raw_text: str) -> None:
    with pytest.raises(ParseError):
        parse_reference_instant(raw_text)


@pytest.mark.parametrize(
    "entrypoint",
    [find_anniversaries_future, find_anniversaries_past, find_anniversaries_all],
)
@pytest.mark.parametrize("raw_text", ["", "2020:01:02T06:05:04.333Z"])
def test_entrypoints_fail_on_unparseable_date(entrypoint, raw_text: str) -> None:
    with pytest.raises(ParseError):
        entrypoint(raw_text)


def test_all_with_default_counts_drops_only_out_of_range_entries() -> None:
    entries = find_anniversaries_all("1989-06-19T00:00:00.000Z")

    names = {entry.name for entry in entries}
    assert len(entries) == 122
    for dropped in ("10000000 days", "100000000 days", "1000000000 days", "10000000000 days"):
        assert dropped not in names
    for dropped in ("1000000 weeks", "1234567 weeks", "10000000 weeks", "10000000000 weeks"):
        assert dropped not in names
    assert "10000000000 seconds" in names
    assert "1234567 days" in names
    assert "123456 weeks" in names


def test_past_from_recent_date() -> None:
    assert len(find_anniversaries_past("2020-01-02T06:05:04.333Z")) > 0


def test_past_from_old_date() -> None:
    assert len(find_anniversaries_past("1605-11-05T23:59:58.666Z")) > 0


def test_past_from_future_date_is_empty() -> None:
    assert find_anniversaries_past("2222-11-22T11:22:11.222Z") == []


def test_future_includes_entry_landing_on_now() -> None:
    now = datetime(2012, 9, 28, 3, 4, 5, tzinfo=UTC)

    future = find_anniversaries_future("2010-01-02T03:04:05Z", counts=[1_000], now=now)
    past = find_anniversaries_past("2010-01-02T03:04:05Z", counts=[1_000], now=now)

    assert [entry.name for entry in future] == ["1000 days", "1000 weeks"]
    assert [entry.name for entry in past] == ["1000 seconds"]


def test_render_anniversary() -> None:
    entry = Anniversary.days(666, datetime(2011, 10, 30, 3, 4, 5, tzinfo=UTC))

    assert render_anniversary(entry) == "666 days: 2011-10-30T03:04:05+00:00"
