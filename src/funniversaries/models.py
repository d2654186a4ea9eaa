from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


UNIT_SECONDS = "seconds"
UNIT_DAYS = "days"
UNIT_WEEKS = "weeks"

# Generation order of the unit blocks.
UNITS = (UNIT_SECONDS, UNIT_DAYS, UNIT_WEEKS)

SECONDS_PER_UNIT = {
    UNIT_SECONDS: 1,
    UNIT_DAYS: 86_400,
    UNIT_WEEKS: 604_800,
}

SELECT_PAST = "past"
SELECT_FUTURE = "future"
SELECT_ALL = "all"

SELECTORS = {SELECT_PAST, SELECT_FUTURE, SELECT_ALL}

DEFAULT_COUNTS = [
    42,
    69,
    100,
    123,
    222,
    314,
    333,
    365,
    404,
    420,
    444,
    500,
    512,
    555,
    666,
    777,
    888,
    999,
    1_000,
    1_024,
    1_111,
    1_234,
    1_337,
    2_000,
    2_048,
    2_222,
    3_141,
    4_096,
    5_000,
    6_666,
    7_777,
    8_192,
    10_000,
    11_111,
    12_345,
    65_536,
    100_000,
    123_456,
    1_000_000,
    1_234_567,
    10_000_000,
    100_000_000,
    1_000_000_000,
    10_000_000_000,
]


@dataclass(frozen=True)
class Anniversary:
    count: int
    unit: str
    date: datetime

    @property
    def name(self) -> str:
        return f"{self.count} {self.unit}"

    @classmethod
    def seconds(cls, count: int, date: datetime) -> Anniversary:
        return cls(count=count, unit=UNIT_SECONDS, date=date)

    @classmethod
    def days(cls, count: int, date: datetime) -> Anniversary:
        return cls(count=count, unit=UNIT_DAYS, date=date)

    @classmethod
    def weeks(cls, count: int, date: datetime) -> Anniversary:
        return cls(count=count, unit=UNIT_WEEKS, date=date)


@dataclass(frozen=True)
class AppConfig:
    counts: list[int]
