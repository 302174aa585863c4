from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass(frozen=True)
class ReportRange:
    """Resolved report period: start inclusive, end exclusive."""

    start: datetime
    end: datetime
    label: str

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise ValueError("ReportRange requires start < end")


@dataclass(frozen=True)
class InvalidRange:
    reason: str


RangeResult = Union[ReportRange, InvalidRange]


@dataclass(frozen=True)
class DayTotal:
    day: date
    minutes: int


@dataclass(frozen=True)
class Report:
    """Read-model of a worked-hours report for one user."""

    report_range: ReportRange
    days: tuple[DayTotal, ...]
    event_count: int
    discarded_entries: int = 0
    stray_exits: int = 0

    @property
    def total_minutes(self) -> int:
        return sum(d.minutes for d in self.days)

    @property
    def is_empty(self) -> bool:
        return self.event_count == 0
