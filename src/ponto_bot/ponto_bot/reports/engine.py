from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_br_date, format_minutes, local_date, to_utc
from ..core.constants import EMPTY_REPORT_MESSAGE, NO_HOURS_FOOTER
from ..core.enums import PunchKind
from ..punches.model import PunchEvent
from .model import DayTotal, Report, ReportRange


@dataclass
class _DayScan:
    """Entry/exit pairing for one calendar day.

    Two states: open (``open_entry`` holds the pending entry) or closed.
    An entry while open replaces the pending one; an exit while closed is
    ignored. Both cases are counted so callers can log them.
    """

    open_entry: Optional[datetime] = None
    seconds: int = 0
    discarded_entries: int = 0
    stray_exits: int = 0

    def feed(self, event: PunchEvent) -> None:
        if event.kind == PunchKind.ENTRY:
            if self.open_entry is not None:
                self.discarded_entries += 1
            self.open_entry = event.occurred_at
            return

        if self.open_entry is None:
            self.stray_exits += 1
            return
        self.seconds += int((to_utc(event.occurred_at) - to_utc(self.open_entry)).total_seconds())
        self.open_entry = None

    @property
    def minutes(self) -> int:
        return self.seconds // 60


class ReportEngine:
    """Builds and renders worked-hours reports from punch events.

    Pure: the same events, range and timezone always give the same text.
    """

    def __init__(self, tz: tzinfo):
        self._tz = tz

    def _group_by_day(self, events: Iterable[PunchEvent]) -> dict[date, list[PunchEvent]]:
        buckets: dict[date, list[PunchEvent]] = {}
        # sorted() is stable, so same-instant events keep the store's order
        for event in sorted(events, key=lambda e: to_utc(e.occurred_at)):
            buckets.setdefault(local_date(event.occurred_at, self._tz), []).append(event)
        return buckets

    def build(self, events: Sequence[PunchEvent], report_range: ReportRange) -> Report:
        days: list[DayTotal] = []
        discarded = stray = 0

        for day, bucket in sorted(self._group_by_day(events).items()):
            scan = _DayScan()
            for event in bucket:
                scan.feed(event)
            discarded += scan.discarded_entries
            stray += scan.stray_exits
            if scan.minutes > 0:
                days.append(DayTotal(day=day, minutes=scan.minutes))

        return Report(
            report_range=report_range,
            days=tuple(days),
            event_count=len(events),
            discarded_entries=discarded,
            stray_exits=stray,
        )

    def render(self, report: Report) -> str:
        if report.is_empty:
            return EMPTY_REPORT_MESSAGE

        lines = [f"*Relatório de Ponto - {report.report_range.label}*", ""]
        for day in report.days:
            lines.append(f"- {format_br_date(day.day)}: *{format_minutes(day.minutes)}*")

        total = report.total_minutes
        if total == 0:
            lines.append(NO_HOURS_FOOTER)
        else:
            lines.extend(["", f"*Total no Período:* {format_minutes(total)}"])
        return "\n".join(lines)

    def generate(self, events: Sequence[PunchEvent], report_range: ReportRange) -> str:
        return self.render(self.build(events, report_range))
