from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..punches.repository import PunchEventRepository
from .engine import ReportEngine
from .model import InvalidRange
from .range_resolver import resolve_range

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        punches: PunchEventRepository,
        *,
        tz: tzinfo,
        engine: Optional[ReportEngine] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._punches = punches
        self._tz = tz
        self._engine = engine or ReportEngine(tz)
        self._clock = clock

    def build_report_text(self, user_id: str, params_text: str, *, now: datetime | None = None) -> str:
        now = now or self._clock()

        resolved = resolve_range(params_text, now=now, tz=self._tz)
        if isinstance(resolved, InvalidRange):
            logger.info("Invalid report range from user %s: %r", user_id, params_text)
            return resolved.reason

        events = self._punches.query(user_id=user_id, start=resolved.start, end=resolved.end)
        report = self._engine.build(events, resolved)

        if report.discarded_entries or report.stray_exits:
            logger.warning(
                "Unpaired punches for user %s in %s: %s discarded entries, %s stray exits",
                user_id,
                resolved.label,
                report.discarded_entries,
                report.stray_exits,
            )
        logger.info(
            "Report for user %s (%s): %s events, %s days, %s minutes",
            user_id,
            resolved.label,
            report.event_count,
            len(report.days),
            report.total_minutes,
        )
        return self._engine.render(report)
