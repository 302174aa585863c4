from __future__ import annotations

import logging
import random
from datetime import datetime, time, timedelta, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import format_clock_time, local_date, now_utc
from ..core.constants import MOCK_DATA_DAYS, MOCK_DATA_DONE_MESSAGE
from ..core.enums import PunchKind
from .repository import PunchEventRepository

logger = logging.getLogger(__name__)

# (kind, hour, minute, random extra minutes) for a sample working day
_MOCK_DAY = (
    (PunchKind.ENTRY, 9, 0, 10),
    (PunchKind.EXIT, 12, 30, 10),
    (PunchKind.ENTRY, 13, 30, 10),
    (PunchKind.EXIT, 18, 0, 10),
)


class PunchService:
    def __init__(
        self,
        punches: PunchEventRepository,
        *,
        tz: tzinfo,
        clock: Callable[[], datetime] = now_utc,
        rng: Optional[random.Random] = None,
    ):
        self._punches = punches
        self._tz = tz
        self._clock = clock
        self._rng = rng or random.Random()

    def clock(self, user_id: str, kind: PunchKind, *, now: datetime | None = None) -> str:
        """Append a punch stamped with the server time and return the confirmation.

        No check against previous punches: two entries in a row are both stored.
        """
        now = now or self._clock()
        self._punches.append(user_id=user_id, kind=kind, occurred_at=now)
        logger.info("Punch '%s' stored for user %s", kind.value, user_id)
        return f"✅ Ponto de *{kind.value}* registado com sucesso às {format_clock_time(now, self._tz)}!"

    def generate_mock_data(self, user_id: str, *, now: datetime | None = None) -> str:
        """Replace the user's punches with a sample of the last weekdays."""
        now = now or self._clock()
        today = local_date(now, self._tz)

        self._punches.delete_all_for_user(user_id)

        written = 0
        for offset in range(MOCK_DATA_DAYS):
            day = today - timedelta(days=offset)
            if day.weekday() >= 5:
                continue
            for kind, hour, minute, jitter in _MOCK_DAY:
                at = datetime.combine(day, time(hour, minute + self._rng.randrange(jitter)), tzinfo=self._tz)
                self._punches.append(user_id=user_id, kind=kind, occurred_at=at)
                written += 1

        logger.info("Generated %s sample punches for user %s", written, user_id)
        return MOCK_DATA_DONE_MESSAGE
