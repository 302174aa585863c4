from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..core.enums import PunchKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_utc, to_db_utc
from .model import PunchEvent
from .repository import PunchEventRepository

logger = logging.getLogger(__name__)


class MySQLPunchEventRepository(PunchEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, *, user_id: str, kind: PunchKind, occurred_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_events(user_id, kind, occurred_at)
                VALUES(%s,%s,%s)
                """,
                (user_id, kind.value, to_db_utc(occurred_at)),
            )
            return int(cur.lastrowid)

    def query(self, *, user_id: str, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, user_id, kind, occurred_at
                FROM punch_events
                WHERE user_id=%s AND occurred_at >= %s AND occurred_at < %s
                ORDER BY occurred_at ASC, event_id ASC
                """,
                (user_id, to_db_utc(start), to_db_utc(end)),
            )
            rows = fetchall(cur)
            return [
                PunchEvent(
                    event_id=int(r["event_id"]),
                    user_id=str(r["user_id"]),
                    kind=PunchKind(r["kind"]),
                    occurred_at=from_db_utc(r["occurred_at"]),
                )
                for r in rows
            ]

    def delete_all_for_user(self, user_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM punch_events WHERE user_id=%s", (user_id,))
            deleted = int(cur.rowcount or 0)
        logger.info("Deleted %s punch events for user %s", deleted, user_id)
        return deleted
