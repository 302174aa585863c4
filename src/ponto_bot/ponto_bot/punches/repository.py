from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import PunchKind
from .model import PunchEvent


class PunchEventRepository(Protocol):
    """Append-only per-user punch log."""

    def append(self, *, user_id: str, kind: PunchKind, occurred_at: datetime) -> int:
        raise NotImplementedError

    def query(self, *, user_id: str, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        """Events with start <= occurred_at < end, oldest first (ties in insertion order)."""

        raise NotImplementedError

    def delete_all_for_user(self, user_id: str) -> int:
        """Maintenance-only bulk reset."""

        raise NotImplementedError
