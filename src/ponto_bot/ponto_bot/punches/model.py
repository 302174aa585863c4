from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchEvent:
    """One clock-in/clock-out as stored for a user."""

    user_id: str
    kind: PunchKind
    occurred_at: datetime
    event_id: Optional[int] = None
