from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import DeliveryStatus


@dataclass(frozen=True)
class InboundMessage:
    sender_id: str
    raw_text: str
    received_at: datetime


@dataclass(frozen=True)
class DeliveryOutcome:
    status: DeliveryStatus
    reason: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status == DeliveryStatus.DELIVERED

    @classmethod
    def ok(cls) -> "DeliveryOutcome":
        return cls(status=DeliveryStatus.DELIVERED)

    @classmethod
    def failed(cls, reason: str) -> "DeliveryOutcome":
        return cls(status=DeliveryStatus.FAILED, reason=reason)
