from __future__ import annotations

from typing import Protocol

from .model import DeliveryOutcome


class ReplyDispatcher(Protocol):
    def send(self, recipient_id: str, text: str) -> DeliveryOutcome:
        """Deliver text to a chat user. Must not raise on delivery problems."""

        raise NotImplementedError
