from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..core.constants import DEFAULT_REPLY_DELAY_MS, DEFAULT_REPLY_TIMEOUT_SECONDS
from .gateway import ReplyDispatcher
from .model import DeliveryOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvolutionSettings:
    api_url: str
    api_key: str
    instance_name: str
    delay_ms: int = DEFAULT_REPLY_DELAY_MS
    timeout_seconds: float = DEFAULT_REPLY_TIMEOUT_SECONDS

    @property
    def configured(self) -> bool:
        return bool(self.api_url and self.api_key and self.instance_name)


class EvolutionReplyDispatcher(ReplyDispatcher):
    """Sends text replies through the Evolution API ``sendText`` endpoint.

    Failures are reported in the outcome, never retried.
    """

    def __init__(self, settings: EvolutionSettings, *, session: requests.Session | None = None):
        self._settings = settings
        self._http = session or requests

    def _send_url(self) -> str:
        return f"{self._settings.api_url.rstrip('/')}/message/sendText/{self._settings.instance_name}"

    def send(self, recipient_id: str, text: str) -> DeliveryOutcome:
        if not self._settings.configured:
            logger.error("Evolution API settings are missing; reply to %s not sent", recipient_id)
            return DeliveryOutcome.failed("Evolution API not configured")

        payload = {
            "number": recipient_id.split("@")[0],
            "options": {"delay": self._settings.delay_ms, "presence": "composing"},
            "text": text,
        }
        headers = {"apikey": self._settings.api_key, "Content-Type": "application/json"}

        try:
            response = self._http.post(
                self._send_url(),
                json=payload,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("Evolution API request failed for %s: %s", recipient_id, exc)
            return DeliveryOutcome.failed(str(exc))

        if not response.ok:
            logger.error(
                "Evolution API rejected reply to %s: HTTP %s %s",
                recipient_id,
                response.status_code,
                response.text[:500],
            )
            return DeliveryOutcome.failed(f"HTTP {response.status_code}")

        logger.info("Reply sent to %s", recipient_id)
        return DeliveryOutcome.ok()
