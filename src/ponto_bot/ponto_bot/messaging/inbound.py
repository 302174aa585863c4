"""Normalize Evolution API webhook payloads into InboundMessage.

Returns None for anything the bot must not answer: other events, messages
sent by the bot itself, group or broadcast chats, and non-text messages.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from .model import InboundMessage

MESSAGE_UPSERT_EVENT = "messages.upsert"
_IGNORED_JID_SUFFIXES = ("@g.us", "@broadcast")


def _message_text(message: dict) -> Optional[str]:
    text = message.get("conversation")
    if not text:
        extended = message.get("extendedTextMessage") or {}
        text = extended.get("text")
    return text if isinstance(text, str) else None


def _received_at(data: dict, fallback: datetime) -> datetime:
    raw = data.get("messageTimestamp")
    try:
        return datetime.fromtimestamp(int(raw), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return fallback


def parse_evolution_payload(payload: Any, *, now: datetime) -> Optional[InboundMessage]:
    if not isinstance(payload, dict) or payload.get("event") != MESSAGE_UPSERT_EVENT:
        return None

    data = payload.get("data")
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        return None

    key = data.get("key") or {}
    remote_jid = key.get("remoteJid") or ""
    if key.get("fromMe") or not remote_jid or remote_jid.endswith(_IGNORED_JID_SUFFIXES):
        return None

    sender_id = remote_jid.split("@")[0].split(":")[0]
    text = _message_text(data.get("message") or {})
    if not sender_id or not text or not text.strip():
        return None

    return InboundMessage(
        sender_id=sender_id,
        raw_text=text.lower().strip(),
        received_at=_received_at(data, now),
    )
