from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from src.ponto_bot.ponto_bot import create_app
from src.ponto_bot.ponto_bot.container import build_services
from src.ponto_bot.ponto_bot.core.exceptions import StoreError
from src.ponto_bot.ponto_bot.messaging.model import DeliveryOutcome
from src.ponto_bot.ponto_bot.punches.model import PunchEvent


class InMemoryPunches:
    def __init__(self):
        self.events: list[PunchEvent] = []

    def append(self, *, user_id, kind, occurred_at) -> int:
        self.events.append(PunchEvent(user_id=user_id, kind=kind, occurred_at=occurred_at))
        return len(self.events)

    def query(self, *, user_id, start, end):
        return [e for e in self.events if e.user_id == user_id and start <= e.occurred_at < end]

    def delete_all_for_user(self, user_id) -> int:
        return 0


class BrokenPunches(InMemoryPunches):
    def append(self, *, user_id, kind, occurred_at) -> int:
        raise StoreError("database down")


class RecordingDispatcher:
    def __init__(self, outcome=None):
        self.sent: list[tuple[str, str]] = []
        self._outcome = outcome or DeliveryOutcome.ok()

    def send(self, recipient_id, text):
        self.sent.append((recipient_id, text))
        return self._outcome


def _payload(text, *, from_me=False, event="messages.upsert"):
    return {
        "event": event,
        "data": {
            "key": {"remoteJid": "5511999990000@s.whatsapp.net", "fromMe": from_me},
            "message": {"conversation": text},
        },
    }


def _client(monkeypatch, repo, dispatcher):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(punches_repo=repo, reply_dispatcher=dispatcher, timezone="America/Sao_Paulo")
    return create_app(container).test_client()


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


def test_index_is_alive(monkeypatch, dispatcher):
    res = _client(monkeypatch, InMemoryPunches(), dispatcher).get("/")

    assert res.status_code == 200
    assert "Bot de Ponto" in res.get_data(as_text=True)


def test_entrada_is_stored_and_confirmed(monkeypatch, dispatcher):
    repo = InMemoryPunches()
    client = _client(monkeypatch, repo, dispatcher)

    res = client.post("/webhook", json=_payload("Entrada"))

    assert res.status_code == 200
    assert res.get_json()["status"] == "processed"
    assert len(repo.events) == 1
    [(recipient, text)] = dispatcher.sent
    assert recipient == "5511999990000"
    assert text.startswith("✅ Ponto de *entrada* registado com sucesso às ")


def test_ignored_events_get_200_without_reply(monkeypatch, dispatcher):
    client = _client(monkeypatch, InMemoryPunches(), dispatcher)

    assert client.post("/webhook", json=_payload("entrada", event="presence.update")).status_code == 200
    assert client.post("/webhook", json=_payload("entrada", from_me=True)).get_json()["status"] == "ignored"
    assert client.post("/webhook", data="not json", content_type="text/plain").status_code == 200
    assert dispatcher.sent == []


def test_store_failure_is_acknowledged_without_reply(monkeypatch, dispatcher):
    client = _client(monkeypatch, BrokenPunches(), dispatcher)

    res = client.post("/webhook", json=_payload("entrada"))

    assert res.status_code == 200
    assert res.get_json()["status"] == "error"
    assert dispatcher.sent == []


def test_delivery_failure_is_not_retried(monkeypatch):
    dispatcher = RecordingDispatcher(DeliveryOutcome.failed("HTTP 500"))
    client = _client(monkeypatch, InMemoryPunches(), dispatcher)

    res = client.post("/webhook", json=_payload("relatório"))

    assert res.status_code == 200
    assert res.get_json() == {"status": "processed", "delivered": False}
    assert len(dispatcher.sent) == 1


def test_container_uses_reference_timezone(monkeypatch, dispatcher):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(punches_repo=InMemoryPunches(), reply_dispatcher=dispatcher)

    assert container.tz == ZoneInfo("America/Sao_Paulo")
