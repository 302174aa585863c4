from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_utc
from ..container import Container
from ..core.exceptions import StoreError
from ..messaging.inbound import parse_evolution_payload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "Servidor do Bot de Ponto está a rodar! Configure o webhook para a rota /webhook.", 200

    @app.route("/webhook", methods=["POST"], endpoint="webhook")
    def webhook():
        # Always 200: the gateway retries anything else.
        payload = request.get_json(silent=True)
        message = parse_evolution_payload(payload, now=now_utc())
        if message is None:
            event = payload.get("event") if isinstance(payload, dict) else None
            logger.debug("Webhook ignored (event=%s)", event)
            return jsonify({"status": "ignored"}), 200

        logger.info("Message from %s: %r", message.sender_id, message.raw_text)
        try:
            reply = container.bot_service.handle(message)
        except StoreError:
            logger.exception("Event store failure while handling message from %s", message.sender_id)
            return jsonify({"status": "error"}), 200
        except Exception:
            logger.exception("Unexpected error while handling message from %s", message.sender_id)
            return jsonify({"status": "error"}), 200

        outcome = container.reply_dispatcher.send(message.sender_id, reply)
        if not outcome.delivered:
            logger.error("Reply to %s not delivered: %s", message.sender_id, outcome.reason)
        return jsonify({"status": "processed", "delivered": outcome.delivered}), 200
