from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Tipo de batida de ponto, com o texto do comando como valor."""

    ENTRY = "entrada"
    EXIT = "saída"


class DeliveryStatus(str, Enum):
    """Resultado do envio de uma resposta pelo gateway de mensagens."""

    DELIVERED = "DELIVERED"
    FAILED = "FAILED"
