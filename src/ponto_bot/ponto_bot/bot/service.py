from __future__ import annotations

import logging
from datetime import datetime

from ..commands.model import ClockCommand, MockDataCommand, ReportCommand
from ..commands.parser import parse_command
from ..core.constants import USAGE_HINT
from ..messaging.model import InboundMessage
from ..punches.service import PunchService
from ..reports.service import ReportService

logger = logging.getLogger(__name__)


class BotService:
    """Routes one inbound chat message to the right use case and returns the reply text."""

    def __init__(
        self,
        punches: PunchService,
        reports: ReportService,
        *,
        mock_data_enabled: bool = False,
    ):
        self._punches = punches
        self._reports = reports
        self._mock_data_enabled = bool(mock_data_enabled)

    def handle(self, message: InboundMessage, *, now: datetime | None = None) -> str:
        command = parse_command(message.raw_text)

        if isinstance(command, ClockCommand):
            return self._punches.clock(message.sender_id, command.kind, now=now)

        if isinstance(command, ReportCommand):
            return self._reports.build_report_text(message.sender_id, command.params_text, now=now)

        if isinstance(command, MockDataCommand) and self._mock_data_enabled:
            return self._punches.generate_mock_data(message.sender_id, now=now)

        logger.info("Unknown command from %s: %r", message.sender_id, message.raw_text)
        return USAGE_HINT
