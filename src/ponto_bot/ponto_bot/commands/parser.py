from __future__ import annotations

from ..core.constants import MOCK_DATA_COMMAND, REPORT_TOKEN
from ..core.enums import PunchKind
from .model import ClockCommand, Command, MockDataCommand, ReportCommand, UnknownCommand


def parse_command(text: str) -> Command:
    """Map a lowercased chat message to a command.

    Clock commands must match exactly; "relatório" must be the first token and
    everything after it is handed over as the report parameters.
    """
    text = (text or "").strip()

    for kind in PunchKind:
        if text == kind.value:
            return ClockCommand(kind=kind)

    parts = text.split(maxsplit=1)
    if parts and parts[0] == REPORT_TOKEN:
        return ReportCommand(params_text=parts[1].strip() if len(parts) > 1 else "")

    if text == MOCK_DATA_COMMAND:
        return MockDataCommand()

    return UnknownCommand(text=text)
