from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import PunchKind


@dataclass(frozen=True)
class ClockCommand:
    kind: PunchKind


@dataclass(frozen=True)
class ReportCommand:
    params_text: str = ""


@dataclass(frozen=True)
class MockDataCommand:
    """Maintenance: reset the sender's punches and write a sample week."""


@dataclass(frozen=True)
class UnknownCommand:
    text: str = ""


Command = Union[ClockCommand, ReportCommand, MockDataCommand, UnknownCommand]
