from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from .bot.service import BotService
from .core.constants import DEFAULT_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .messaging.evolution_gateway import EvolutionReplyDispatcher, EvolutionSettings
from .messaging.gateway import ReplyDispatcher
from .punches.mysql_punch_repository import MySQLPunchEventRepository
from .punches.repository import PunchEventRepository
from .punches.service import PunchService
from .reports.engine import ReportEngine
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    tz: ZoneInfo

    punches_repo: PunchEventRepository
    reply_dispatcher: ReplyDispatcher

    punch_service: PunchService
    report_service: ReportService
    bot_service: BotService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    punches_repo: PunchEventRepository,
    reply_dispatcher: ReplyDispatcher,
    timezone: str = DEFAULT_TIMEZONE,
    mock_data_enabled: bool = False,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    tz = ZoneInfo(timezone)

    punch_service = PunchService(punches_repo, tz=tz)
    report_service = ReportService(punches_repo, tz=tz, engine=ReportEngine(tz))
    bot_service = BotService(punch_service, report_service, mock_data_enabled=mock_data_enabled)

    return Container(
        tz=tz,
        punches_repo=punches_repo,
        reply_dispatcher=reply_dispatcher,
        punch_service=punch_service,
        report_service=report_service,
        bot_service=bot_service,
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    evolution: EvolutionSettings,
    timezone: str = DEFAULT_TIMEZONE,
    mock_data_enabled: bool = False,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        punches_repo=MySQLPunchEventRepository(conn),
        reply_dispatcher=EvolutionReplyDispatcher(evolution),
        timezone=timezone,
        mock_data_enabled=mock_data_enabled,
        conn=conn,
    )
