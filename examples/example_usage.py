"""Example: build a report through the service layer (no Flask, no webhook).

Controllers stay thin; the chat commands end up in these services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.ponto_bot.ponto_bot.container import build_container
from src.ponto_bot.ponto_bot.messaging.evolution_gateway import EvolutionSettings


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        evolution=EvolutionSettings(
            api_url=settings.EVOLUTION_API_URL,
            api_key=settings.EVOLUTION_API_KEY,
            instance_name=settings.EVOLUTION_INSTANCE_NAME,
        ),
        timezone=settings.TIMEZONE,
    )
    print(container.report_service.build_report_text("5511999990000", "últimos 7 dias"))


if __name__ == "__main__":
    main()
