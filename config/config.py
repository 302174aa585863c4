import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    """Defaults shared by every environment, read from the process env."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "ponto-bot-secret"
    PORT = int(os.environ.get("PORT", "3000"))

    # Event store
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "ponto_bot")

    # Reference timezone for day boundaries and displayed times
    TIMEZONE = os.environ.get("TIMEZONE", "America/Sao_Paulo")

    # Evolution API (WhatsApp gateway)
    EVOLUTION_API_URL = os.environ.get("EVOLUTION_API_URL", "")
    EVOLUTION_API_KEY = os.environ.get("EVOLUTION_API_KEY", "")
    EVOLUTION_INSTANCE_NAME = os.environ.get("EVOLUTION_INSTANCE_NAME", "")
    REPLY_DELAY_MS = int(os.environ.get("REPLY_DELAY_MS", "1200"))
    REPLY_TIMEOUT_SECONDS = float(os.environ.get("REPLY_TIMEOUT_SECONDS", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
