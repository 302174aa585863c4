import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
PORT = Config.PORT

DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE

EVOLUTION_API_URL = Config.EVOLUTION_API_URL
EVOLUTION_API_KEY = Config.EVOLUTION_API_KEY
EVOLUTION_INSTANCE_NAME = Config.EVOLUTION_INSTANCE_NAME
REPLY_DELAY_MS = Config.REPLY_DELAY_MS
REPLY_TIMEOUT_SECONDS = Config.REPLY_TIMEOUT_SECONDS

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# "gerardadosficticios" wipes the sender's punches and writes a sample week
MOCK_DATA_ENABLED = env_flag("MOCK_DATA_ENABLED", "1")
