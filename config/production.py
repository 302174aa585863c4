import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
PORT = Config.PORT

DB_CONFIG = Config.db_config()

TIMEZONE = Config.TIMEZONE

EVOLUTION_API_URL = Config.EVOLUTION_API_URL
EVOLUTION_API_KEY = Config.EVOLUTION_API_KEY
EVOLUTION_INSTANCE_NAME = Config.EVOLUTION_INSTANCE_NAME
REPLY_DELAY_MS = Config.REPLY_DELAY_MS
REPLY_TIMEOUT_SECONDS = Config.REPLY_TIMEOUT_SECONDS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
MOCK_DATA_ENABLED = env_flag("MOCK_DATA_ENABLED", "0")
