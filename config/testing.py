from .config import Config

SECRET_KEY = "test-secret"
PORT = 3000

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "ponto_bot_test",
}

TIMEZONE = "America/Sao_Paulo"

EVOLUTION_API_URL = "http://evolution.test"
EVOLUTION_API_KEY = "test-key"
EVOLUTION_INSTANCE_NAME = "ponto"
REPLY_DELAY_MS = 0
REPLY_TIMEOUT_SECONDS = Config.REPLY_TIMEOUT_SECONDS

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

AUTO_INIT_DB = False
MOCK_DATA_ENABLED = True
