import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "abimanyu_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORAGE_PATH = os.getenv("STORAGE_PATH", "/var/lib/abimanyu/data.json")
MIRROR_ENABLED = bool(int(os.getenv("MIRROR_ENABLED", "1")))
TENANT_ID = os.getenv("TENANT_ID", "default")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
