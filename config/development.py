import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "abimanyu_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Empty path keeps everything in memory
STORAGE_PATH = os.getenv("STORAGE_PATH", "data/abimanyu.json")
MIRROR_ENABLED = bool(int(os.getenv("MIRROR_ENABLED", "0")))
TENANT_ID = os.getenv("TENANT_ID", "default")

# If enabled (and the mirror is on), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
