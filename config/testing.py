import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "front_desk_test"),
    "connection_timeout": 5,
}

ADMIN_PASSCODE = "test-passcode"

AUTO_SIGNOUT_TIME = "15:45"

MAX_CONTENT_LENGTH = 5 * 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
