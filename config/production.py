import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "front_desk"),
    "connection_timeout": int(os.getenv("DB_CONNECTION_TIMEOUT", "5")),
}

ADMIN_PASSCODE = os.getenv("ADMIN_PASSCODE", "")

AUTO_SIGNOUT_TIME = os.getenv("AUTO_SIGNOUT_TIME", "15:45")

MAX_CONTENT_LENGTH = 5 * 1024 * 1024

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
