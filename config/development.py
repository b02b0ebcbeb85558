import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "front_desk"),
    "connection_timeout": int(os.getenv("DB_CONNECTION_TIMEOUT", "5")),
}

# Placeholder admin gate for the dashboard, not a real credential store
ADMIN_PASSCODE = os.getenv("ADMIN_PASSCODE", "admin")

# Local wall-clock time (HH:MM) at which open visits are closed
AUTO_SIGNOUT_TIME = os.getenv("AUTO_SIGNOUT_TIME", "15:45")

# Photos arrive as base64 data URLs inside the JSON body
MAX_CONTENT_LENGTH = 5 * 1024 * 1024

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
