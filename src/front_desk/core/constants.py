"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_AUTO_SIGNOUT_TIME = "15:45"
DEFAULT_CONNECTION_TIMEOUT_SECONDS = 5
DEFAULT_SWEEP_POLL_SECONDS = 60
MAX_UPLOAD_BYTES = 5 * 1024 * 1024

AUTO_SIGNOUT_JOB = "auto_sign_out"

STORAGE_TIME_FORMAT = "%H:%M:%S"
STORAGE_DATE_FORMAT = "%Y-%m-%d"
