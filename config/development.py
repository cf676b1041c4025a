import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "intercom"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Rows per request when paging through the event source
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "1000"))

# Optional override of the shift table, e.g.
# SHIFT_WINDOWS = [{"name": "Manhã", "start": 360, "end": 719, "icon": "🌅", "overtime_after": 720}, ...]
SHIFT_WINDOWS = None
