# /lugyi_admin/config.py

"""
Runtime settings for the admin backend.

Values are read once from the process environment (optionally seeded from a
local `.env` file) and exposed as module-level constants, so any module can
simply `from lugyi_admin import config` and read what it needs.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Lugyi Admin API")
APP_VERSION = "1.0.0"

# --- Database ---
# Any SQLAlchemy URL works; the dashboard picks its date-bucketing dialect
# from the driver behind this URL (postgresql, mysql or sqlite).
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lugyi_admin.db")

# --- HTTP ---
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Installs the root log format. Safe to call more than once."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("lugyi_admin").setLevel(level)
