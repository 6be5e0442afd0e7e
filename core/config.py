"""Runtime configuration read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

# Load .env so overrides work when launched via Streamlit as well as scripts
load_dotenv()

DEFAULT_DB_FILENAME = "patients.db"
DEFAULT_OPERATOR = "Admin"


class Settings:
    """Snapshot of the environment-driven settings.

    - database_path: explicit database file, overrides the platform default
    - platform: force capability selection ("android" or "desktop")
    - log_level: logging level name for configure_logging()
    - operator_name: name written to the activity log
    """

    def __init__(self):
        self.database_path = os.getenv("PATIENTS_DB_PATH") or None
        self.platform = (os.getenv("PATIENTS_PLATFORM") or "").strip().lower() or None
        self.log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
        self.operator_name = (os.getenv("PATIENTS_OPERATOR") or "").strip() or DEFAULT_OPERATOR

    def __repr__(self):
        return f"<Settings db={self.database_path!r} platform={self.platform!r} log={self.log_level}>"


def get_settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings()
