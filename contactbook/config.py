import os
from pathlib import Path


def default_db_path() -> Path:
    # If running on App Engine standard, use /tmp (only writable place there).
    # Locally, keep the database under ./data next to the app.
    if os.environ.get("GAE_ENV") == "standard":
        return Path("/tmp/contacts.db")
    return Path("data") / "contacts.db"


def load_config() -> dict:
    """Settings read from the environment; create_app() overrides win over these."""
    return {
        "SECRET_KEY": os.environ.get("SECRET_KEY", "dev-secret-key"),
        "CONTACTS_DB_PATH": os.environ.get("CONTACTS_DB_PATH") or str(default_db_path()),
        "PORT": int(os.environ.get("PORT", "4000")),
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO").upper(),
    }
