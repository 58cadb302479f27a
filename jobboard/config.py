import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///data/jobboard.db"
DEFAULT_TEST_DATABASE_URL = "sqlite:///data/jobboard_test.db"


def load_env() -> None:
    """Load .env from project root if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def get_database_url() -> str:
    """
    Resolve the database URL for the current environment.

    JOBBOARD_ENV=test selects JOBBOARD_TEST_DATABASE_URL so test runs never
    touch the regular database.
    """
    if os.getenv("JOBBOARD_ENV", "").lower() == "test":
        return os.getenv("JOBBOARD_TEST_DATABASE_URL", DEFAULT_TEST_DATABASE_URL)
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_log_level() -> str:
    return os.getenv("JOBBOARD_LOG_LEVEL", "INFO").upper()


def get_log_dir() -> Optional[Path]:
    log_dir = os.getenv("JOBBOARD_LOG_DIR")
    if not log_dir:
        return None
    return Path(log_dir)
