"""
Environment configuration.

Values come from the process environment, optionally seeded from a .env file
at the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

# Load environment
load_dotenv(PROJECT_ROOT / ".env")

DATA_DIR = PROJECT_ROOT / "data"
DB_NAME = "kana_srs.db"
TEST_DB_NAME = "test_kana_srs.db"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    DATABASE_URL wins when set. In test mode the production database name
    is swapped for the test one. Without DATABASE_URL a local SQLite file
    under data/ is used.

    Returns:
        SQLAlchemy database URL
    """
    base_url = os.getenv("DATABASE_URL")
    if base_url:
        if is_test_mode():
            return base_url.replace("kana_srs", "test_kana_srs")
        return base_url

    db_name = TEST_DB_NAME if is_test_mode() else DB_NAME
    return f"sqlite:///{DATA_DIR / db_name}"
