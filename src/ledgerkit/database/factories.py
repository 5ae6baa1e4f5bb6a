"""Database factory functions."""

import os
from pathlib import Path
from typing import Optional

from ledgerkit.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "LEDGERKIT_DB_PATH"


def default_database_path() -> Path:
    """Location used when neither an argument nor LEDGERKIT_DB_PATH is given."""
    db_dir = Path.home() / ".ledgerkit"
    db_dir.mkdir(exist_ok=True)
    return db_dir / "ledgerkit.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a ledger store backed by a SQLite file.

    Args:
        database_path: Path to the SQLite file. Falls back to the
            LEDGERKIT_DB_PATH environment variable, then to
            ~/.ledgerkit/ledgerkit.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = database_path or os.environ.get(DB_PATH_ENV) or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{path}")
