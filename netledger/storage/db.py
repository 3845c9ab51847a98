from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from netledger.core.config import DB_PATH

logger = logging.getLogger(__name__)


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    path = Path(db_path) if db_path is not None else DB_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(path), timeout=10)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Path | str | None = None) -> None:
    conn = get_connection(db_path)
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS data_usage (
                date TEXT PRIMARY KEY,
                sent INTEGER,
                received INTEGER
            )
            """
        )
        conn.commit()
    finally:
        conn.close()

    logger.info("SQLite initialized at %s", db_path if db_path is not None else DB_PATH)
