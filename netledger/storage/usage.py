from __future__ import annotations

import sqlite3
from typing import Any


def upsert_usage(conn: sqlite3.Connection, date: str, sent: int, received: int) -> None:
    conn.execute(
        """
        INSERT OR REPLACE INTO data_usage (date, sent, received)
        VALUES (?, ?, ?)
        """,
        (date, int(sent), int(received)),
    )
    conn.commit()


def get_usage_between(
    conn: sqlite3.Connection, since_date: str, until_date: str
) -> list[dict[str, Any]]:
    rows = conn.execute(
        """
        SELECT date, sent, received
        FROM data_usage
        WHERE date >= ? AND date <= ?
        ORDER BY date DESC
        """,
        (since_date, until_date),
    ).fetchall()
    return [dict(r) for r in rows]

