from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from netledger.core.config import DB_PATH, HISTORY_WINDOW_DAYS
from netledger.core.errors import PersistenceWriteError, StoreUnavailableError
from netledger.core.formatting import format_bytes
from netledger.storage.db import get_connection, init_db
from netledger.storage.usage import get_usage_between, upsert_usage

logger = logging.getLogger(__name__)

DATE_FORMAT: str = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class UsageRecord:
    date: str
    sent: int
    received: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "sent": int(self.sent),
            "received": int(self.received),
            "sent_human": format_bytes(self.sent),
            "received_human": format_bytes(self.received),
        }


@dataclass(frozen=True, slots=True)
class UsageSummary:
    total_sent: int
    total_received: int
    days: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_sent": int(self.total_sent),
            "total_received": int(self.total_received),
            "total_sent_human": format_bytes(self.total_sent),
            "total_received_human": format_bytes(self.total_received),
            "days": int(self.days),
        }


class UsageLedger:
    """Daily usage ledger backed by the ``data_usage`` SQLite table.

    Each calendar day holds a single row. Recording again on the same day
    replaces the row, so a day reflects the cumulative counters seen by the
    last update of that day rather than the traffic of that day. Old rows are
    never deleted; queries only look back ``window_days``.
    """

    def __init__(self, db_path: Path | str | None = None) -> None:
        self.db_path = Path(db_path) if db_path is not None else DB_PATH

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self.db_path)
        except (sqlite3.Error, OSError) as exc:
            raise StoreUnavailableError(f"Unable to open {self.db_path}") from exc

    def ensure_schema(self) -> None:
        try:
            init_db(self.db_path)
        except (sqlite3.Error, OSError) as exc:
            raise StoreUnavailableError(f"Unable to initialize {self.db_path}") from exc

    def record_usage(self, sent: int, received: int, *, day: date | None = None) -> UsageRecord:
        record = UsageRecord(
            date=(day or date.today()).strftime(DATE_FORMAT),
            sent=int(sent),
            received=int(received),
        )
        conn = self._connect()
        try:
            upsert_usage(conn, record.date, record.sent, record.received)
        except (sqlite3.Error, OverflowError) as exc:
            raise PersistenceWriteError(f"Failed to save data usage for {record.date}") from exc
        finally:
            conn.close()

        logger.debug("Recorded usage date=%s sent=%s received=%s", record.date, record.sent, record.received)
        return record

    def query_recent(
        self, window_days: int = HISTORY_WINDOW_DAYS, *, today: date | None = None
    ) -> list[UsageRecord]:
        if window_days < 0:
            raise ValueError("window_days must be >= 0")

        until = today or date.today()
        since = until - timedelta(days=window_days)

        conn = self._connect()
        try:
            rows = get_usage_between(
                conn,
                since_date=since.strftime(DATE_FORMAT),
                until_date=until.strftime(DATE_FORMAT),
            )
        except sqlite3.Error as exc:
            raise StoreUnavailableError("Failed to query data usage") from exc
        finally:
            conn.close()

        return [
            UsageRecord(date=r["date"], sent=int(r["sent"] or 0), received=int(r["received"] or 0))
            for r in rows
        ]

    def summarize(
        self, window_days: int = HISTORY_WINDOW_DAYS, *, today: date | None = None
    ) -> UsageSummary:
        # Sums one end-of-day snapshot per day, not the bytes moved in the window.
        records = self.query_recent(window_days, today=today)
        return UsageSummary(
            total_sent=sum(r.sent for r in records),
            total_received=sum(r.received for r in records),
            days=len(records),
        )
