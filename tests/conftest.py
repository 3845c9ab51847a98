from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from netledger.collectors.network import Sampler
from netledger.main import create_app
from netledger.services import ledger as ledger_module
from netledger.services.ledger import UsageLedger

FROZEN_TODAY = date(2024, 3, 15)


class FakeCounters:
    """Counter source replaying (sent, received) pairs; the last pair repeats."""

    def __init__(self, *readings: tuple[int, int]) -> None:
        self.readings = list(readings)
        self.calls = 0

    def __call__(self) -> tuple[int, int]:
        idx = min(self.calls, len(self.readings) - 1)
        self.calls += 1
        return self.readings[idx]


class FakeClock:
    def __init__(self, *ticks: float) -> None:
        self.ticks = list(ticks)
        self.calls = 0

    def __call__(self) -> float:
        idx = min(self.calls, len(self.ticks) - 1)
        self.calls += 1
        return self.ticks[idx]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "usage.db"


@pytest.fixture
def ledger(db_path: Path) -> UsageLedger:
    ledger = UsageLedger(db_path)
    ledger.ensure_schema()
    return ledger


@pytest.fixture
def sampler() -> Sampler:
    counters = FakeCounters((1000, 2000), (1500, 2800), (1900, 3000))
    clock = FakeClock(0.0, 2.0, 4.0)
    return Sampler(counters, clock=clock)


@pytest.fixture
def client(db_path: Path, sampler: Sampler):
    app = create_app(db_path=db_path, sampler=sampler, record_interval_seconds=0)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def frozen_today(monkeypatch) -> date:
    """Pin the ledger's notion of today so runs spanning midnight stay stable."""

    class _FrozenDate(date):
        @classmethod
        def today(cls) -> date:
            return FROZEN_TODAY

    monkeypatch.setattr(ledger_module, "date", _FrozenDate)
    return FROZEN_TODAY
