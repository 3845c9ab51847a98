from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from netledger.collectors.network import Sampler
from netledger.services.ledger import UsageLedger, UsageRecord

logger = logging.getLogger(__name__)


def record_current_usage(sampler: Sampler, ledger: UsageLedger) -> UsageRecord:
    sample = sampler.sample()
    return ledger.record_usage(sample.sent, sample.received)


class UsageRecorder:
    """Periodically records today's totals, for hosts with no external trigger."""

    def __init__(self, sampler: Sampler, ledger: UsageLedger, interval_seconds: int) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self._sampler = sampler
        self._ledger = ledger
        self._interval_seconds = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="usage-recorder")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def run_once(self) -> UsageRecord | None:
        try:
            record = await asyncio.to_thread(record_current_usage, self._sampler, self._ledger)
        except Exception:
            logger.exception("Usage recording cycle failed")
            return None
        logger.debug("Recorder stored usage for %s", record.date)
        return record

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(float(self._interval_seconds))
            await self.run_once()
