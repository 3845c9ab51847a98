from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

import psutil

from netledger.core.errors import CounterReadError

CounterSource = Callable[[], tuple[int, int]]
Clock = Callable[[], float]


def read_counters() -> tuple[int, int]:
    """Return cumulative (bytes_sent, bytes_recv) summed over every interface."""
    try:
        counters = psutil.net_io_counters(pernic=False)
    except Exception as exc:
        raise CounterReadError("Unable to read network IO counters") from exc
    if counters is None:
        raise CounterReadError("No network interfaces reported IO counters")
    return int(counters.bytes_sent), int(counters.bytes_recv)


@dataclass(frozen=True, slots=True)
class _NetSample:
    ts_monotonic: float
    bytes_sent: int
    bytes_recv: int


@dataclass(frozen=True, slots=True)
class UsageSample:
    sent: int
    received: int
    download_rate: float
    upload_rate: float
    captured_at: float
    counter_reset: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sent": int(self.sent),
            "received": int(self.received),
            "download_rate": float(self.download_rate),
            "upload_rate": float(self.upload_rate),
            "counter_reset": bool(self.counter_reset),
        }


class Sampler:
    """Derives throughput from successive reads of the cumulative counters.

    A baseline is taken on construction, so the first ``sample()`` already
    reports a rate relative to startup. Every call replaces the previous
    slot, making each rate relative to the call right before it. A counter
    that went backwards (interface reset, reboot) reports ``0.0`` for that
    direction and flags the sample with ``counter_reset``.
    """

    def __init__(
        self,
        read: CounterSource = read_counters,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self._read = read
        self._clock = clock
        self._lock = threading.Lock()
        self._last = self._observe()

    def _observe(self) -> _NetSample:
        sent, recv = self._read()
        return _NetSample(ts_monotonic=self._clock(), bytes_sent=int(sent), bytes_recv=int(recv))

    def sample(self) -> UsageSample:
        with self._lock:
            current = self._observe()
            previous = self._last
            self._last = current

        dt = current.ts_monotonic - previous.ts_monotonic
        sent_delta = current.bytes_sent - previous.bytes_sent
        recv_delta = current.bytes_recv - previous.bytes_recv
        counter_reset = sent_delta < 0 or recv_delta < 0

        if dt <= 0:
            upload_rate = download_rate = 0.0
        else:
            upload_rate = max(sent_delta, 0) / dt
            download_rate = max(recv_delta, 0) / dt

        return UsageSample(
            sent=current.bytes_sent,
            received=current.bytes_recv,
            download_rate=float(download_rate),
            upload_rate=float(upload_rate),
            captured_at=current.ts_monotonic,
            counter_reset=counter_reset,
        )
