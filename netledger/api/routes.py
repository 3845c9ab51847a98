from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Query, Request

from netledger.api.schemas import (
    CurrentUsageResponse,
    HealthResponse,
    SummaryResponse,
    UsageHistoryResponse,
    UsageRecordResponse,
)
from netledger.collectors.network import Sampler
from netledger.core.config import HISTORY_MAX_DAYS, HISTORY_WINDOW_DAYS
from netledger.core.formatting import format_bytes, format_rate
from netledger.services.ledger import UsageLedger
from netledger.services.scheduler import record_current_usage

router = APIRouter(prefix="/api")


def _sampler(request: Request) -> Sampler:
    return request.app.state.sampler


def _ledger(request: Request) -> UsageLedger:
    return request.app.state.ledger


@router.get("/health")
def health() -> HealthResponse:
    return HealthResponse(ok=True, data={"status": "ok"}, meta={})


@router.get("/data")
def data(
    request: Request,
    days: int = Query(default=HISTORY_WINDOW_DAYS, ge=0, le=HISTORY_MAX_DAYS),
) -> UsageHistoryResponse:
    records = _ledger(request).query_recent(days)
    return UsageHistoryResponse(
        ok=True,
        data=[r.to_dict() for r in records],
        meta={"days": days, "count": len(records)},
    )


@router.post("/update")
def update(request: Request) -> UsageRecordResponse:
    record = record_current_usage(_sampler(request), _ledger(request))
    return UsageRecordResponse(
        ok=True,
        data=record.to_dict(),
        meta={
            "message": "Network usage updated successfully!",
            "ts_utc": datetime.now(timezone.utc).isoformat(),
        },
    )


@router.get("/current")
def current(request: Request) -> CurrentUsageResponse:
    sample = _sampler(request).sample()
    return CurrentUsageResponse(
        ok=True,
        data={
            **sample.to_dict(),
            "sent_human": format_bytes(sample.sent),
            "received_human": format_bytes(sample.received),
            "download_rate_human": format_rate(sample.download_rate),
            "upload_rate_human": format_rate(sample.upload_rate),
        },
        meta={"ts_utc": datetime.now(timezone.utc).isoformat()},
    )


@router.get("/summary")
def summary(
    request: Request,
    days: int = Query(default=HISTORY_WINDOW_DAYS, ge=0, le=HISTORY_MAX_DAYS),
) -> SummaryResponse:
    result = _ledger(request).summarize(days)
    return SummaryResponse(ok=True, data=result.to_dict(), meta={"days": days})
