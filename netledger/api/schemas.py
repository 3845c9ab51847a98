from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthData(BaseModel):
    status: str


class UsageRecordData(BaseModel):
    date: str
    sent: int
    received: int
    sent_human: str
    received_human: str


class CurrentUsageData(BaseModel):
    sent: int
    received: int
    sent_human: str
    received_human: str
    download_rate: float
    upload_rate: float
    download_rate_human: str
    upload_rate_human: str
    counter_reset: bool = False


class SummaryData(BaseModel):
    total_sent: int
    total_received: int
    total_sent_human: str
    total_received_human: str
    days: int


class HealthResponse(BaseModel):
    ok: bool
    data: HealthData | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class UsageHistoryResponse(BaseModel):
    ok: bool
    data: list[UsageRecordData] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)


class UsageRecordResponse(BaseModel):
    ok: bool
    data: UsageRecordData | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class CurrentUsageResponse(BaseModel):
    ok: bool
    data: CurrentUsageData | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class SummaryResponse(BaseModel):
    ok: bool
    data: SummaryData | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    ok: bool = False
    data: None = None
    meta: dict[str, Any] = Field(default_factory=dict)
