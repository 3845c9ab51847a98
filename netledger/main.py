from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from netledger.api.routes import router as api_router
from netledger.api.schemas import ErrorResponse
from netledger.collectors.network import Sampler
from netledger.core.config import APP_NAME, RECORD_INTERVAL_SECONDS
from netledger.core.errors import CollaboratorUnavailable, NetLedgerError
from netledger.core.logging import setup_logging
from netledger.services.ledger import UsageLedger
from netledger.services.scheduler import UsageRecorder

logger = logging.getLogger(__name__)


def create_app(
    *,
    db_path: Path | str | None = None,
    sampler: Sampler | None = None,
    record_interval_seconds: int = RECORD_INTERVAL_SECONDS,
) -> FastAPI:
    app = FastAPI(title=APP_NAME)
    app.include_router(api_router)
    app.state.ledger = UsageLedger(db_path)
    app.state.sampler = sampler
    app.state.recorder = None

    @app.exception_handler(NetLedgerError)
    async def netledger_error(request: Request, exc: NetLedgerError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        status_code = 503 if isinstance(exc, CollaboratorUnavailable) else 500
        body = ErrorResponse(meta={"message": str(exc), "error": type(exc).__name__})
        return JSONResponse(status_code=status_code, content=body.model_dump())

    @app.on_event("startup")
    async def on_startup() -> None:
        ledger: UsageLedger = app.state.ledger
        ledger.ensure_schema()
        if app.state.sampler is None:
            # Rates are relative to this baseline until the first sample.
            app.state.sampler = Sampler()

        if record_interval_seconds > 0:
            recorder = UsageRecorder(app.state.sampler, ledger, record_interval_seconds)
            recorder.start()
            app.state.recorder = recorder
        logger.info("%s started (db=%s)", APP_NAME, ledger.db_path)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        recorder: UsageRecorder | None = getattr(app.state, "recorder", None)
        if recorder is not None:
            await recorder.stop()
        logger.info("%s stopped", APP_NAME)

    return app


setup_logging()
app = create_app()
