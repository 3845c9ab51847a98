from __future__ import annotations

import os
from pathlib import Path

APP_NAME: str = "netledger"
DB_PATH: Path = Path(os.environ.get("NETLEDGER_DB_PATH", "network_traffic.db")).resolve()

HOST: str = "127.0.0.1"
PORT: int = 8080

HISTORY_WINDOW_DAYS: int = 30
HISTORY_MAX_DAYS: int = 365

# 0 leaves recording to external triggers (POST /api/update).
RECORD_INTERVAL_SECONDS: int = int(os.environ.get("NETLEDGER_RECORD_INTERVAL", "0"))

LOG_LEVEL: str = os.environ.get("NETLEDGER_LOG_LEVEL", "INFO")
