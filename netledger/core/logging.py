from __future__ import annotations

import logging

from netledger.core.config import LOG_LEVEL

LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
    logging.getLogger("netledger").setLevel((level or LOG_LEVEL).upper())
