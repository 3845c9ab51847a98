from __future__ import annotations

import humanize


def format_bytes(value: int | float) -> str:
    return humanize.naturalsize(value)


def format_rate(bytes_per_sec: float) -> str:
    return f"{humanize.naturalsize(bytes_per_sec)}/s"
