# taptimer/core/formatting.py
# Duration formatting, markdown cell escaping & random id helpers

from __future__ import annotations

import random
import string
import time
from datetime import datetime, timezone

_BASE36 = string.digits + string.ascii_lowercase


# * Format milliseconds as HH:MM:SS (truncated to whole seconds, hours unbounded)
def format_duration(ms: int) -> str:
    total_seconds = max(0, int(ms)) // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


# * Escape pipes & trim so user text cannot break a markdown table row
def escape_table_cell(value: object) -> str:
    text = "" if value is None else str(value)
    return text.replace("|", "\\|").strip()


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    n = abs(value)
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(digits))


def random_suffix(length: int = 5) -> str:
    return "".join(random.choice(_BASE36) for _ in range(length))


# * Globally unique id for a freshly inserted timer block
def create_timer_id(now_ms: int | None = None) -> str:
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"timer-{to_base36(stamp)}-{random_suffix()}"


# * ISO-8601 UTC timestamp w/ millisecond precision & Z suffix
def iso_timestamp(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# * Locale-formatted local timestamp
def local_timestamp(moment: datetime) -> str:
    return moment.astimezone().strftime("%c")
