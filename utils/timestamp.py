"""Microsecond UTC timestamps for log records and errors."""

import time
from datetime import datetime, timezone


def now_micros():
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """ISO 8601 with microseconds and a trailing Z."""
    if epoch_us is None:
        epoch_us = now_micros()
    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
