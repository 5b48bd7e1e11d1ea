from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime

from .models import RequestTimestamps

ISO_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_iso_timestamp(dt: datetime) -> str:
    return _as_utc(dt).strftime(ISO_TIMESTAMP_FORMAT)


def format_http_date(dt: datetime) -> str:
    # usegmt gives English day/month names regardless of the process locale.
    return format_datetime(_as_utc(dt).replace(microsecond=0), usegmt=True)


def request_timestamps(instant: datetime) -> RequestTimestamps:
    """
    Derive both timestamp encodings from a single instant.

    Naive datetimes are treated as UTC.
    """
    return RequestTimestamps(iso=format_iso_timestamp(instant), http_date=format_http_date(instant))
