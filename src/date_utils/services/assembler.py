"""DateTime Assembler — dates, offset-aware datetimes and Unix timestamps.

Only fixed offset arithmetic is used. Assembled datetimes always carry the
``datetime.timezone`` of their ``OffsetType``.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta

from date_utils.domain.errors import invalid_timestamp
from date_utils.domain.types import OffsetType
from date_utils.services.result import DateResult

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECOND = timedelta(seconds=1)
MIN_TIMESTAMP = (datetime.min.replace(tzinfo=UTC) - EPOCH) // _SECOND
MAX_TIMESTAMP = (datetime.max.replace(tzinfo=UTC) - EPOCH) // _SECOND


def to_datetime(d: date, offset: OffsetType) -> datetime:
    """Midnight of *d* at *offset*."""
    return datetime.combine(d, time.min, tzinfo=offset.tzinfo)


def timestamp_to_datetime(timestamp: int, offset: OffsetType) -> DateResult[datetime]:
    """Render the instant *timestamp* (seconds since epoch) at *offset*.

    Fails with ``INVALID_TIMESTAMP`` when the instant, or its wall-clock
    rendering at *offset*, falls outside years 1..9999.

    Examples:
        >>> timestamp_to_datetime(1732440896, OffsetType.utc()).value.isoformat()
        '2024-11-24T09:34:56+00:00'
    """
    op = "timestamp_to_datetime"
    if not MIN_TIMESTAMP <= timestamp <= MAX_TIMESTAMP:
        return DateResult.failure(op, invalid_timestamp(timestamp, MIN_TIMESTAMP, MAX_TIMESTAMP))
    instant = EPOCH + timedelta(seconds=timestamp)
    try:
        return DateResult.success(op, instant.astimezone(offset.tzinfo))
    except OverflowError:
        # In range as UTC, but the offset pushes the wall clock past year 1 or 9999.
        return DateResult.failure(op, invalid_timestamp(timestamp, MIN_TIMESTAMP, MAX_TIMESTAMP))


def datetime_to_date(dt: datetime) -> date:
    """Calendar date of *dt*, dropping time-of-day and offset."""
    return dt.date()
