"""Future-Date Validator.

``now`` is always passed in by the caller; nothing here reads the clock.
"""

from __future__ import annotations

from datetime import datetime

from date_utils.domain.errors import date_in_future, parse_error
from date_utils.services.result import DateResult


def _is_aware(dt: datetime) -> bool:
    return dt.tzinfo is not None and dt.utcoffset() is not None


def reject_if_future(dt: datetime, now: datetime) -> DateResult[None]:
    """Fail with ``DATE_IN_FUTURE`` if *dt* is a later instant than *now*.

    Both datetimes must be offset-aware; they are compared as absolute
    instants, so equal instants at different offsets pass.
    """
    op = "reject_if_future"
    for name, value in (("value", dt), ("now", now)):
        if not _is_aware(value):
            raw = value.isoformat()
            error = parse_error(f"cannot compare naive datetime {raw!r}", **{name: raw})
            return DateResult.failure(op, error)
    if dt > now:
        return DateResult.failure(op, date_in_future(dt.isoformat(), now.isoformat()))
    return DateResult.success(op, None)
