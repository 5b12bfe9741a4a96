"""Entry points composing recognizer, constructor, assembler and validator.

Failures from an inner step are returned unchanged except for ``op``,
which names the entry point the caller invoked.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from date_utils.domain.errors import (
    invalid_date_format,
    invalid_datetime_format,
    invalid_time_component,
)
from date_utils.domain.types import DateType, FormatKind, OffsetType
from date_utils.services.assembler import datetime_to_date, timestamp_to_datetime, to_datetime
from date_utils.services.constructor import build_date
from date_utils.services.offset import resolve_offset
from date_utils.services.recognizer import FORMAT_LABELS, check_fields, recognize
from date_utils.services.result import DateResult
from date_utils.services.validator import reject_if_future

__all__ = [
    "datetime_to_date",
    "parse_datetime_string",
    "parse_response_string_to_datetime",
    "parse_to_datetime",
    "timestamp_to_datetime",
    "timestamp_to_offset",
]

DATETIME_LABEL = "YYYY-MM-DD HH:MM:SS"
_DATETIME_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r" (?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
)
_TIME_BOUNDS = {"hour": 23, "minute": 59, "second": 59}


def _propagate(op: str, result: DateResult[Any]) -> DateResult[Any]:
    return DateResult.failure(op, result.error)


def _finish(op: str, dt: datetime, now: datetime | None) -> DateResult[datetime]:
    if now is not None:
        checked = reject_if_future(dt, now)
        if not checked.ok:
            return _propagate(op, checked)
    return DateResult.success(op, dt)


def _parse(
    op: str,
    text: str,
    date_type: DateType | str,
    offset_type: OffsetType,
    *,
    strict_full_only: bool,
    now: datetime | None,
) -> DateResult[datetime]:
    recognized = recognize(text)
    if not recognized.ok:
        return _propagate(op, recognized)
    rec = recognized.value
    assert rec is not None

    if strict_full_only and rec.kind is not FormatKind.FULL:
        return DateResult.failure(op, invalid_date_format(text, [FORMAT_LABELS[FormatKind.FULL]]))

    built = build_date(rec.components, rec.kind, date_type)
    if not built.ok:
        return _propagate(op, built)
    assert built.value is not None

    return _finish(op, to_datetime(built.value, offset_type), now)


def parse_to_datetime(
    text: str,
    date_type: DateType | str,
    offset_type: OffsetType,
    *,
    strict_full_only: bool = False,
    now: datetime | None = None,
) -> DateResult[datetime]:
    """Parse a ``YYYY-MM-DD`` date to midnight at *offset_type*.

    Year-month and year-quarter strings are accepted too unless
    *strict_full_only* is set, in which case they fail with
    ``INVALID_DATE_FORMAT``. When *now* is given, dates after it fail with
    ``DATE_IN_FUTURE``.

    Example::

        result = parse_to_datetime("2025-01-01", DateType.START, OffsetType.utc())
        result.value  # datetime(2025, 1, 1, 0, 0, tzinfo=UTC)
    """
    return _parse(
        "parse_to_datetime",
        text,
        date_type,
        offset_type,
        strict_full_only=strict_full_only,
        now=now,
    )


def parse_response_string_to_datetime(
    text: str,
    date_type: DateType | str,
    offset_type: OffsetType,
    *,
    now: datetime | None = None,
) -> DateResult[datetime]:
    """Parse a time-period string as found in statistical API responses.

    Accepts all three shapes:

    - full date ``"2024-05-31"``
    - year-month ``"2024-05"``, resolved by *date_type* to the first or last day
    - quarter ``"2024-Q2"``, resolved to the first or last day of the quarter
    """
    return _parse(
        "parse_response_string_to_datetime",
        text,
        date_type,
        offset_type,
        strict_full_only=False,
        now=now,
    )


def parse_datetime_string(
    text: str,
    offset_type: OffsetType,
    *,
    now: datetime | None = None,
) -> DateResult[datetime]:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` wall-clock string at *offset_type*."""
    op = "parse_datetime_string"
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        return DateResult.failure(op, invalid_datetime_format(text, DATETIME_LABEL))

    fields = {name: int(raw) for name, raw in match.groupdict().items()}
    error = check_fields(text, {k: fields[k] for k in ("year", "month", "day")})
    if error is None:
        for name, upper in _TIME_BOUNDS.items():
            if fields[name] > upper:
                error = invalid_time_component(text, name, fields[name], f"0..{upper}")
                break
    if error is not None:
        return DateResult.failure(op, error)

    dt = datetime(**fields, tzinfo=offset_type.tzinfo)
    return _finish(op, dt, now)


def timestamp_to_offset(seconds: int) -> DateResult[OffsetType]:
    """Convert an offset in seconds (e.g. ``-14400``) to ``OffsetType``."""
    result = resolve_offset(seconds)
    if not result.ok:
        return _propagate("timestamp_to_offset", result)
    return DateResult.success("timestamp_to_offset", result.value)

