"""Format Recognizer — classify a string and extract its date fields.

Three shapes are supported, tried in this order so the longer full date
is never read as a truncated year-month:

- ``YYYY-MM-DD`` (full)
- ``YYYY-MM``    (year-month)
- ``YYYY-QN``    (year-quarter, ``N`` in 1..4)

Fields are ASCII digits of exact width with no surrounding whitespace.
"""

from __future__ import annotations

import re

from date_utils.domain.calendar import MAX_YEAR, MIN_YEAR, days_in_month
from date_utils.domain.components import DateComponents, RecognizedDate
from date_utils.domain.errors import (
    DateTimeError,
    invalid_date_format,
    invalid_time_component,
    parse_error,
)
from date_utils.domain.types import FormatKind
from date_utils.services.result import DateResult

FORMAT_PATTERNS: dict[FormatKind, re.Pattern[str]] = {
    FormatKind.FULL: re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"),
    FormatKind.YEAR_MONTH: re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})"),
    FormatKind.YEAR_QUARTER: re.compile(r"(?P<year>[0-9]{4})-Q(?P<quarter>[0-9])"),
}

FORMAT_LABELS: dict[FormatKind, str] = {
    FormatKind.FULL: "YYYY-MM-DD",
    FormatKind.YEAR_MONTH: "YYYY-MM",
    FormatKind.YEAR_QUARTER: "YYYY-QN",
}

# Hyphen-separated numeric fields of any width: date-shaped but malformed.
_DATE_LIKE_RE = re.compile(r"[0-9]+-Q?[0-9]+(?:-[0-9]+)?")


def check_fields(text: str, fields: dict[str, int]) -> DateTimeError | None:
    """Return an ``INVALID_TIME_COMPONENT`` error for the first bad field, else None.

    Checked in order year, month, day, quarter; ``day`` is checked against
    the real length of the parsed month, so ``2023-02-29`` fails.
    """
    year = fields["year"]
    if not MIN_YEAR <= year <= MAX_YEAR:
        return invalid_time_component(text, "year", year, f"{MIN_YEAR}..{MAX_YEAR}")

    month = fields.get("month")
    if month is not None and not 1 <= month <= 12:
        return invalid_time_component(text, "month", month, "1..12")

    day = fields.get("day")
    if day is not None and month is not None:
        limit = days_in_month(year, month)
        if not 1 <= day <= limit:
            return invalid_time_component(text, "day", day, f"1..{limit}")

    quarter = fields.get("quarter")
    if quarter is not None and not 1 <= quarter <= 4:
        return invalid_time_component(text, "quarter", quarter, "1..4")

    return None


def recognize(text: str) -> DateResult[RecognizedDate]:
    """Classify *text* into one of the supported shapes and extract its fields."""
    op = "recognize"
    for kind, pattern in FORMAT_PATTERNS.items():
        match = pattern.fullmatch(text)
        if match is None:
            continue
        fields = {name: int(raw) for name, raw in match.groupdict().items()}
        error = check_fields(text, fields)
        if error is not None:
            return DateResult.failure(op, error)
        recognized = RecognizedDate(
            components=DateComponents(**fields),
            kind=kind,
            source=text,
        )
        return DateResult.success(op, recognized)

    if _DATE_LIKE_RE.fullmatch(text):
        return DateResult.failure(op, invalid_date_format(text, list(FORMAT_LABELS.values())))
    return DateResult.failure(op, parse_error(f"Unsupported date format: {text!r}", value=text))
