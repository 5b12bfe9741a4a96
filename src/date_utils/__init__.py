"""date_utils — parse period strings and convert dates, datetimes and timestamps.

Every operation returns a :class:`DateResult`; inspect ``ok`` and then
``value`` or ``error`` (a :class:`DateTimeError` tagged with an
:class:`ErrorKind`).
"""

from date_utils.domain.components import DateComponents, RecognizedDate
from date_utils.domain.errors import DateTimeError, DateTimeException, ErrorKind
from date_utils.domain.types import DateType, FormatKind, OffsetKind, OffsetType
from date_utils.services.assembler import to_datetime
from date_utils.services.constructor import build_date
from date_utils.services.offset import resolve_offset
from date_utils.services.parsing import (
    datetime_to_date,
    parse_datetime_string,
    parse_response_string_to_datetime,
    parse_to_datetime,
    timestamp_to_datetime,
    timestamp_to_offset,
)
from date_utils.services.period import PeriodService
from date_utils.services.recognizer import recognize
from date_utils.services.result import DateResult
from date_utils.services.validator import reject_if_future

__all__ = [
    "DateComponents",
    "DateResult",
    "DateTimeError",
    "DateTimeException",
    "DateType",
    "ErrorKind",
    "FormatKind",
    "OffsetKind",
    "OffsetType",
    "PeriodService",
    "RecognizedDate",
    "build_date",
    "datetime_to_date",
    "parse_datetime_string",
    "parse_response_string_to_datetime",
    "parse_to_datetime",
    "recognize",
    "reject_if_future",
    "resolve_offset",
    "timestamp_to_datetime",
    "timestamp_to_offset",
    "to_datetime",
]
