"""Component Constructor — resolve recognized components to one calendar day.

A full date is taken as-is. Partial dates default by ``DateType``:
``START`` is the first day of the month/quarter, ``END`` the last.
"""

from __future__ import annotations

from datetime import date

from date_utils.domain.calendar import days_in_month, quarter_months
from date_utils.domain.components import DateComponents
from date_utils.domain.errors import DateTimeError, missing_component, unsupported_option
from date_utils.domain.types import DateType, FormatKind
from date_utils.services.result import DateResult

_REQUIRED_FIELD: dict[FormatKind, str] = {
    FormatKind.FULL: "day",
    FormatKind.YEAR_MONTH: "month",
    FormatKind.YEAR_QUARTER: "quarter",
}


def build_date(
    components: DateComponents,
    kind: FormatKind | str,
    policy: DateType | str,
) -> DateResult[date]:
    """Turn *components* of shape *kind* into a ``date`` using *policy*.

    *kind* and *policy* may be given as their string values (``"year_month"``,
    ``"end"``); anything outside the enums fails with ``PARSE_ERROR``.
    Components come pre-validated from the recognizer; nothing here
    re-checks month or day ranges.

    Examples:
        >>> c = DateComponents(year=2024, quarter=2)
        >>> build_date(c, FormatKind.YEAR_QUARTER, DateType.END).value
        datetime.date(2024, 6, 30)
    """
    op = "build_date"
    try:
        kind = FormatKind(kind)
    except ValueError:
        error = unsupported_option("format kind", kind, [k.value for k in FormatKind])
        return DateResult.failure(op, error)
    try:
        policy = DateType(policy)
    except ValueError:
        error = unsupported_option("date type", policy, [t.value for t in DateType])
        return DateResult.failure(op, error)

    year = components.year
    match kind:
        case FormatKind.FULL:
            if components.month is None or components.day is None:
                return DateResult.failure(op, _missing(kind, components))
            return DateResult.success(op, date(year, components.month, components.day))
        case FormatKind.YEAR_MONTH:
            if components.month is None or components.day is not None:
                return DateResult.failure(op, _missing(kind, components))
            first_month = last_month = components.month
        case FormatKind.YEAR_QUARTER:
            if components.quarter is None:
                return DateResult.failure(op, _missing(kind, components))
            first_month, last_month = quarter_months(components.quarter)

    match policy:
        case DateType.START:
            return DateResult.success(op, date(year, first_month, 1))
        case DateType.END:
            last_day = days_in_month(year, last_month)
            return DateResult.success(op, date(year, last_month, last_day))


def _missing(kind: FormatKind, components: DateComponents) -> DateTimeError:
    return missing_component(str(components), _REQUIRED_FIELD[kind], str(kind))
