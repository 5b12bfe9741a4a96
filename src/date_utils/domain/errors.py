"""Closed error taxonomy for date handling.

Every failure path in the package maps to exactly one ``ErrorKind``.
``detail`` carries the offending value and, where one applies, the bound
or pattern it violated, so callers never need to re-parse the input to
explain what went wrong.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorKind(StrEnum):
    """Failure kinds reported through ``DateResult.error``."""

    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_DATETIME_FORMAT = "INVALID_DATETIME_FORMAT"
    INVALID_TIME_COMPONENT = "INVALID_TIME_COMPONENT"
    DATE_IN_FUTURE = "DATE_IN_FUTURE"
    INVALID_OFFSET = "INVALID_OFFSET"
    PARSE_ERROR = "PARSE_ERROR"


class DateTimeError(BaseModel):
    """Structured error payload within a DateResult."""

    model_config = {"frozen": True}

    kind: ErrorKind
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class DateTimeException(Exception):
    """Raised by ``DateResult.unwrap()`` for a failed result."""

    def __init__(self, error: DateTimeError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


# --- Constructors, one per kind ---


def invalid_date_format(value: str, expected: list[str]) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_DATE_FORMAT,
        message=f"Failed to parse date {value!r}: expected one of {', '.join(expected)}",
        detail={"value": value, "expected": expected},
    )


def invalid_timestamp(value: int, minimum: int, maximum: int) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_TIMESTAMP,
        message=(
            f"Failed to convert timestamp {value} into datetime: "
            f"outside representable range {minimum}..{maximum}"
        ),
        detail={"value": value, "min": minimum, "max": maximum},
    )


def invalid_datetime_format(value: str, expected: str) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_DATETIME_FORMAT,
        message=f"Invalid datetime format. Expected {expected}, but got {value!r}",
        detail={"value": value, "expected": expected},
    )


def invalid_time_component(
    value: str,
    component: str,
    component_value: int,
    bound: str,
) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_TIME_COMPONENT,
        message=(
            f"Invalid time component in {value!r}: "
            f"{component}={component_value} (expected {bound})"
        ),
        detail={
            "value": value,
            "component": component,
            "component_value": component_value,
            "bound": bound,
        },
    )


def missing_component(value: str, component: str, kind: str) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_TIME_COMPONENT,
        message=f"Invalid time component in {value!r}: {kind} date requires {component}",
        detail={
            "value": value,
            "component": component,
            "component_value": None,
            "bound": f"required for {kind}",
        },
    )


def date_in_future(value: str, now: str) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.DATE_IN_FUTURE,
        message=f"Provided date {value!r} is in the future: {value!r} > {now!r}",
        detail={"value": value, "now": now},
    )


def invalid_offset(seconds: int, bound: int) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.INVALID_OFFSET,
        message=f"Failed to convert offset {seconds}s into offset: magnitude exceeds {bound}s",
        detail={"seconds": seconds, "bound": bound},
    )


def parse_error(message: str, **detail: Any) -> DateTimeError:
    return DateTimeError(
        kind=ErrorKind.PARSE_ERROR,
        message=f"Parsing failed: {message}",
        detail=detail,
    )


def unsupported_option(option: str, value: Any, allowed: list[str]) -> DateTimeError:
    """A policy or format argument outside its enum, e.g. ``date_type="middle"``."""
    return parse_error(
        f"unsupported {option} {value!r}, expected one of {', '.join(allowed)}",
        value=repr(value),
        option=option,
        allowed=allowed,
    )
