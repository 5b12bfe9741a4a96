"""Tests for the format recognizer: shapes, priority, and error kinds."""

import pytest

from date_utils.domain.components import DateComponents
from date_utils.domain.errors import ErrorKind
from date_utils.domain.types import FormatKind
from date_utils.services.recognizer import check_fields, recognize


class TestRecognizeShapes:
    def test_full(self) -> None:
        result = recognize("2024-05-31")
        assert result.ok
        assert result.value is not None
        assert result.value.kind is FormatKind.FULL
        assert result.value.components == DateComponents(year=2024, month=5, day=31)
        assert result.value.source == "2024-05-31"

    def test_year_month(self) -> None:
        result = recognize("2024-05")
        assert result.ok
        assert result.value is not None
        assert result.value.kind is FormatKind.YEAR_MONTH
        assert result.value.components == DateComponents(year=2024, month=5)

    def test_year_quarter(self) -> None:
        result = recognize("2024-Q2")
        assert result.ok
        assert result.value is not None
        assert result.value.kind is FormatKind.YEAR_QUARTER
        assert result.value.components == DateComponents(year=2024, quarter=2)

    def test_full_takes_priority(self) -> None:
        """A full date is never read as a year-month prefix."""
        result = recognize("2024-05-01")
        assert result.value is not None
        assert result.value.kind is FormatKind.FULL
        assert result.value.components.day == 1

    def test_leap_day(self) -> None:
        assert recognize("2024-02-29").ok

    def test_idempotent(self) -> None:
        assert recognize("2024-Q3") == recognize("2024-Q3")


class TestRecognizeInvalidComponents:
    @pytest.mark.parametrize(
        "text,component,component_value",
        [
            ("2024-13", "month", 13),
            ("2024-00", "month", 0),
            ("2024-Q5", "quarter", 5),
            ("2024-Q0", "quarter", 0),
            ("2023-02-29", "day", 29),
            ("2024-04-31", "day", 31),
            ("2024-05-00", "day", 0),
            ("2025-14-40", "month", 14),
            ("0000-01-01", "year", 0),
            ("0000-Q1", "year", 0),
        ],
    )
    def test_invalid_time_component(self, text: str, component: str, component_value: int) -> None:
        result = recognize(text)
        assert not result.ok
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_TIME_COMPONENT
        assert result.error.detail["value"] == text
        assert result.error.detail["component"] == component
        assert result.error.detail["component_value"] == component_value

    def test_day_bound_reflects_month(self) -> None:
        result = recognize("2023-02-29")
        assert result.error is not None
        assert result.error.detail["bound"] == "1..28"


class TestRecognizeFormatErrors:
    @pytest.mark.parametrize(
        "text",
        ["24-05-31", "202-05-10", "2024-5-1", "2024-5", "20240-05-01", "2024-Q12", "2024-05-031"],
    )
    def test_date_like_but_wrong_widths(self, text: str) -> None:
        result = recognize(text)
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_DATE_FORMAT
        assert result.error.detail["expected"] == ["YYYY-MM-DD", "YYYY-MM", "YYYY-QN"]

    @pytest.mark.parametrize(
        "text",
        [
            "2024/05/31",
            "",
            "2025-05-40 12:",
            "2025-05-10 12:70",
            " 2024-05-31",
            "2024-05-31\n",
            "2024-q2",
            "May 2024",
            "２０２４-05-31",
        ],
    )
    def test_unsupported_is_parse_error(self, text: str) -> None:
        result = recognize(text)
        assert result.error is not None
        assert result.error.kind is ErrorKind.PARSE_ERROR
        assert result.error.detail == {"value": text}


class TestCheckFields:
    def test_valid(self) -> None:
        assert check_fields("2024-02-29", {"year": 2024, "month": 2, "day": 29}) is None

    def test_year_checked_first(self) -> None:
        err = check_fields("0000-13", {"year": 0, "month": 13})
        assert err is not None
        assert err.detail["component"] == "year"
