"""Tests for the component constructor's defaulting rules."""

from datetime import date

import pytest

from date_utils.domain.components import DateComponents
from date_utils.domain.errors import ErrorKind
from date_utils.domain.types import DateType, FormatKind
from date_utils.services.constructor import build_date


class TestFullDate:
    @pytest.mark.parametrize("policy", list(DateType))
    def test_policy_ignored(self, policy: DateType) -> None:
        c = DateComponents(year=2024, month=5, day=17)
        assert build_date(c, FormatKind.FULL, policy).value == date(2024, 5, 17)


class TestYearMonth:
    def test_start(self) -> None:
        c = DateComponents(year=2024, month=5)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.START).value == date(2024, 5, 1)

    def test_end(self) -> None:
        c = DateComponents(year=2024, month=5)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.END).value == date(2024, 5, 31)

    def test_end_leap_february(self) -> None:
        c = DateComponents(year=2024, month=2)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.END).value == date(2024, 2, 29)

    def test_end_non_leap_february(self) -> None:
        c = DateComponents(year=2023, month=2)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.END).value == date(2023, 2, 28)

    def test_end_century_non_leap(self) -> None:
        c = DateComponents(year=1900, month=2)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.END).value == date(1900, 2, 28)

    def test_end_thirty_day_month(self) -> None:
        c = DateComponents(year=2024, month=9)
        assert build_date(c, FormatKind.YEAR_MONTH, DateType.END).value == date(2024, 9, 30)


class TestYearQuarter:
    @pytest.mark.parametrize(
        "quarter,start,end",
        [
            (1, date(2024, 1, 1), date(2024, 3, 31)),
            (2, date(2024, 4, 1), date(2024, 6, 30)),
            (3, date(2024, 7, 1), date(2024, 9, 30)),
            (4, date(2024, 10, 1), date(2024, 12, 31)),
        ],
    )
    def test_boundaries(self, quarter: int, start: date, end: date) -> None:
        c = DateComponents(year=2024, quarter=quarter)
        assert build_date(c, FormatKind.YEAR_QUARTER, DateType.START).value == start
        assert build_date(c, FormatKind.YEAR_QUARTER, DateType.END).value == end


class TestKindMismatch:
    @pytest.mark.parametrize(
        "components,kind",
        [
            (DateComponents(year=2024, month=5), FormatKind.FULL),
            (DateComponents(year=2024, quarter=1), FormatKind.YEAR_MONTH),
            (DateComponents(year=2024, month=5, day=1), FormatKind.YEAR_MONTH),
            (DateComponents(year=2024, month=5), FormatKind.YEAR_QUARTER),
        ],
    )
    def test_mismatch_is_invalid_time_component(
        self, components: DateComponents, kind: FormatKind
    ) -> None:
        result = build_date(components, kind, DateType.START)
        assert not result.ok
        assert result.error is not None
        assert result.error.kind is ErrorKind.INVALID_TIME_COMPONENT
        assert result.op == "build_date"


class TestPolicyAndKindValues:
    def test_string_policy_accepted(self) -> None:
        c = DateComponents(year=2024, month=5)
        assert build_date(c, FormatKind.YEAR_MONTH, "start").value == date(2024, 5, 1)
        assert build_date(c, FormatKind.YEAR_MONTH, "end").value == date(2024, 5, 31)

    def test_string_kind_accepted(self) -> None:
        c = DateComponents(year=2024, month=5)
        assert build_date(c, "year_month", DateType.START).value == date(2024, 5, 1)

    @pytest.mark.parametrize("policy", ["bogus", "START", "", None])
    def test_unknown_policy_is_parse_error(self, policy: object) -> None:
        c = DateComponents(year=2024, month=5)
        result = build_date(c, FormatKind.YEAR_MONTH, policy)  # type: ignore[arg-type]
        assert not result.ok
        assert result.error is not None
        assert result.error.kind is ErrorKind.PARSE_ERROR
        assert result.error.detail["option"] == "date type"
        assert result.error.detail["allowed"] == ["start", "end"]

    def test_unknown_kind_is_parse_error(self) -> None:
        c = DateComponents(year=2024, month=5)
        result = build_date(c, "weekly", DateType.START)
        assert result.error is not None
        assert result.error.kind is ErrorKind.PARSE_ERROR
        assert result.error.detail["option"] == "format kind"


class TestMissingComponentDetail:
    def test_detail_matches_other_component_errors(self) -> None:
        c = DateComponents(year=2024, month=5)
        result = build_date(c, FormatKind.YEAR_QUARTER, DateType.START)
        assert result.error is not None
        assert result.error.detail == {
            "value": "2024-05",
            "component": "quarter",
            "component_value": None,
            "bound": "required for year_quarter",
        }
