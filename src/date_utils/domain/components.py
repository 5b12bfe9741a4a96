"""Date components extracted from an input string.

INVARIANT: a ``DateComponents`` instance always describes a real period.
The recognizer checks every field before building one, so a
``ValidationError`` here means a caller bypassed the recognizer.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from date_utils.domain.calendar import MAX_YEAR, MIN_YEAR, days_in_month
from date_utils.domain.types import FormatKind


class DateComponents(BaseModel):
    """Year plus either month (and optional day) or quarter."""

    model_config = {"frozen": True}

    year: int = Field(ge=MIN_YEAR, le=MAX_YEAR)
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)
    quarter: int | None = Field(default=None, ge=1, le=4)

    @model_validator(mode="after")
    def _consistent(self) -> Self:
        if self.quarter is not None and (self.month is not None or self.day is not None):
            raise ValueError("quarter cannot be combined with month or day")
        if self.quarter is None and self.month is None:
            raise ValueError("either month or quarter is required")
        if self.day is not None:
            if self.month is None:
                raise ValueError("day requires month")
            limit = days_in_month(self.year, self.month)
            if self.day > limit:
                period = f"{self.year:04d}-{self.month:02d}"
                msg = f"day {self.day} out of range for {period} (max {limit})"
                raise ValueError(msg)
        return self

    @property
    def kind(self) -> FormatKind:
        """The input shape these components were read from."""
        if self.quarter is not None:
            return FormatKind.YEAR_QUARTER
        if self.day is not None:
            return FormatKind.FULL
        return FormatKind.YEAR_MONTH

    def __str__(self) -> str:
        if self.quarter is not None:
            return f"{self.year:04d}-Q{self.quarter}"
        text = f"{self.year:04d}-{self.month:02d}"
        if self.day is not None:
            text += f"-{self.day:02d}"
        return text


class RecognizedDate(BaseModel):
    """Output of the format recognizer."""

    model_config = {"frozen": True}

    components: DateComponents
    kind: FormatKind
    source: str
