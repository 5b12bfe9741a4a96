"""Policy and offset enums plus the fixed-offset value type.

``DateType`` decides how a partial date (year-month, year-quarter)
resolves to a single day. ``OffsetType`` is a fixed displacement from UTC;
no time-zone database is consulted anywhere in the package.
"""

from __future__ import annotations

from datetime import UTC, timedelta, timezone
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, model_validator

# timezone() accepts offsets strictly inside ±24h.
MAX_OFFSET_SECONDS = 86399


class DateType(StrEnum):
    """Defaulting policy for partial dates."""

    START = "start"
    END = "end"


class FormatKind(StrEnum):
    """The three recognized input shapes."""

    FULL = "full"
    YEAR_MONTH = "year_month"
    YEAR_QUARTER = "year_quarter"


class OffsetKind(StrEnum):
    UTC = "utc"
    LOCAL = "local"


class OffsetType(BaseModel):
    """A fixed UTC offset in whole seconds.

    Build through :meth:`utc` / :meth:`local`, or from raw seconds with
    ``services.offset.resolve_offset`` which reports bad input as a typed
    error instead of raising.
    """

    model_config = {"frozen": True}

    kind: OffsetKind = OffsetKind.UTC
    seconds: int = Field(default=0, ge=-MAX_OFFSET_SECONDS, le=MAX_OFFSET_SECONDS)

    @model_validator(mode="after")
    def _utc_is_zero(self) -> Self:
        if self.kind is OffsetKind.UTC and self.seconds != 0:
            msg = f"UTC offset must be 0 seconds, got {self.seconds}"
            raise ValueError(msg)
        return self

    @classmethod
    def utc(cls) -> OffsetType:
        return cls(kind=OffsetKind.UTC)

    @classmethod
    def local(cls, seconds: int) -> OffsetType:
        return cls(kind=OffsetKind.LOCAL, seconds=seconds)

    @property
    def delta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    @property
    def tzinfo(self) -> timezone:
        """The ``datetime.timezone`` carried by assembled datetimes."""
        if self.kind is OffsetKind.UTC:
            return UTC
        return timezone(self.delta)

    def __str__(self) -> str:
        if self.kind is OffsetKind.UTC:
            return "UTC"
        sign = "-" if self.seconds < 0 else "+"
        hours, rest = divmod(abs(self.seconds), 3600)
        minutes, secs = divmod(rest, 60)
        return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
