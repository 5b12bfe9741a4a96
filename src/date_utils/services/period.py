"""PeriodService — settings-driven facade over the parsing entry points.

The pure functions in :mod:`date_utils.services.parsing` take every policy
as an argument. This service reads those arguments from
:class:`~date_utils.config.settings.DateUtilsSettings` once per call and
passes them through explicitly, so the core never sees global state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from date_utils.config.logging import configure_from_settings
from date_utils.config.settings import DateUtilsSettings
from date_utils.domain.types import DateType, OffsetType
from date_utils.services.offset import resolve_offset
from date_utils.services.parsing import (
    parse_datetime_string,
    parse_response_string_to_datetime,
    parse_to_datetime,
    timestamp_to_datetime,
)
from date_utils.services.result import DateResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class PeriodService:
    """Parse and convert dates using configured offset and policies.

    Usage::

        svc = PeriodService(DateUtilsSettings.load())
        result = svc.parse_response("2024-Q2", DateType.END)
        if result.ok:
            print(result.value)
    """

    def __init__(self, settings: DateUtilsSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock or utc_now
        configure_from_settings(settings)

    @property
    def settings(self) -> DateUtilsSettings:
        return self._settings

    def offset(self) -> DateResult[OffsetType]:
        """Resolve the configured ``[offset] seconds``."""
        return self._logged(resolve_offset(self._settings.offset.seconds))

    def parse(self, text: str, date_type: DateType | None = None) -> DateResult[datetime]:
        """Parse with ``parse_to_datetime`` honouring ``strict_full_only``."""
        offset = self.offset()
        if not offset.ok:
            return DateResult.failure("parse_to_datetime", offset.error)
        parsing = self._settings.parsing
        return self._logged(
            parse_to_datetime(
                text,
                date_type or parsing.default_date_type,
                offset.value,
                strict_full_only=parsing.strict_full_only,
                now=self._now(),
            )
        )

    def parse_response(self, text: str, date_type: DateType | None = None) -> DateResult[datetime]:
        """Parse a full, year-month or quarter string."""
        offset = self.offset()
        if not offset.ok:
            return DateResult.failure("parse_response_string_to_datetime", offset.error)
        return self._logged(
            parse_response_string_to_datetime(
                text,
                date_type or self._settings.parsing.default_date_type,
                offset.value,
                now=self._now(),
            )
        )

    def parse_datetime(self, text: str) -> DateResult[datetime]:
        offset = self.offset()
        if not offset.ok:
            return DateResult.failure("parse_datetime_string", offset.error)
        return self._logged(parse_datetime_string(text, offset.value, now=self._now()))

    def from_timestamp(self, timestamp: int) -> DateResult[datetime]:
        offset = self.offset()
        if not offset.ok:
            return DateResult.failure("timestamp_to_datetime", offset.error)
        return self._logged(timestamp_to_datetime(timestamp, offset.value))

    # --- internals ---

    def _now(self) -> datetime | None:
        if not self._settings.parsing.reject_future:
            return None
        return self._clock()

    def _logged(self, result: DateResult[Any]) -> DateResult[Any]:
        if not result.ok:
            assert result.error is not None
            logger.debug("%s failed: %s", result.op, result.error)
        return result
