"""Offset Resolver — raw signed seconds to a validated ``OffsetType``."""

from __future__ import annotations

from date_utils.domain.errors import invalid_offset
from date_utils.domain.types import MAX_OFFSET_SECONDS, OffsetType
from date_utils.services.result import DateResult


def resolve_offset(seconds: int) -> DateResult[OffsetType]:
    """Map *seconds* to ``OffsetType``; first matching rule wins.

    - ``0`` is UTC.
    - ``abs(seconds) > 86399`` fails with ``INVALID_OFFSET``.
    - anything else is a local offset of that many seconds.

    Examples:
        >>> resolve_offset(-14400).value.seconds
        -14400
    """
    op = "resolve_offset"
    if seconds == 0:
        return DateResult.success(op, OffsetType.utc())
    if abs(seconds) > MAX_OFFSET_SECONDS:
        return DateResult.failure(op, invalid_offset(seconds, MAX_OFFSET_SECONDS))
    return DateResult.success(op, OffsetType.local(seconds))
