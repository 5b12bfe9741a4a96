"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, date_utils.toml only contains
overrides. An empty file (or none at all) parses full dates at UTC.
"""

from __future__ import annotations

from pydantic import BaseModel

from date_utils.domain.types import DateType


class ParsingConfig(BaseModel):
    """[parsing] section."""

    model_config = {"frozen": True}

    strict_full_only: bool = False
    reject_future: bool = False
    default_date_type: DateType = DateType.START


class OffsetConfig(BaseModel):
    """[offset] section.

    ``seconds`` is deliberately unbounded here: an out-of-range value is
    reported as ``INVALID_OFFSET`` when the offset is resolved.
    """

    model_config = {"frozen": True}

    seconds: int = 0
