"""DateResult — the universal return type of every date operation.

INVARIANT: operations report invalid input through ``DateResult.error``
and never raise for it. Exactly one of ``value``/``error`` is meaningful,
selected by ``ok``.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from date_utils.domain.errors import DateTimeError, DateTimeException

T = TypeVar("T")


class DateResult(BaseModel, Generic[T]):
    """Typed outcome of a date operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"recognize"``).
        value: The produced value on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    op: str
    value: T | None = None
    error: DateTimeError | None = None

    @classmethod
    def success(cls, op: str, value: T) -> DateResult[T]:
        return cls(ok=True, op=op, value=value)

    @classmethod
    def failure(cls, op: str, error: DateTimeError) -> DateResult[T]:
        return cls(ok=False, op=op, error=error)

    def unwrap(self) -> T:
        """Return ``value``, or raise :class:`DateTimeException` on failure."""
        if not self.ok:
            assert self.error is not None
            raise DateTimeException(self.error)
        return self.value  # type: ignore[return-value]
