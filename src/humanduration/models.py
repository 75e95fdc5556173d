"""Pydantic model for an exact duration value."""

from __future__ import annotations

from datetime import timedelta
from functools import total_ordering
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from humanduration.units import NANOS_PER_SEC, U64_MAX


@total_ordering
class Duration(BaseModel):
    """Elapsed time as whole seconds plus sub-second nanoseconds."""

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(default=0, ge=0, le=U64_MAX)
    nanoseconds: int = Field(default=0, ge=0, lt=NANOS_PER_SEC)

    def __init__(self, seconds: int = 0, nanoseconds: int = 0, **data: Any) -> None:
        super().__init__(seconds=seconds, nanoseconds=nanoseconds, **data)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        seconds, nanoseconds = divmod(nanos, NANOS_PER_SEC)
        return cls(seconds, nanoseconds)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        if value < timedelta(0):
            raise ValueError(f"Negative durations are not supported: {value}")
        seconds = value.days * 86400 + value.seconds
        return cls(seconds, value.microseconds * 1000)

    @classmethod
    def parse(cls, text: str) -> Duration:
        from humanduration.parser import parse_duration

        return parse_duration(text)

    def as_nanos(self) -> int:
        return self.seconds * NANOS_PER_SEC + self.nanoseconds

    def total_seconds(self) -> float:
        """Float seconds, for display only; loses precision on large values."""
        return self.seconds + self.nanoseconds / NANOS_PER_SEC

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating to microseconds."""
        return timedelta(seconds=self.seconds, microseconds=self.nanoseconds // 1000)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self.seconds, self.nanoseconds) < (other.seconds, other.nanoseconds)

    def __str__(self) -> str:
        from humanduration.formatter import format_duration

        return str(format_duration(self))

    def __repr__(self) -> str:
        return f"Duration({self.seconds}, {self.nanoseconds})"
