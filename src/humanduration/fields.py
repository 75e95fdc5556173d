"""Pydantic field type for durations written as human-friendly strings."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from humanduration.formatter import format_duration
from humanduration.models import Duration
from humanduration.parser import parse_duration


def _coerce(value: Any) -> Any:
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    if isinstance(value, bool):
        raise ValueError("Expected a duration, got a boolean")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Negative durations are not supported: {value}")
        return Duration(value)
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    # Mappings and anything else go through the model's own validation.
    return value


def _serialize(value: Duration) -> str:
    return str(format_duration(value))


HumanDuration = Annotated[
    Duration,
    BeforeValidator(_coerce),
    PlainSerializer(_serialize, return_type=str),
]
"""A Duration that validates from ``"2h 37min"``, seconds, or a timedelta.

Example::

    class ServerConfig(BaseModel):
        timeout: HumanDuration = Field("30s", validate_default=True)
"""
