"""humanduration: parse and format human-friendly durations."""

from humanduration.errors import (
    DurationError,
    EmptyDuration,
    InvalidCharacter,
    NumberExpected,
    NumberOverflow,
    UnknownUnit,
)
from humanduration.fields import HumanDuration
from humanduration.formatter import FormattedDuration, format_duration
from humanduration.models import Duration
from humanduration.parser import parse_duration

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "DurationError",
    "EmptyDuration",
    "FormattedDuration",
    "HumanDuration",
    "InvalidCharacter",
    "NumberExpected",
    "NumberOverflow",
    "UnknownUnit",
    "format_duration",
    "parse_duration",
]
