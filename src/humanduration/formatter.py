"""Canonical rendering of durations, largest unit first."""

from __future__ import annotations

from datetime import timedelta

from humanduration.models import Duration
from humanduration.units import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)


class FormattedDuration:
    """Wraps a Duration and renders it when converted with ``str()``.

    The rendered text always parses back to the same value, but its exact
    composition is not guaranteed to match whatever text produced it.
    """

    __slots__ = ("_duration",)

    def __init__(self, duration: Duration) -> None:
        self._duration = duration

    @property
    def duration(self) -> Duration:
        return self._duration

    def get_ref(self) -> Duration:
        return self._duration

    def components(self) -> list[tuple[int, str]]:
        """Nonzero ``(value, suffix)`` pairs in rendering order."""
        secs = self._duration.seconds
        nanos = self._duration.nanoseconds

        years, ydays = divmod(secs, SECONDS_PER_YEAR)
        months, mdays = divmod(ydays, SECONDS_PER_MONTH)
        days, day_secs = divmod(mdays, SECONDS_PER_DAY)
        hours = day_secs // SECONDS_PER_HOUR
        minutes = day_secs % SECONDS_PER_HOUR // SECONDS_PER_MINUTE
        seconds = day_secs % SECONDS_PER_MINUTE

        millis = nanos // 1_000_000
        micros = nanos // 1000 % 1000
        nanosec = nanos % 1000

        items = [
            (years, _plural("year", years)),
            (months, _plural("month", months)),
            (days, _plural("day", days)),
            (hours, "h"),
            (minutes, "m"),
            (seconds, "s"),
            (millis, "ms"),
            (micros, "µs"),
            (nanosec, "ns"),
        ]
        return [(value, suffix) for value, suffix in items if value > 0]

    def __str__(self) -> str:
        parts = self.components()
        if not parts:
            return "0s"
        return " ".join(f"{value}{suffix}" for value, suffix in parts)

    def __repr__(self) -> str:
        return f"FormattedDuration({self._duration!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormattedDuration):
            return NotImplemented
        return self._duration == other._duration

    def __hash__(self) -> int:
        return hash(self._duration)


def _plural(name: str, value: int) -> str:
    return name + "s" if value > 1 else name


def format_duration(value: Duration | timedelta) -> FormattedDuration:
    """Wrap a duration for display.

    >>> str(format_duration(Duration(9420, 0)))
    '2h 37m'
    >>> str(format_duration(Duration(0, 32_000_000)))
    '32ms'
    """
    if isinstance(value, timedelta):
        value = Duration.from_timedelta(value)
    return FormattedDuration(value)
