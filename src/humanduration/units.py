"""Unit table and overflow-checked u64 arithmetic."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from humanduration.errors import NumberOverflow

U64_MAX = 2**64 - 1
NANOS_PER_SEC = 1_000_000_000

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = SECONDS_PER_DAY * 7
SECONDS_PER_MONTH = 2_630_016  # 30.44d
SECONDS_PER_YEAR = 31_557_600  # 365.25d


class Unit(NamedTuple):
    """Multiplier for one unit; sub-second units count nanoseconds."""

    multiplier: int
    subsecond: bool = False


NANOSECOND = Unit(1, subsecond=True)
MICROSECOND = Unit(1_000, subsecond=True)
MILLISECOND = Unit(1_000_000, subsecond=True)
SECOND = Unit(1)
MINUTE = Unit(SECONDS_PER_MINUTE)
HOUR = Unit(SECONDS_PER_HOUR)
DAY = Unit(SECONDS_PER_DAY)
WEEK = Unit(SECONDS_PER_WEEK)
MONTH = Unit(SECONDS_PER_MONTH)
YEAR = Unit(SECONDS_PER_YEAR)

_SPELLINGS: dict[Unit, tuple[str, ...]] = {
    NANOSECOND: ("ns", "nsec", "nanos"),
    MICROSECOND: ("us", "µs", "usec"),
    MILLISECOND: ("ms", "msec", "millis"),
    SECOND: ("s", "sec", "secs", "second", "seconds"),
    MINUTE: ("m", "min", "mins", "minute", "minutes"),
    HOUR: ("h", "hr", "hrs", "hour", "hours"),
    DAY: ("d", "day", "days"),
    WEEK: ("w", "week", "weeks"),
    MONTH: ("M", "month", "months"),
    YEAR: ("y", "year", "years"),
}

# Case-sensitive: "M" is a month, "m" is a minute.
UNITS: MappingProxyType[str, Unit] = MappingProxyType({
    spelling: unit
    for unit, spellings in _SPELLINGS.items()
    for spelling in spellings
})


def supported_units() -> list[tuple[str, ...]]:
    """Accepted spellings grouped by unit, smallest unit first."""
    return list(_SPELLINGS.values())


def lookup_unit(name: str) -> Unit | None:
    return UNITS.get(name)


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > U64_MAX:
        raise NumberOverflow()
    return result


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > U64_MAX:
        raise NumberOverflow()
    return result


def apply_unit(value: int, unit: Unit) -> tuple[int, int]:
    """Return the ``(seconds, nanoseconds)`` contribution of ``value`` units."""
    if unit.subsecond:
        return 0, checked_mul(value, unit.multiplier)
    return checked_mul(value, unit.multiplier), 0
