"""Single-pass parser for human-friendly duration strings."""

from __future__ import annotations

from humanduration.errors import (
    EmptyDuration,
    InvalidCharacter,
    NumberExpected,
    NumberOverflow,
    UnknownUnit,
)
from humanduration.models import Duration
from humanduration.units import (
    NANOS_PER_SEC,
    U64_MAX,
    apply_unit,
    checked_add,
    lookup_unit,
)
from humanduration.utils.logging import get_logger

log = get_logger(__name__)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_unit_char(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "µ"


class _Parser:
    """Forward-only cursor over ``text`` that tracks UTF-8 byte offsets."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.src = text.encode("utf-8")
        self.pos = 0
        self.offset = 0
        self.seconds = 0
        self.nanos = 0

    def peek(self) -> str | None:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def advance(self) -> None:
        self.offset += len(self.text[self.pos].encode("utf-8"))
        self.pos += 1

    def skip_whitespace(self) -> None:
        while (c := self.peek()) is not None and c.isspace():
            self.advance()

    def parse_number(self) -> int:
        """Read a run of digits; the cursor must be on a digit."""
        n = 0
        while (c := self.peek()) is not None and _is_digit(c):
            n = n * 10 + (ord(c) - ord("0"))
            if n > U64_MAX:
                raise NumberOverflow()
            self.advance()
        return n

    def parse_unit_name(self) -> tuple[int, int]:
        """Read a run of unit letters and return its byte span."""
        start = self.offset
        while (c := self.peek()) is not None and _is_unit_char(c):
            self.advance()
        return start, self.offset

    def apply(self, value: int, start: int, end: int) -> None:
        name = self.src[start:end].decode("utf-8")
        unit = lookup_unit(name)
        if unit is None:
            raise UnknownUnit(start, end, name, value)
        sec, nsec = apply_unit(value, unit)
        nsec = checked_add(self.nanos, nsec)
        if nsec >= NANOS_PER_SEC:
            sec = checked_add(sec, nsec // NANOS_PER_SEC)
            nsec %= NANOS_PER_SEC
        self.seconds = checked_add(self.seconds, sec)
        self.nanos = nsec

    def parse(self) -> Duration:
        if not self.text or self.text.isspace():
            raise EmptyDuration()

        while True:
            self.skip_whitespace()
            c = self.peek()
            if c is None:
                return Duration(self.seconds, self.nanos)
            if not _is_digit(c):
                raise NumberExpected(self.offset)

            value = self.parse_number()

            # Whitespace may separate a number from its unit, but may not
            # split the number itself.
            self.skip_whitespace()
            c = self.peek()
            if c is not None and not _is_unit_char(c):
                raise InvalidCharacter(self.offset)

            start, end = self.parse_unit_name()
            c = self.peek()
            if c is not None and not _is_digit(c) and not c.isspace():
                raise InvalidCharacter(self.offset)
            self.apply(value, start, end)


def parse_duration(text: str) -> Duration:
    """Parse a duration such as ``1hour 12min 5s``.

    The input is a concatenation of time spans, each an integer followed by
    a unit suffix:

    * ``nsec``, ``ns``, ``nanos`` -- nanoseconds
    * ``usec``, ``us``, ``µs`` -- microseconds
    * ``msec``, ``ms``, ``millis`` -- milliseconds
    * ``seconds``, ``second``, ``secs``, ``sec``, ``s``
    * ``minutes``, ``minute``, ``mins``, ``min``, ``m``
    * ``hours``, ``hour``, ``hrs``, ``hr``, ``h``
    * ``days``, ``day``, ``d``
    * ``weeks``, ``week``, ``w``
    * ``months``, ``month``, ``M`` -- defined as 30.44 days
    * ``years``, ``year``, ``y`` -- defined as 365.25 days

    >>> parse_duration("2h 37min")
    Duration(9420, 0)
    >>> parse_duration("32ms")
    Duration(0, 32000000)

    Raises a :class:`~humanduration.errors.DurationError` subclass on the
    first problem found.
    """
    result = _Parser(text).parse()
    log.debug("Parsed %r as %r", text, result)
    return result
