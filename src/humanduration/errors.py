"""Errors raised while parsing duration strings.

Every error carries byte offsets into the UTF-8 encoding of the original
input, never the input itself.
"""

from __future__ import annotations


class DurationError(ValueError):
    """Base class for all duration parsing errors."""

    def _fields(self) -> tuple:
        return ()

    @property
    def span(self) -> tuple[int, int] | None:
        """Byte range of the offending text, if the error has one."""
        return None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self._fields())
        return f"{type(self).__name__}({args})"


class EmptyDuration(DurationError):
    """The value was an empty string or consisted only of whitespace."""

    def __init__(self) -> None:
        super().__init__("value was empty")


class InvalidCharacter(DurationError):
    """A character that is neither a digit, a unit letter nor whitespace."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"invalid character at {offset}")

    def _fields(self) -> tuple:
        return (self.offset,)

    @property
    def span(self) -> tuple[int, int]:
        return (self.offset, self.offset + 1)


class NumberExpected(DurationError):
    """A non-numeric value where a number must start.

    Usually the unit is broken into words (``m sec`` instead of ``msec``)
    or a number is omitted (``2 hours min``).
    """

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"expected number at {offset}")

    def _fields(self) -> tuple:
        return (self.offset,)

    @property
    def span(self) -> tuple[int, int]:
        return (self.offset, self.offset + 1)


class UnknownUnit(DurationError):
    """The unit following a number is not in the unit table.

    ``start`` and ``end`` (exclusive) delimit the unit in the original
    string. An empty ``unit`` means the number had no unit at all.
    """

    def __init__(self, start: int, end: int, unit: str, value: int) -> None:
        self.start = start
        self.end = end
        self.unit = unit
        self.value = value
        if unit == "":
            message = f"time unit needed, for example {value}sec or {value}ms"
        else:
            message = (
                f"unknown time unit {unit!r}, "
                "supported units: ns, us, ms, sec, min, hours, days, "
                "weeks, months, years (and few variations)"
            )
        super().__init__(message)

    def _fields(self) -> tuple:
        return (self.start, self.end, self.unit, self.value)

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


class NumberOverflow(DurationError):
    """A number or an accumulated total does not fit into 64 bits."""

    def __init__(self) -> None:
        super().__init__("number is too large")
