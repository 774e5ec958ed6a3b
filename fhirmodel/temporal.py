"""FHIR ``time``, ``date``, ``dateTime`` and ``instant`` types."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date as _date
from datetime import datetime as _datetime
from datetime import time as _time
from datetime import timedelta, timezone

from .errors import DateFormatError
from .primitives import _parse_int

_Kind = DateFormatError.Kind
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INSTANT_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))"
)
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?")
_FULL_DATE_RE = re.compile(r"\+?([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _micro(fraction: str | None) -> int:
    """Microseconds from a decimal fraction; digits past the sixth are dropped."""
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _fraction(microsecond: int) -> str:
    if microsecond == 0:
        return ""
    return "." + f"{microsecond:06d}".rstrip("0")


def _sign(left, right) -> int:
    return (left > right) - (left < right)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_plain_date(value) -> bool:
    return isinstance(value, _date) and not isinstance(value, _datetime)


def _is_aware(value) -> bool:
    return isinstance(value, _datetime) and value.utcoffset() is not None


def _parse_component(text: str, minimum: int, maximum: int) -> int:
    try:
        return _parse_int(text, minimum, maximum)
    except ValueError as exc:
        raise DateFormatError(_Kind.INT_PARSING, str(exc)) from exc


@dataclass(frozen=True, order=True)
class Instant:
    """FHIR ``instant``: a timezone-aware point in time in RFC 3339 form."""

    value: _datetime

    def __post_init__(self) -> None:
        if not _is_aware(self.value):
            raise TypeError("Instant needs a timezone-aware datetime")

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Read an RFC 3339 timestamp."""
        match = _INSTANT_RE.fullmatch(text)
        if match is None:
            raise DateFormatError(_Kind.TIME_PARSING, f"not an RFC 3339 timestamp: {text!r}")
        year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
        fraction, utc, sign, offset_hours, offset_minutes = match.groups()[6:]
        if utc:
            tz = timezone.utc
        else:
            hours, minutes = int(offset_hours), int(offset_minutes)
            if hours > 23 or minutes > 59:
                raise DateFormatError(_Kind.TIME_PARSING, "offset component out of range")
            delta = timedelta(hours=hours, minutes=minutes)
            tz = timezone(-delta if sign == "-" else delta)
        leap = second == 60
        try:
            value = _datetime(
                year,
                month,
                day,
                hour,
                minute,
                59 if leap else second,
                999_999 if leap else _micro(fraction),
                tzinfo=tz,
            )
            if leap:
                in_utc = value.astimezone(timezone.utc)
                if (in_utc.hour, in_utc.minute) != (23, 59):
                    raise ValueError("leap second is only valid at 23:59:60 UTC")
        except (ValueError, OverflowError) as exc:
            raise DateFormatError(_Kind.TIME_PARSING, str(exc)) from exc
        return cls(value)

    def serialize(self) -> str:
        """Return the RFC 3339 form; a zero offset is written as ``Z``."""
        value = self.value
        offset = value.utcoffset()
        if offset % timedelta(minutes=1):
            raise ValueError("offsets with seconds cannot be written as RFC 3339")
        if offset == timedelta(0):
            zone = "Z"
        else:
            total = offset // timedelta(minutes=1)
            sign = "-" if total < 0 else "+"
            hours, minutes = divmod(abs(total), 60)
            zone = f"{sign}{hours:02d}:{minutes:02d}"
        return (
            f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
            f"{_fraction(value.microsecond)}{zone}"
        )


@dataclass(frozen=True, order=True)
class Time:
    """FHIR ``time``: a time of day as ``hh:mm:ss`` with optional fraction."""

    value: _time

    def __post_init__(self) -> None:
        if not isinstance(self.value, _time) or self.value.tzinfo is not None:
            raise TypeError("Time wraps a naive datetime.time")

    @classmethod
    def parse(cls, text: str) -> Time:
        """Read ``hh:mm:ss`` or ``hh:mm:ss.fff``."""
        match = _TIME_RE.fullmatch(text)
        if match is None:
            raise DateFormatError(_Kind.TIME_PARSING, f"not a time: {text!r}")
        hour, minute, second = (int(part) for part in match.groups()[:3])
        try:
            value = _time(hour, minute, second, _micro(match.group(4)))
        except ValueError as exc:
            raise DateFormatError(_Kind.TIME_PARSING, str(exc)) from exc
        return cls(value)

    def serialize(self) -> str:
        """Return ``hh:mm:ss``, with a fraction only when it is not zero."""
        value = self.value
        return (
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
            f"{_fraction(value.microsecond)}"
        )


@dataclass(frozen=True, eq=False)
class Date:
    """FHIR ``date``: a year, a year and month, or a full calendar date."""

    year: int
    month: int | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.year) or not _I32_MIN <= self.year <= _I32_MAX:
            raise ValueError("year must be a 32-bit integer")
        if self.month is None:
            if self.day is not None:
                raise ValueError("a day needs a month")
        elif not _is_int(self.month) or not 1 <= self.month <= 12:
            raise ValueError("month must be in the range 1..=12")
        if self.day is not None:
            _date(self.year, self.month, self.day)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Read ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``."""
        parts = text.split("-")
        if len(parts) == 1:
            return cls(_parse_component(text, _I32_MIN, _I32_MAX))
        if len(parts) == 2:
            year_text, month_text = parts
            year = _parse_component(year_text, _I32_MIN, _I32_MAX)
            month = _parse_component(month_text, 0, 255)
            if not 1 <= month <= 12:
                raise DateFormatError(
                    _Kind.TIME_COMPONENT_RANGE, "month must be in the range 1..=12"
                )
            return cls(year, month)
        if len(parts) == 3:
            match = _FULL_DATE_RE.fullmatch(text)
            if match is None:
                raise DateFormatError(_Kind.TIME_PARSING, f"not a date: {text!r}")
            try:
                return cls(*(int(part) for part in match.groups()))
            except ValueError as exc:
                raise DateFormatError(_Kind.TIME_PARSING, str(exc)) from exc
        raise DateFormatError(_Kind.INVALID_DATE)

    def serialize(self) -> str:
        """Return the string form; partial dates need a four-digit year."""
        if self.day is not None:
            return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if not 1000 <= self.year < 10000:
            raise ValueError("Year is not 4 digits long")
        if self.month is None:
            return str(self.year)
        return f"{self.year}-{self.month:02d}"

    def compare(self, other) -> int:
        """Compare at the coarsest precision the two values share: -1, 0 or 1."""
        if not isinstance(other, Date) and not _is_plain_date(other):
            raise TypeError(f"cannot compare Date with {type(other).__name__}")
        result = _sign(self.year, other.year)
        if result or self.month is None or other.month is None:
            return result
        result = _sign(self.month, other.month)
        if result or self.day is None or other.day is None:
            return result
        return _sign(self.day, other.day)

    def _parts(self) -> tuple:
        return (self.year, self.month, self.day)

    def __eq__(self, other) -> bool:
        if isinstance(other, Date):
            return self._parts() == other._parts()
        if _is_plain_date(other):
            return (
                self.year == other.year
                and self.month in (None, other.month)
                and self.day in (None, other.day)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._parts())

    def _order(self, other) -> int | None:
        try:
            return self.compare(other)
        except TypeError:
            return None

    def __lt__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result >= 0


@dataclass(frozen=True, eq=False)
class DateTime:
    """FHIR ``dateTime``: either a (partial) date or a full instant."""

    value: Date | Instant

    def __post_init__(self) -> None:
        if not isinstance(self.value, (Date, Instant)):
            raise TypeError("DateTime wraps a Date or an Instant")

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Read an instant when the text holds ``T``, a date otherwise."""
        if "T" in text:
            return cls(Instant.parse(text))
        return cls(Date.parse(text))

    def serialize(self) -> str:
        """Return the string form of the wrapped value."""
        return self.value.serialize()

    def compare(self, other) -> int:
        """Compare with another DateTime or an aware datetime: -1, 0 or 1.

        A date is compared with the calendar date of an instant in its own offset.
        """
        if isinstance(other, DateTime):
            theirs = other.value.value if isinstance(other.value, Instant) else other.value
        elif _is_aware(other):
            theirs = other
        else:
            raise TypeError(f"cannot compare DateTime with {type(other).__name__}")
        mine = self.value
        if isinstance(mine, Date):
            return mine.compare(theirs if isinstance(theirs, Date) else theirs.date())
        if isinstance(theirs, Date):
            return -theirs.compare(mine.value.date())
        return _sign(mine.value, theirs)

    def __eq__(self, other) -> bool:
        if isinstance(other, DateTime):
            return self.value == other.value
        if _is_aware(other):
            if isinstance(self.value, Date):
                return self.value == other.date()
            return self.value.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def _order(self, other) -> int | None:
        try:
            return self.compare(other)
        except TypeError:
            return None

    def __lt__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other):
        result = self._order(other)
        return NotImplemented if result is None else result >= 0