"""Built-in parsers for the common HTML input types.

Each parser is a module-level singleton. Parsers are stateless, so there
is nothing to construct per field::

    from formwork.fields import parse_email, parse_int

    email = parse_email
    age = parse_int.check_int_more_than(17)

The rules are syntactic only. ``parse_email`` does not check that a mailbox
exists, and ``parse_url`` does not check that a host resolves.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from urllib.parse import SplitResult, urlsplit

from formwork.field_errors import (
    MustBeColour,
    MustBeDate,
    MustBeDateTime,
    MustBeEmail,
    MustBeFloat,
    MustBeInt,
    MustBePhoneNumber,
    MustBeTime,
    MustBeUrl,
)
from formwork.parser import Decoded, Parser, Status, single

__all__ = [
    "Colour",
    "parse_bool",
    "parse_checkbox",
    "parse_color",
    "parse_colour",
    "parse_date",
    "parse_date_time",
    "parse_email",
    "parse_float",
    "parse_int",
    "parse_phone_number",
    "parse_string",
    "parse_time",
    "parse_url",
]

EPOCH = datetime(1970, 1, 1)


@dataclass(frozen=True, slots=True)
class Colour:
    """An RGB colour, as submitted by ``<input type="color">``."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> "Colour":
        """Build from ``#rrggbb``; callers must validate the format first."""
        return cls(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def _string(inputs: list[str], status: Status) -> Decoded[str]:
    return Decoded(inputs[0] if inputs else "", status)


parse_string: Parser[str] = Parser(_string)


def _email(raw: str) -> str | None:
    if raw.count("@") != 1:
        return None
    return raw


parse_email: Parser[str] = single(_email, MustBeEmail(), "")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")


def _int(raw: str) -> int | None:
    if not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def _float(raw: str) -> float | None:
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)
    # Bare integers are accepted as floats
    whole = _int(raw)
    if whole is None:
        return None
    return float(whole)


parse_int: Parser[int] = single(_int, MustBeInt(), 0)
parse_float: Parser[float] = single(_float, MustBeFloat(), 0.0)


# ---------------------------------------------------------------------------
# Checkbox
# ---------------------------------------------------------------------------


def _checkbox(inputs: list[str], status: Status) -> Decoded[bool]:
    # Browsers omit unchecked checkboxes entirely; any submitted value means checked
    return Decoded(bool(inputs), status)


parse_checkbox: Parser[bool] = Parser(_checkbox)
parse_bool = parse_checkbox


# ---------------------------------------------------------------------------
# Phone number
# ---------------------------------------------------------------------------

_PHONE_FORMATTING = frozenset("- ()")
_PHONE_MIN_DIGITS = 7  # exclusive
_PHONE_MAX_DIGITS = 15


def _phone_number(raw: str) -> str | None:
    """Scan *raw* and return its digits, or None if it is not a phone number.

    A ``+`` is only allowed as the very first character. Formatting
    characters are only allowed once a digit has been seen.
    """
    digits: list[str] = []
    for index, char in enumerate(raw):
        if char == "+" and index == 0:
            continue
        if "0" <= char <= "9":
            digits.append(char)
        elif char in _PHONE_FORMATTING and digits:
            continue
        else:
            return None
    if not _PHONE_MIN_DIGITS < len(digits) <= _PHONE_MAX_DIGITS:
        return None
    return "".join(digits)


parse_phone_number: Parser[str] = single(_phone_number, MustBePhoneNumber(), "")


# ---------------------------------------------------------------------------
# URL
# ---------------------------------------------------------------------------

_URL_INVALID_RE = re.compile(r"[\s\x00-\x1f\x7f]")
_EMPTY_URL = SplitResult("", "", "", "", "")


def _url(raw: str) -> SplitResult | None:
    if not raw or _URL_INVALID_RE.search(raw):
        return None
    try:
        parts = urlsplit(raw)
        # Port is parsed lazily; touching it validates it
        parts.port  # noqa: B018
    except ValueError:
        return None
    return parts


parse_url: Parser[SplitResult] = single(_url, MustBeUrl(), _EMPTY_URL)


# ---------------------------------------------------------------------------
# Dates and times
# ---------------------------------------------------------------------------

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?")


def _date(raw: str) -> date | None:
    match = _DATE_RE.fullmatch(raw)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        # Rejects month 13, Feb 29 outside leap years, day 31 in 30-day months
        return date(year, month, day)
    except ValueError:
        return None


def _time(raw: str) -> time | None:
    match = _TIME_RE.fullmatch(raw)
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        return None
    return time(hour, minute, second)


def _date_time(raw: str) -> datetime | None:
    date_part, sep, time_part = raw.partition("T")
    if not sep:
        return None
    day = _date(date_part)
    moment = _time(time_part)
    if day is None or moment is None:
        return None
    return datetime.combine(day, moment)


parse_date: Parser[date] = single(_date, MustBeDate(), EPOCH.date())
parse_time: Parser[time] = single(_time, MustBeTime(), EPOCH.time())
parse_date_time: Parser[datetime] = single(_date_time, MustBeDateTime(), EPOCH)


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------

_COLOUR_RE = re.compile(r"#[0-9a-fA-F]{6}")


def _colour(raw: str) -> Colour | None:
    if not _COLOUR_RE.fullmatch(raw):
        return None
    return Colour.from_hex(raw)


parse_colour: Parser[Colour] = single(_colour, MustBeColour(), Colour(0, 0, 0))
parse_color = parse_colour
