"""Date and time format checks. Pure functions; malformed input returns False.

Dates are ``dd/mm/yyyy`` and times ``hh:mm``. Fields are not required to be
zero-padded.

Token parsing has two modes. Strict (the default) rejects any token that is
not a plain run of ASCII digits. Lenient mode treats an unparsable token as 0,
which is how the agenda historically behaved; it accepts inputs such as
``"x:y"`` as midnight, so it must be chosen explicitly.
"""

import re

from agenda.domain.entities import MAX_ID

_DIGITS = re.compile(r"[0-9]+")
_LENIENT_NUMBER = re.compile(r"\+?[0-9]+")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _parse_token(token: str, strict: bool) -> int | None:
    pattern = _DIGITS if strict else _LENIENT_NUMBER
    if not pattern.fullmatch(token):
        return None if strict else 0
    value = int(token)
    if value > MAX_ID:
        return None if strict else 0
    return value


def _parse_fields(text: str, separator: str, count: int, strict: bool) -> list[int] | None:
    if not isinstance(text, str):
        return None
    tokens = text.split(separator)
    if len(tokens) != count:
        return None
    values = [_parse_token(token, strict) for token in tokens]
    if any(v is None for v in values):
        return None
    return values


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in month (1-12) of the given year."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def validate_date(text: str, *, strict: bool = True) -> bool:
    """Return True if text is a real calendar date written as day/month/year."""
    fields = _parse_fields(text, "/", 3, strict)
    if fields is None:
        return False
    day, month, year = fields
    if day == 0 or month == 0 or year == 0:
        return False
    if month > 12 or day > 31:
        return False
    return day <= days_in_month(month, year)


def validate_time(text: str, *, strict: bool = True) -> bool:
    """Return True if text is a 24-hour hour:minute time."""
    fields = _parse_fields(text, ":", 2, strict)
    if fields is None:
        return False
    hour, minute = fields
    return hour < 24 and minute < 60
