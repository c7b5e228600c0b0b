from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from functools import lru_cache

from ..errors import DateParseError
from .types import DEFAULT_SEPARATORS, DatePatterns

DAY_RE = r"(?P<Date>0?[1-9]|[12][0-9]|3[01])"
MONTH_RE = r"(?P<Month>0?[1-9]|1[0-2])"
YEAR_RE = r"(?P<Year>[0-9]{4}|[0-9]{2})"


@lru_cache(maxsize=None)
def build_patterns(separators: str = DEFAULT_SEPARATORS) -> DatePatterns:
    """Compile the day, month-day and year-month-day matchers for *separators*.

    Every character of *separators* is taken literally. The matchers are meant
    for ``fullmatch`` so the whole expression has to be consumed.
    """
    if not separators:
        raise ValueError("separator set must not be empty")

    sep = "[" + "".join(re.escape(ch) for ch in sorted(set(separators))) + "]"
    return DatePatterns(
        separators=separators,
        day=re.compile(DAY_RE),
        month_day=re.compile(MONTH_RE + sep + DAY_RE),
        year_month_day=re.compile(YEAR_RE + sep + MONTH_RE + sep + DAY_RE),
    )


def _make_date(year: int, month: int, day: int) -> date:
    # Days past the end of the month roll into the next one (4-31 -> May 1).
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except ValueError as e:
        # year 0 ("00-1-1") has no calendar date
        raise DateParseError("unrecognized date") from e


def resolve_date(
    expression: str,
    reference: date | datetime,
    *,
    separators: str = DEFAULT_SEPARATORS,
) -> date:
    """Resolve a loose date expression against *reference*.

    Accepted forms, tried in order (``-`` stands for any separator):

    - ``D``      day of the reference month
    - ``M-D``    month and day of the reference year
    - ``Y-M-D``  full date; a 2-digit year is used as-is (``24`` is year 24)

    Raises DateParseError when none of the forms matches the whole string.
    """
    patterns = build_patterns(separators)

    m = patterns.day.fullmatch(expression)
    if m:
        return _make_date(reference.year, reference.month, int(m.group("Date")))

    m = patterns.month_day.fullmatch(expression)
    if m:
        return _make_date(reference.year, int(m.group("Month")), int(m.group("Date")))

    m = patterns.year_month_day.fullmatch(expression)
    if m:
        return _make_date(int(m.group("Year")), int(m.group("Month")), int(m.group("Date")))

    raise DateParseError("unrecognized date")
