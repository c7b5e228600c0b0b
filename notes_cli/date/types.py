from __future__ import annotations

import re
from dataclasses import dataclass

# Characters accepted between date components.
DEFAULT_SEPARATORS = " -"
# The dot/slash/hyphen/underscore set some setups prefer ("2024.03.15", "3/15").
ALTERNATE_SEPARATORS = "./-_"


@dataclass(frozen=True)
class DatePatterns:
    """Compiled matchers for one separator set, in the order they are tried."""

    separators: str
    day: re.Pattern[str]
    month_day: re.Pattern[str]
    year_month_day: re.Pattern[str]
