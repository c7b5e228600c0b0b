"""Date expression parsing.

Note dates are typed by hand, so the accepted forms are loose: a bare day,
month and day, or year, month and day. Missing fields come from a reference
date supplied by the caller.
"""

from .parsers import build_patterns, resolve_date
from .types import ALTERNATE_SEPARATORS, DEFAULT_SEPARATORS, DatePatterns
