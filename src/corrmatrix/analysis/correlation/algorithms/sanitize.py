"""Value sanitization.

Turns raw, mixed-quality values into floats. Anything that cannot be read
as a finite number becomes NaN, the missing marker used by every other
algorithm in this package.
"""

import math
from collections.abc import Iterable
from typing import Any

MISSING = math.nan

# Literal token some exports write instead of an empty cell
NULL_TOKEN = "null"

# Strings containing this character are placeholders (e-mail style), never data
SENTINEL_CHAR = "@"


def clean_value(value: Any) -> float:
    """Convert a single raw value to a float, or NaN when it is missing.

    Rules, applied in order:
    1. None or the string "null" is missing.
    2. A string containing "@" is missing.
    3. Anything else goes through float(); failures and non-finite
       results are missing.

    Never raises.
    """
    if value is None or (isinstance(value, str) and value == NULL_TOKEN):
        return MISSING
    if isinstance(value, str) and SENTINEL_CHAR in value:
        return MISSING

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return MISSING

    if not math.isfinite(number):
        return MISSING
    return number


def clean_series(values: Iterable[Any]) -> list[float]:
    """Clean every element of a raw series, keeping order and length."""
    return [clean_value(v) for v in values]


def is_missing(value: float) -> bool:
    """Check whether a cleaned value is the missing marker."""
    return math.isnan(value)
