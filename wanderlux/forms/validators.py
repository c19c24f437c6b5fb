"""Field validators for the site forms.

Every predicate accepts any value, never raises, and returns a plain bool.
Input is coerced with ``str()`` and trimmed before checking, so ``None`` and
empty strings are simply invalid.
"""

import math
import re
from typing import Any, Optional

from wanderlux.pricing import PRICING_TABLE

# Syntactic sanity checks only
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# Digits, spaces, +, (), - so AU and international formats both pass
PHONE_PATTERN = re.compile(r"^[0-9\s()+-]{8,}$")

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_count(value: Any) -> float:
    """Parse a numeric form field the way a browser number parse does.

    Surrounding whitespace is ignored and an empty string reads as 0.
    Anything unparsable comes back as NaN.

    Args:
        value: Raw field value.

    Returns:
        float: Parsed number, possibly NaN or infinite.
    """
    text = _clean(value)
    if not text:
        return 0.0
    # float() accepts digit separators, browsers do not
    if "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def is_non_empty_name(value: Any) -> bool:
    return len(_clean(value)) >= MIN_NAME_LENGTH


def is_valid_email(value: Any) -> bool:
    return EMAIL_PATTERN.fullmatch(_clean(value)) is not None


def is_valid_phone(value: Any) -> bool:
    return PHONE_PATTERN.fullmatch(_clean(value)) is not None


def is_valid_date(value: Any) -> bool:
    # Presence only, no calendar range check
    return bool(_clean(value))


def is_long_enough_message(value: Any) -> bool:
    return len(_clean(value)) >= MIN_MESSAGE_LENGTH


def is_known_destination(value: Optional[str]) -> bool:
    return isinstance(value, str) and value in PRICING_TABLE.daily_rates


def is_known_style(value: Optional[str]) -> bool:
    return isinstance(value, str) and value in PRICING_TABLE.style_multipliers


def is_positive_count(value: Any) -> bool:
    """Check that a count field parses to a finite number of at least 1.

    Fractional values such as ``"2.5"`` pass; integrality is not enforced.
    """
    number = parse_count(value)
    return math.isfinite(number) and number >= 1
