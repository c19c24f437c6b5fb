"""Text formatting helpers for form result messages.

Amounts are shown in a single currency with whole units only and thousands
separators, matching en-AU display of AUD (``$2,473``).
"""

import math
from decimal import Decimal
from typing import Optional, Union

from wanderlux.config import Settings, get_settings


def format_currency(amount: int, settings: Optional[Settings] = None) -> str:
    """Format a whole-unit amount for display.

    Args:
        amount: Total in whole currency units.
        settings: Settings providing the currency symbol. Defaults to the
            cached application settings.

    Returns:
        str: e.g. ``"$2,473"``; negative amounts get a leading minus.
    """
    settings = settings or get_settings()
    sign = "-" if amount < 0 else ""
    return f"{sign}{settings.currency_symbol}{abs(int(amount)):,}"


def format_count(value: Union[int, float]) -> str:
    """Render a count the way a browser prints a number.

    Uses the shortest round-tripping digits with no trailing ``.0``
    (2.0 -> "2", 2.5 -> "2.5"). Plain notation is used for decimal exponents
    from -6 up to 20, exponent notation outside that (1e21 -> "1e+21",
    1.5e-7 -> "1.5e-7").
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr gives the shortest digits that round-trip, same as the browser
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def pluralize(value: Union[int, float], noun: str) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` for counts above one."""
    suffix = "s" if value > 1 else ""
    return f"{format_count(value)} {noun}{suffix}"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only ("bali" -> "Bali")."""
    return text[:1].upper() + text[1:]
