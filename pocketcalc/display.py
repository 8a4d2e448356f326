"""Rendering of the display value."""

import math
from decimal import ROUND_HALF_UP, Decimal


def format_display(value) -> str:
    """Format ``value`` with zero decimal places.

    Rounds half away from zero on the shortest decimal form of the float,
    so ``2.5`` shows ``3`` and ``-0.4`` shows ``-0``. Large numbers are
    written out in full, never in exponent notation.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    rounded = Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP)
    return f"{rounded:f}"
