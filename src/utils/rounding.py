"""Round-half-up helpers for output figures."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves rounded towards +infinity.

    ``round()`` uses banker's rounding (``round(2.5) == 2``); published
    figures round halves up instead (``2.5 -> 3``, ``-10.5 -> -10``).
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))
