"""
Small numeric helpers shared by the generators.
"""

import math


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round with .5 going up (not banker's rounding like round()).

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Rounded float (use int() on the result when places == 0)
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to an integer."""
    return int(math.floor(value + 0.5))


def round_cents(value: float) -> float:
    """Round a currency amount to cents."""
    return round_half_up(value, 2)


def safe_ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """numerator / denominator * scale rounded to 2 places; 0 when denominator is 0."""
    if denominator <= 0:
        return 0
    return round_half_up(numerator / denominator * scale, 2)
