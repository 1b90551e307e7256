"""
Decimal amount conversion
"""
from decimal import Decimal, ROUND_DOWN


def to_minimal_units(amount: str, decimals: int) -> int:
    """
    Convert a decimal string to integer minimal units, truncating any
    precision beyond `decimals`.

    >>> to_minimal_units("1.00000000", 8)
    100000000
    """
    scaled = Decimal(amount).scaleb(decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))
