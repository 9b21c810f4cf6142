"""
Decimal helpers for monetary amounts.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[Decimal, float, int, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a price-like value to Decimal.

    Floats go through their shortest text form so that 10.20 becomes
    Decimal("10.2") rather than its binary expansion.

    Raises:
        ValueError: if the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


def quantize_amount(amount: Decimal, places: Optional[int], rounding: str) -> Decimal:
    """Round amount to the given number of decimal places (None keeps it as is)."""
    if places is None:
        return amount
    return amount.quantize(Decimal(1).scaleb(-places), rounding=rounding)
