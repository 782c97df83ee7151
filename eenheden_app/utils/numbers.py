"""Decimal coercion and rounding helpers"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """
    Coerce an int, float, str or Decimal to a finite Decimal.

    Floats are converted through their string form so 0.96 stays 0.96
    instead of its binary expansion.

    Raises:
        ValueError: If the value is not numeric or not finite
    """
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a numeric value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Not a numeric value: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")

    return result


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """Round half away from zero to the given number of decimal places."""
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=ROUND_HALF_UP)
