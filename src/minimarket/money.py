"""
Helpers for monetary amounts
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from .exceptions import InvalidArgument

DEFAULT_CURRENCY = "TL"

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount, field: str = "amount") -> Decimal:
    """
    Coerce a numeric value to Decimal

    Floats go through str() so that 0.1 stays 0.1 instead of its binary
    expansion. Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(f"{field} must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as e:
            raise InvalidArgument(f"{field} must be a number, got {value!r}") from e
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise InvalidArgument(f"{field} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgument(f"{field} must be finite, got {value!r}")
    return result


def format_amount(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Render an amount followed by its currency unit, e.g. '22.5 TL'"""
    return f"{amount:f} {currency}"
