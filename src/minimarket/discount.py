"""
Discount strategies
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .exceptions import InvalidArgument
from .money import Amount, to_decimal


class DiscountPolicy(ABC):
    """
    Abstract base class for discount strategies

    A policy is a pure function of the amount it is applied to. Results are
    not clamped: callers decide whether a negative amount is acceptable.
    """

    @abstractmethod
    def apply(self, amount: Amount) -> Decimal:
        """
        Apply the discount

        Args:
            amount: Amount before discount

        Returns the discounted amount
        """
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Short human-readable description, e.g. '10%'"""
        pass


class PercentageDiscount(DiscountPolicy):
    """Reduce an amount by a percentage in [0, 100]"""

    def __init__(self, percent: Amount):
        value = to_decimal(percent, "percent")
        if value < 0 or value > 100:
            raise InvalidArgument(f"Discount percent must be between 0 and 100, got {value}")
        self.percent = value

    def apply(self, amount: Amount) -> Decimal:
        value = to_decimal(amount)
        return value - value * self.percent / 100

    @property
    def label(self) -> str:
        return f"{self.percent}%"

    def __repr__(self):
        return f"PercentageDiscount({self.percent})"


class FixedDiscount(DiscountPolicy):
    """Reduce an amount by a fixed, non-negative value"""

    def __init__(self, amount: Amount):
        value = to_decimal(amount)
        if value < 0:
            raise InvalidArgument(f"Fixed discount cannot be negative, got {value}")
        self.amount = value

    def apply(self, amount: Amount) -> Decimal:
        return to_decimal(amount) - self.amount

    @property
    def label(self) -> str:
        return f"{self.amount} off"

    def __repr__(self):
        return f"FixedDiscount({self.amount})"


def create_discount(kind: str, value: Amount) -> DiscountPolicy:
    """
    Factory function to create a discount policy

    Args:
        kind: "percentage" or "fixed" (case-insensitive)
        value: Percent for percentage discounts, amount for fixed ones

    Returns the matching DiscountPolicy instance
    """
    normalized = (kind or "").strip().lower()

    if normalized == "percentage":
        return PercentageDiscount(value)
    elif normalized == "fixed":
        return FixedDiscount(value)
    else:
        raise InvalidArgument(f"Unknown discount kind: {kind!r} (expected 'percentage' or 'fixed')")
