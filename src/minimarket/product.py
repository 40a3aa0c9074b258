"""
Product value object
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .exceptions import InvalidArgument
from .money import DEFAULT_CURRENCY, format_amount, to_decimal
from .sink import OutputSink


@dataclass(frozen=True)
class Product:
    """
    A product that can be put in a cart

    Attributes:
        id: identifier, unique within a run
        name: display name
        price: unit price, never negative (ints, floats and strings are
            coerced to Decimal)
    """
    id: int
    name: str
    price: Decimal

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidArgument(f"Product id must be an integer, got {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument("Product name is required")

        price = to_decimal(self.price, "price")
        if price < 0:
            raise InvalidArgument(f"Product price cannot be negative: {price}")
        object.__setattr__(self, "price", price)

    def describe(
        self,
        sink: Optional[OutputSink] = None,
        currency: str = DEFAULT_CURRENCY
    ) -> str:
        """
        Build the product description line

        Args:
            sink: Optional sink the line is also written to
            currency: Currency unit appended to the price

        Returns the description text
        """
        text = f"Product ID: {self.id}, Name: {self.name}, Price: {format_amount(self.price, currency)}"
        if sink is not None:
            sink.write(text)
        return text
