"""
Shopping cart
"""

import logging
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .exceptions import InvalidArgument
from .product import Product
from .sink import NullSink, OutputSink

logger = logging.getLogger(__name__)


class Cart:
    """
    Ordered collection of products

    Not thread-safe: callers sharing a cart must serialize access.
    """

    def __init__(self, sink: Optional[OutputSink] = None):
        """
        Initialize an empty cart
        sink: Where "item added" notifications go (discarded if None)
        """
        self.sink = sink if sink is not None else NullSink()
        self._items: List[Product] = []

    @property
    def items(self) -> Tuple[Product, ...]:
        """Snapshot of the products in insertion order"""
        return tuple(self._items)

    def add_item(self, product: Product) -> None:
        """
        Append a product and notify the sink
        """
        if not isinstance(product, Product):
            raise InvalidArgument(f"Only products can be added to a cart, got {type(product).__name__}")

        self._items.append(product)
        logger.debug(f"Cart now holds {len(self._items)} item(s)")
        self.sink.write(f"{product.name} added to cart.")

    def total(self) -> Decimal:
        """
        Sum of the prices of all items
        Returns Decimal 0 for an empty cart
        """
        return sum((item.price for item in self._items), Decimal("0"))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)
