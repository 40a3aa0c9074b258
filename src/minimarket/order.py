"""
Orders and their status
"""

import logging
from enum import Enum
from typing import Optional, Union

from .cart import Cart
from .customer import Customer
from .exceptions import InvalidArgument
from .payment import PaymentReceipt
from .sink import NullSink, OutputSink

logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    """Well-known order status labels"""
    PREPARING = "Preparing"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"


class Order:
    """
    An order owning exactly one cart

    The status is a free label. update_status() overwrites it without any
    transition check, so Delivered -> Preparing is as valid as
    Preparing -> Confirmed, and labels outside OrderStatus are accepted.

    Attributes:
        order_id: order identifier
        cart: the cart this order owns
        status: current status label, "Preparing" on creation
        customer: optional customer who placed the order
        receipt: payment receipt once one has been recorded
    """

    def __init__(
        self,
        order_id: int,
        cart: Cart,
        customer: Optional[Customer] = None,
        sink: Optional[OutputSink] = None
    ):
        if isinstance(order_id, bool) or not isinstance(order_id, int):
            raise InvalidArgument(f"Order id must be an integer, got {order_id!r}")
        if not isinstance(cart, Cart):
            raise InvalidArgument("An order requires a cart")
        if customer is not None and not isinstance(customer, Customer):
            raise InvalidArgument(f"Invalid customer: {customer!r}")

        self.order_id = order_id
        self.cart = cart
        self.customer = customer
        self.sink = sink if sink is not None else NullSink()
        self.status: str = OrderStatus.PREPARING.value
        self.receipt: Optional[PaymentReceipt] = None

    def update_status(self, new_status: Union[OrderStatus, str]) -> None:
        """
        Overwrite the status and notify the sink

        Args:
            new_status: An OrderStatus member or any status label
        """
        if isinstance(new_status, OrderStatus):
            new_status = new_status.value
        elif not isinstance(new_status, str):
            raise InvalidArgument(f"Order status must be text, got {type(new_status).__name__}")

        logger.debug(f"Order {self.order_id}: {self.status} -> {new_status}")
        self.status = new_status
        self.sink.write(f"Order status updated: {self.status}")

    def record_payment(self, receipt: PaymentReceipt) -> None:
        """Attach the receipt of the payment made for this order"""
        if not isinstance(receipt, PaymentReceipt):
            raise InvalidArgument("A payment receipt is required")
        self.receipt = receipt

    @property
    def is_paid(self) -> bool:
        return self.receipt is not None
