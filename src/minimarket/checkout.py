"""
Checkout demonstration sequence

Builds products, fills a cart, applies a discount, settles the payment and
confirms the order. The sequence never raises: the first failure is stored
on the returned CheckoutResult and the remaining steps are skipped. Nothing
done before the failure is rolled back.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .cart import Cart
from .config import Settings
from .customer import IndividualCustomer
from .discount import create_discount
from .exceptions import ApplicationError
from .money import format_amount
from .order import Order
from .payment import PaymentReceipt, create_payment_method
from .product import Product
from .sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass
class CheckoutResult:
    """
    Outcome of a checkout run

    Fields stay None for the steps that were not reached.
    """
    cart_total: Optional[Decimal] = None
    discounted_total: Optional[Decimal] = None
    receipt: Optional[PaymentReceipt] = None
    order: Optional[Order] = None
    error: Optional[ApplicationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_checkout(sink: OutputSink, settings: Optional[Settings] = None) -> CheckoutResult:
    """
    Run the demonstration checkout once

    Args:
        sink: Destination for every user-facing line
        settings: Currency, discount, payment method and status label
            (defaults when None)

    Returns a CheckoutResult; its error is set if any step failed
    """
    settings = settings or Settings()
    result = CheckoutResult()

    try:
        try:
            _run_steps(sink, settings, result)
        except ApplicationError:
            raise
        except Exception as e:
            logger.debug("Unexpected failure during checkout", exc_info=True)
            raise ApplicationError(str(e) or type(e).__name__) from e
    except ApplicationError as e:
        logger.debug(f"Checkout aborted: {e}")
        result.error = e

    return result


def _run_steps(sink: OutputSink, settings: Settings, result: CheckoutResult) -> None:
    currency = settings.currency

    # Products
    apple = Product(1, "Elma", 10)
    pear = Product(2, "Armut", 15)
    apple.describe(sink, currency=currency)
    pear.describe(sink, currency=currency)

    customer = IndividualCustomer(1, "Ayşe Yılmaz", "12345678901")
    customer.describe(sink)

    # Cart
    cart = Cart(sink=sink)
    cart.add_item(apple)
    cart.add_item(pear)

    result.cart_total = cart.total()
    sink.write(f"Cart total: {format_amount(result.cart_total, currency)}")

    # Discount
    discount = create_discount(settings.discount_kind, settings.discount_value)
    result.discounted_total = discount.apply(result.cart_total)
    sink.write(f"Discounted total: {format_amount(result.discounted_total, currency)}")

    # Payment
    payment = create_payment_method(settings.payment_method)
    result.receipt = payment.settle(result.discounted_total, sink, currency=currency)

    # Order
    order = Order(1, cart, customer=customer, sink=sink)
    order.record_payment(result.receipt)
    result.order = order
    order.update_status(settings.confirmed_label)

    logger.debug(f"Checkout finished for order {order.order_id}")
