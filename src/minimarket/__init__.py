__version__ = "0.1.0"

# Package metadata
__description__ = "Minimal retail checkout domain model with a demonstration CLI"

# Public API
from .product import Product
from .customer import Customer, IndividualCustomer, CorporateCustomer
from .discount import DiscountPolicy, PercentageDiscount, FixedDiscount, create_discount
from .payment import (
    PaymentMethod,
    CardPayment,
    CashPayment,
    TransferPayment,
    PaymentKind,
    PaymentReceipt,
    create_payment_method
)
from .cart import Cart
from .order import Order, OrderStatus
from .sink import OutputSink, ConsoleSink, MemorySink, NullSink
from .config import Settings
from .checkout import CheckoutResult, run_checkout
from .exceptions import ApplicationError, InvalidArgument

__all__ = [
    # Version
    "__version__",

    # Domain model
    "Product",
    "Customer",
    "IndividualCustomer",
    "CorporateCustomer",
    "Cart",
    "Order",
    "OrderStatus",

    # Strategies
    "DiscountPolicy",
    "PercentageDiscount",
    "FixedDiscount",
    "create_discount",
    "PaymentMethod",
    "CardPayment",
    "CashPayment",
    "TransferPayment",
    "PaymentKind",
    "PaymentReceipt",
    "create_payment_method",

    # Output
    "OutputSink",
    "ConsoleSink",
    "MemorySink",
    "NullSink",

    # Orchestration
    "Settings",
    "CheckoutResult",
    "run_checkout",

    # Exceptions
    "ApplicationError",
    "InvalidArgument"
]
