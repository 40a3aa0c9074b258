"""
Payment methods

Settling a payment only acknowledges it: no gateway is called, nothing is
retried and there is no notion of partial payment.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from .exceptions import InvalidArgument
from .money import Amount, DEFAULT_CURRENCY, format_amount, to_decimal
from .sink import OutputSink

logger = logging.getLogger(__name__)


class PaymentKind(Enum):
    """Supported payment methods"""
    CARD = "card"
    CASH = "cash"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class PaymentReceipt:
    """
    Acknowledgement of a settled payment

    Attributes:
        method: how the amount was paid
        amount: settled amount
        confirmation: human-readable confirmation line
    """
    method: PaymentKind
    amount: Decimal
    confirmation: str


class PaymentMethod(ABC):
    """
    Abstract base class for payment methods

    Subclasses only decide how the confirmation reads; validation and
    reporting are shared.
    """

    kind: PaymentKind

    def settle(
        self,
        amount: Amount,
        sink: Optional[OutputSink] = None,
        currency: str = DEFAULT_CURRENCY
    ) -> PaymentReceipt:
        """
        Settle an amount with this method

        Args:
            amount: Amount to pay, must not be negative
            sink: Optional sink the confirmation is written to
            currency: Currency unit used in the confirmation

        Returns a PaymentReceipt
        """
        value = to_decimal(amount)
        if value < 0:
            raise InvalidArgument(f"Payment amount cannot be negative: {value}")

        confirmation = self._confirmation(format_amount(value, currency))
        logger.debug(f"Settled {value} via {self.kind.value}")

        if sink is not None:
            sink.write(confirmation)
        return PaymentReceipt(method=self.kind, amount=value, confirmation=confirmation)

    @abstractmethod
    def _confirmation(self, rendered_amount: str) -> str:
        """Build the confirmation text for an already rendered amount"""
        pass


class CardPayment(PaymentMethod):
    """Credit card payment"""

    kind = PaymentKind.CARD

    def _confirmation(self, rendered_amount: str) -> str:
        return f"Paid {rendered_amount} by credit card."


class CashPayment(PaymentMethod):
    """Cash payment"""

    kind = PaymentKind.CASH

    def _confirmation(self, rendered_amount: str) -> str:
        return f"Paid {rendered_amount} in cash."


class TransferPayment(PaymentMethod):
    """Bank transfer payment"""

    kind = PaymentKind.TRANSFER

    def _confirmation(self, rendered_amount: str) -> str:
        return f"Paid {rendered_amount} by bank transfer."


_METHODS = {
    PaymentKind.CARD: CardPayment,
    PaymentKind.CASH: CashPayment,
    PaymentKind.TRANSFER: TransferPayment,
}


def create_payment_method(kind: str) -> PaymentMethod:
    """
    Factory function to create a payment method

    Args:
        kind: "card", "cash" or "transfer" (case-insensitive)

    Returns the matching PaymentMethod instance
    """
    try:
        payment_kind = PaymentKind((kind or "").strip().lower())
    except ValueError as e:
        raise InvalidArgument(
            f"Unknown payment method: {kind!r} (expected one of: card, cash, transfer)"
        ) from e

    return _METHODS[payment_kind]()
