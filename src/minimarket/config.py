"""
Runtime settings for the checkout demonstration
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .money import DEFAULT_CURRENCY


@dataclass(frozen=True)
class Settings:
    """
    Checkout settings

    Attributes:
        currency: currency unit printed after amounts
        discount_kind: "percentage" or "fixed"
        discount_value: percent or fixed amount, as text
        payment_method: "card", "cash" or "transfer"
        confirmed_label: status label set once the order is confirmed
    """
    currency: str = DEFAULT_CURRENCY
    discount_kind: str = "percentage"
    discount_value: str = "10"
    payment_method: str = "card"
    confirmed_label: str = "Confirmed"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from MINIMARKET_* environment variables
        Unset or empty variables keep their defaults
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str, default: str) -> str:
            return env.get(f"MINIMARKET_{name}") or default

        return cls(
            currency=_get("CURRENCY", defaults.currency),
            discount_kind=_get("DISCOUNT_KIND", defaults.discount_kind),
            discount_value=_get("DISCOUNT_VALUE", defaults.discount_value),
            payment_method=_get("PAYMENT_METHOD", defaults.payment_method),
            confirmed_label=_get("CONFIRMED_LABEL", defaults.confirmed_label),
        )

    def override(self, **changes) -> "Settings":
        """Return a copy with every non-None keyword applied"""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
