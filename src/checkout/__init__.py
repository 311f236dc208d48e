"""Checkout — расчёт суммы к оплате и стоимости доставки.

- PaymentAmountCalculator: скидки (first order × payment method) + налог
- DeliveryFeeCalculator: стоимость доставки по порогу
- CheckoutService: композиция расчётов в CheckoutQuote
"""

from .config import (
    DEFAULT_DELIVERY_FEE,
    DEFAULT_DISCOUNT_MULTIPLIERS,
    DEFAULT_FREE_DELIVERY_THRESHOLD,
    DEFAULT_TAX_RATE,
    CheckoutConfig,
)
from .delivery_fee import DeliveryFeeCalculator
from .errors import InvalidArgumentError
from .payment_processor import (
    PaymentAmountCalculator,
    PaymentBreakdown,
    coerce_first_order_flag,
    coerce_payment_method,
)
from .quote import CheckoutService, calculate_delivery_fee, process_payment, quote_order

__all__ = [
    # Config
    "CheckoutConfig",
    "DEFAULT_TAX_RATE",
    "DEFAULT_DELIVERY_FEE",
    "DEFAULT_FREE_DELIVERY_THRESHOLD",
    "DEFAULT_DISCOUNT_MULTIPLIERS",
    # Errors
    "InvalidArgumentError",
    # Calculators
    "PaymentAmountCalculator",
    "PaymentBreakdown",
    "DeliveryFeeCalculator",
    "CheckoutService",
    "coerce_payment_method",
    "coerce_first_order_flag",
    # Shortcuts
    "process_payment",
    "calculate_delivery_fee",
    "quote_order",
]
