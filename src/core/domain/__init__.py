"""
Domain models and value objects.

Contains payment entities: PaymentMethod, OrderContext, CheckoutQuote.
"""

from src.core.domain.payment import CheckoutQuote, OrderContext, PaymentMethod

__all__ = [
    "PaymentMethod",
    "OrderContext",
    "CheckoutQuote",
]
