"""
Contract Validation Module

Модуль для валидации JSON контрактов checkout API.
"""

from .validators import (
    CheckoutQuoteValidator,
    ContractValidator,
    OrderRequestValidator,
    SchemaLoader,
    get_schema_loader,
    validate_checkout_quote,
    validate_order_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderRequestValidator",
    "CheckoutQuoteValidator",
    # Functions
    "get_schema_loader",
    "validate_order_request",
    "validate_checkout_quote",
]
