"""
Core math modules

Денежные примитивы с decimal-safe округлением.
"""

from src.core.math.money import (
    MONEY_QUANTUM,
    ZERO,
    Numeric,
    is_finite_money,
    money_precision,
    quantize_money,
    round_money,
    to_decimal,
    validate_positive_money,
)

__all__ = [
    # Constants
    "MONEY_QUANTUM",
    "ZERO",
    # Types
    "Numeric",
    # Functions
    "to_decimal",
    "is_finite_money",
    "money_precision",
    "quantize_money",
    "round_money",
    "validate_positive_money",
]
