"""
CheckoutConfig — Политики скидок, налога и доставки

Таблица скидок задана явно по ключу (is_first_order, PaymentMethod):
комбинированный множитель не является произведением двух независимых
процентов, поэтому каждая из шести комбинаций указана напрямую.

    is_first_order | method       | multiplier
    ---------------+--------------+-----------
    True           | CREDIT_CARD  | 0.85
    True           | PAYPAL       | 0.88
    True           | CASH         | 0.90
    False          | CREDIT_CARD  | 0.95
    False          | PAYPAL       | 0.98
    False          | CASH         | 1.00
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.payment import PaymentMethod
from src.core.math.money import to_decimal


# =============================================================================
# DEFAULTS
# =============================================================================

# Налог, применяется после скидок
DEFAULT_TAX_RATE: Final[Decimal] = Decimal("0.15")

# Стоимость доставки ниже порога
DEFAULT_DELIVERY_FEE: Final[Decimal] = Decimal("5.00")

# Порог бесплатной доставки (включительно: ровно 50.00 бесплатно)
DEFAULT_FREE_DELIVERY_THRESHOLD: Final[Decimal] = Decimal("50.00")

DEFAULT_DISCOUNT_MULTIPLIERS: Final[Mapping[tuple[bool, PaymentMethod], Decimal]] = MappingProxyType(
    {
        (True, PaymentMethod.CREDIT_CARD): Decimal("0.85"),
        (True, PaymentMethod.PAYPAL): Decimal("0.88"),
        (True, PaymentMethod.CASH): Decimal("0.90"),
        (False, PaymentMethod.CREDIT_CARD): Decimal("0.95"),
        (False, PaymentMethod.PAYPAL): Decimal("0.98"),
        (False, PaymentMethod.CASH): Decimal("1.00"),
    }
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CheckoutConfig:
    """Конфигурация расчёта заказа.

    Числовые параметры принимают int/float/str/Decimal и хранятся как Decimal.
    """

    tax_rate: Decimal = DEFAULT_TAX_RATE
    delivery_fee: Decimal = DEFAULT_DELIVERY_FEE
    free_delivery_threshold: Decimal = DEFAULT_FREE_DELIVERY_THRESHOLD
    discount_multipliers: Mapping[tuple[bool, PaymentMethod], Decimal] = field(
        default_factory=lambda: DEFAULT_DISCOUNT_MULTIPLIERS
    )

    def __post_init__(self) -> None:
        # frozen=True: нормализация через object.__setattr__
        object.__setattr__(self, "tax_rate", to_decimal(self.tax_rate))
        object.__setattr__(self, "delivery_fee", to_decimal(self.delivery_fee))
        object.__setattr__(self, "free_delivery_threshold", to_decimal(self.free_delivery_threshold))
        object.__setattr__(
            self,
            "discount_multipliers",
            MappingProxyType({key: to_decimal(value) for key, value in self.discount_multipliers.items()}),
        )

        if not self.tax_rate.is_finite() or self.tax_rate < 0:
            raise ValueError(f"tax_rate must be a finite non-negative number, got {self.tax_rate}")

        if not self.delivery_fee.is_finite() or self.delivery_fee < 0:
            raise ValueError(f"delivery_fee must be a finite non-negative number, got {self.delivery_fee}")

        if not self.free_delivery_threshold.is_finite() or self.free_delivery_threshold < 0:
            raise ValueError(
                f"free_delivery_threshold must be a finite non-negative number, "
                f"got {self.free_delivery_threshold}"
            )

        expected_keys = {(flag, method) for flag in (True, False) for method in PaymentMethod}
        missing = expected_keys - set(self.discount_multipliers)
        if missing:
            formatted = ", ".join(sorted(f"({flag}, {method.value})" for flag, method in missing))
            raise ValueError(f"discount_multipliers missing entries: {formatted}")

        extra = set(self.discount_multipliers) - expected_keys
        if extra:
            raise ValueError(f"discount_multipliers has unknown keys: {sorted(map(str, extra))}")

        for key, multiplier in self.discount_multipliers.items():
            if not multiplier.is_finite() or not (0 < multiplier <= 1):
                raise ValueError(f"discount multiplier for {key} must be in (0, 1], got {multiplier}")

    @property
    def tax_multiplier(self) -> Decimal:
        """1 + tax_rate"""
        return Decimal(1) + self.tax_rate
