"""
DeliveryFeeCalculator — Стоимость доставки по порогу

    amount <  threshold → delivery_fee (5.00)
    amount >= threshold → 0.00

Порог включительный на бесплатной стороне: ровно 50.00 — без доставки.
Отрицательные и нулевые суммы попадают в ветку с оплатой доставки.
"""

from decimal import Decimal

from src.checkout.config import CheckoutConfig
from src.checkout.errors import InvalidArgumentError
from src.core.math.money import ZERO, Numeric, round_money, to_decimal


class DeliveryFeeCalculator:
    """Расчёт стоимости доставки (stateless)."""

    def __init__(self, config: CheckoutConfig | None = None):
        self.config = config or CheckoutConfig()

    def fee_for(self, amount: Numeric) -> Decimal:
        """
        Стоимость доставки как Decimal.

        Raises:
            InvalidArgumentError: Если amount не число или NaN/Inf
        """
        try:
            value = to_decimal(amount)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError("amount", amount, str(e)) from e

        if not value.is_finite():
            raise InvalidArgumentError("amount", amount, "must be a finite number")

        if value < self.config.free_delivery_threshold:
            return self.config.delivery_fee
        return ZERO

    def calculate_delivery_fee(self, amount: Numeric) -> float:
        """
        Стоимость доставки для суммы заказа.

        Args:
            amount: Сумма заказа (обычно результат PaymentAmountCalculator.process)

        Returns:
            5.0 если amount < 50.0, иначе 0.0

        Examples:
            >>> DeliveryFeeCalculator().calculate_delivery_fee(49.99)
            5.0
            >>> DeliveryFeeCalculator().calculate_delivery_fee(50.0)
            0.0
        """
        return round_money(self.fee_for(amount))
