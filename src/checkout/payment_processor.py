"""
PaymentAmountCalculator — Сумма к оплате с учётом скидок и налога

Формула:
    discounted = amount * multiplier(is_first_order, method)
    final      = round_half_up(discounted * (1 + tax_rate), 0.01)

Порядок:
1. Валидация amount (> 0, finite), method (PaymentMethod) и is_first_order (bool)
2. Комбинированный множитель скидки из таблицы CheckoutConfig
3. Налог применяется к сумме после скидок (обязательно, входит в результат)
4. Единственное округление до центов в конце (ROUND_HALF_UP)

Все вычисления в Decimal: 55.0 * 0.90 * 1.15 = 56.925 → 56.93
(в float это 56.92499999... → 56.92).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any

from src.checkout.config import CheckoutConfig
from src.checkout.errors import InvalidArgumentError
from src.core.domain.payment import PaymentMethod
from src.core.math.money import (
    Numeric,
    money_precision,
    quantize_money,
    round_money,
    validate_positive_money,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PaymentBreakdown:
    """Разбивка суммы к оплате (все суммы округлены до центов)."""

    base_amount: Decimal
    discount_multiplier: Decimal
    discounted_amount: Decimal  # После скидок, до налога
    tax_amount: Decimal  # final_amount - discounted_amount
    final_amount: Decimal  # Результат process()


# =============================================================================
# VALIDATION
# =============================================================================


def coerce_payment_method(method: Any) -> PaymentMethod:
    """
    Приведение способа оплаты к PaymentMethod.

    Принимает PaymentMethod или строку со значением ("credit_card", "paypal", "cash").

    Raises:
        InvalidArgumentError: Если способ оплаты неизвестен
    """
    if isinstance(method, PaymentMethod):
        return method

    if isinstance(method, str):
        try:
            return PaymentMethod(method.strip().lower())
        except ValueError:
            pass

    allowed = ", ".join(m.value for m in PaymentMethod)
    raise InvalidArgumentError("method", method, f"expected one of: {allowed}")


def coerce_first_order_flag(is_first_order: Any) -> bool:
    """
    Проверка флага первого заказа.

    Принимается только bool: строки ("false"), None и числа не приводятся по truthiness.

    Raises:
        InvalidArgumentError: Если is_first_order не bool
    """
    if isinstance(is_first_order, bool):
        return is_first_order

    raise InvalidArgumentError("is_first_order", is_first_order, "expected bool")


def validate_amount(amount: Numeric) -> Decimal:
    """
    Валидация базовой суммы заказа.

    Raises:
        InvalidArgumentError: Если amount <= 0, NaN/Inf или не число
    """
    try:
        return validate_positive_money(amount, "amount")
    except (ValueError, TypeError) as e:
        logger.warning("Rejected payment amount %r: %s", amount, e)
        raise InvalidArgumentError("amount", amount, str(e)) from e


# =============================================================================
# CALCULATOR
# =============================================================================


class PaymentAmountCalculator:
    """Расчёт суммы к оплате: скидки по таблице, затем налог.

    Stateless: хранит только immutable конфигурацию, безопасен для
    конкурентного использования.
    """

    def __init__(self, config: CheckoutConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CheckoutConfig()

    def discount_multiplier(self, is_first_order: bool, method: PaymentMethod | str) -> Decimal:
        """
        Комбинированный множитель скидки для (is_first_order, method).

        Args:
            is_first_order: Первый заказ клиента
            method: Способ оплаты

        Returns:
            Множитель в (0, 1], применяется до налога
        """
        first_order = coerce_first_order_flag(is_first_order)
        payment_method = coerce_payment_method(method)
        return self.config.discount_multipliers[(first_order, payment_method)]

    def breakdown(
        self,
        amount: Numeric,
        is_first_order: bool,
        method: PaymentMethod | str,
    ) -> PaymentBreakdown:
        """
        Полная разбивка расчёта.

        Args:
            amount: Базовая сумма заказа (> 0)
            is_first_order: Первый заказ клиента
            method: Способ оплаты

        Returns:
            PaymentBreakdown; final_amount совпадает с process()

        Raises:
            InvalidArgumentError: Если amount <= 0, method неизвестен или is_first_order не bool
        """
        base_amount = validate_amount(amount)
        multiplier = self.discount_multiplier(is_first_order, method)

        tax_multiplier = self.config.tax_multiplier

        # Точное произведение для любых конечных сумм (в т.ч. > 1e26)
        with localcontext() as ctx:
            ctx.prec = money_precision(base_amount, multiplier, tax_multiplier)

            discounted = base_amount * multiplier
            taxed = discounted * tax_multiplier

            final_amount = quantize_money(taxed)
            discounted_amount = quantize_money(discounted)
            tax_amount = final_amount - discounted_amount

        return PaymentBreakdown(
            base_amount=base_amount,
            discount_multiplier=multiplier,
            discounted_amount=discounted_amount,
            tax_amount=tax_amount,
            final_amount=final_amount,
        )

    def process(
        self,
        amount: Numeric,
        is_first_order: bool,
        method: PaymentMethod | str,
    ) -> float:
        """
        Сумма к оплате: скидки, затем налог, округление до центов.

        Args:
            amount: Базовая сумма заказа (> 0)
            is_first_order: Первый заказ клиента
            method: Способ оплаты

        Returns:
            Итоговая сумма (float, 2 знака)

        Raises:
            InvalidArgumentError: Если amount <= 0, method неизвестен или is_first_order не bool

        Examples:
            >>> PaymentAmountCalculator().process(100.0, True, PaymentMethod.CREDIT_CARD)
            97.75
            >>> PaymentAmountCalculator().process(0.10, False, PaymentMethod.CASH)
            0.12
        """
        result = self.breakdown(amount, is_first_order, method)
        return round_money(result.final_amount)
