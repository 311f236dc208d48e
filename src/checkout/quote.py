"""
CheckoutService — Композиция расчёта заказа

    final_amount = PaymentAmountCalculator.process(amount, is_first_order, method)
    delivery_fee = DeliveryFeeCalculator.calculate_delivery_fee(final_amount)
    total        = final_amount + delivery_fee

Порог доставки проверяется по сумме ПОСЛЕ скидок и налога:
55.00 (первый заказ, cash) → 56.93 → доставка бесплатна.
"""

import logging
from decimal import localcontext
from typing import Any, Dict

from src.checkout.config import CheckoutConfig
from src.checkout.delivery_fee import DeliveryFeeCalculator
from src.checkout.payment_processor import (
    PaymentAmountCalculator,
    coerce_first_order_flag,
    coerce_payment_method,
)
from src.core.contracts import validate_order_request
from src.core.domain.payment import CheckoutQuote, OrderContext, PaymentMethod
from src.core.math.money import Numeric, money_precision, quantize_money, round_money

logger = logging.getLogger(__name__)


class CheckoutService:
    """Расчёт полного заказа: сумма к оплате + доставка."""

    def __init__(self, config: CheckoutConfig | None = None):
        self.config = config or CheckoutConfig()
        self.payment_calculator = PaymentAmountCalculator(self.config)
        self.delivery_calculator = DeliveryFeeCalculator(self.config)

    def quote(
        self,
        amount: Numeric,
        is_first_order: bool,
        method: PaymentMethod | str,
    ) -> CheckoutQuote:
        """
        Расчёт заказа с полной разбивкой.

        Args:
            amount: Базовая сумма заказа (> 0)
            is_first_order: Первый заказ клиента
            method: Способ оплаты

        Returns:
            CheckoutQuote

        Raises:
            InvalidArgumentError: Если amount <= 0, method неизвестен или is_first_order не bool
        """
        breakdown = self.payment_calculator.breakdown(amount, is_first_order, method)
        delivery_fee = self.delivery_calculator.fee_for(breakdown.final_amount)
        with localcontext() as ctx:
            ctx.prec = money_precision(breakdown.final_amount, delivery_fee)
            total = quantize_money(breakdown.final_amount + delivery_fee)

        quote = CheckoutQuote(
            base_amount=float(breakdown.base_amount),
            is_first_order=coerce_first_order_flag(is_first_order),
            method=coerce_payment_method(method),
            discount_multiplier=float(breakdown.discount_multiplier),
            discounted_amount=round_money(breakdown.discounted_amount),
            tax_amount=round_money(breakdown.tax_amount),
            final_amount=round_money(breakdown.final_amount),
            delivery_fee=round_money(delivery_fee),
            total=round_money(total),
        )

        logger.debug(
            "Quoted order: amount=%s first_order=%s method=%s final=%s fee=%s total=%s",
            amount,
            quote.is_first_order,
            quote.method.value,
            quote.final_amount,
            quote.delivery_fee,
            quote.total,
        )
        return quote

    def quote_order(self, order: OrderContext) -> CheckoutQuote:
        """Расчёт заказа из валидированной модели OrderContext."""
        return self.quote(order.base_amount, order.is_first_order, order.method)

    def quote_payload(self, payload: Dict[str, Any]) -> CheckoutQuote:
        """
        Расчёт заказа из JSON запроса.

        Payload проверяется по контракту order_request.json.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует контракту
        """
        validate_order_request(payload)
        order = OrderContext(
            base_amount=payload["amount"],
            is_first_order=payload.get("is_first_order", False),
            method=payload["method"],
        )
        return self.quote_order(order)


# =============================================================================
# MODULE-LEVEL SHORTCUTS (default config)
# =============================================================================

_DEFAULT_SERVICE: CheckoutService | None = None


def _default_service() -> CheckoutService:
    global _DEFAULT_SERVICE
    if _DEFAULT_SERVICE is None:
        _DEFAULT_SERVICE = CheckoutService()
    return _DEFAULT_SERVICE


def process_payment(amount: Numeric, is_first_order: bool, method: PaymentMethod | str) -> float:
    """Сумма к оплате с конфигурацией по умолчанию."""
    return _default_service().payment_calculator.process(amount, is_first_order, method)


def calculate_delivery_fee(amount: Numeric) -> float:
    """Стоимость доставки с конфигурацией по умолчанию."""
    return _default_service().delivery_calculator.calculate_delivery_fee(amount)


def quote_order(amount: Numeric, is_first_order: bool, method: PaymentMethod | str) -> CheckoutQuote:
    """Полный расчёт заказа с конфигурацией по умолчанию."""
    return _default_service().quote(amount, is_first_order, method)
