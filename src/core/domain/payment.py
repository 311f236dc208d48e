"""
Payment — Доменные модели оплаты заказа

Immutable Pydantic модели:
- PaymentMethod: закрытое перечисление способов оплаты
- OrderContext: входные параметры одного расчёта (не хранится между вызовами)
- CheckoutQuote: результат расчёта с полной разбивкой сумм
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.money import quantize_money


# =============================================================================
# ENUMS
# =============================================================================


class PaymentMethod(str, Enum):
    """Способ оплаты"""

    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CASH = "cash"


# =============================================================================
# ORDER CONTEXT
# =============================================================================


class OrderContext(BaseModel):
    """
    Параметры заказа для расчёта суммы к оплате.

    Каждый расчёт независим: модель не хранится и не мутирует.
    """

    base_amount: float = Field(..., gt=0, allow_inf_nan=False, description="Сумма заказа до скидок и налога")
    is_first_order: bool = Field(False, description="Первый заказ клиента")
    method: PaymentMethod = Field(..., description="Способ оплаты")

    model_config = {"frozen": True}


# =============================================================================
# CHECKOUT QUOTE
# =============================================================================


class CheckoutQuote(BaseModel):
    """
    Результат расчёта заказа.

    Все суммы округлены до центов (ROUND_HALF_UP).
    """

    # Вход
    base_amount: float = Field(..., gt=0, description="Сумма заказа до скидок и налога")
    is_first_order: bool = Field(..., description="Первый заказ клиента")
    method: PaymentMethod = Field(..., description="Способ оплаты")

    # Разбивка
    discount_multiplier: float = Field(..., gt=0, le=1, description="Комбинированный множитель скидки")
    discounted_amount: float = Field(..., ge=0, description="Сумма после скидок, до налога")
    tax_amount: float = Field(..., ge=0, description="Налог")
    final_amount: float = Field(..., ge=0, description="Сумма к оплате (скидки + налог)")

    # Доставка
    delivery_fee: float = Field(..., ge=0, description="Стоимость доставки")
    total: float = Field(..., ge=0, description="Итого: final_amount + delivery_fee")

    model_config = {"frozen": True}

    @field_validator("discounted_amount", "tax_amount", "final_amount", "delivery_fee", "total")
    @classmethod
    def validate_cents(cls, v: float) -> float:
        """Суммы должны быть кратны центу"""
        if float(quantize_money(v)) != v:
            raise ValueError(f"Amount {v} is not rounded to cents")
        return v

    @model_validator(mode="after")
    def validate_total(self) -> "CheckoutQuote":
        """Проверка, что total == final_amount + delivery_fee"""
        expected = quantize_money(self.final_amount) + quantize_money(self.delivery_fee)
        if quantize_money(self.total) != expected:
            raise ValueError(
                f"total {self.total} must equal final_amount {self.final_amount} "
                f"+ delivery_fee {self.delivery_fee}"
            )
        return self

    def has_delivery_fee(self) -> bool:
        """
        Проверка, начислена ли доставка.

        Returns:
            True если delivery_fee > 0
        """
        return self.delivery_fee > 0
