"""
Money — Decimal-safe денежные примитивы

Модуль обеспечивает корректную арифметику денежных сумм:
- Конверсия float/int/str → Decimal без артефактов двоичного представления
- Валидация (finite, положительность)
- Округление до центов по правилу ROUND_HALF_UP (half away from zero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float всегда конвертируется через str(): 0.1 → Decimal("0.1"), а не 0.1000000000000000055...
2. Округление выполняется один раз, в конце расчёта
3. Встроенный round() НЕ используется (banker's rounding: round(0.125, 2) == 0.12)
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext
from typing import Final, Union

Numeric = Union[int, float, str, Decimal]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Шаг квантования денежных сумм (центы)
MONEY_QUANTUM: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: Numeric) -> Decimal:
    """
    Конверсия числа в Decimal.

    Args:
        value: int, float, str или Decimal

    Returns:
        Decimal представление value

    Raises:
        TypeError: Если value не числовой тип (bool тоже отклоняется)
        ValueError: Если строку нельзя разобрать как число

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("19.99")
        Decimal('19.99')
    """
    # bool является подклассом int, но не является суммой
    if isinstance(value, bool):
        raise TypeError(f"Money value must be numeric, got bool: {value}")

    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Cannot parse money value from string: {value!r}") from None

    raise TypeError(f"Money value must be numeric, got {type(value).__name__}: {value!r}")


def is_finite_money(value: Decimal) -> bool:
    """Проверка, что Decimal конечен (не NaN, не Infinity)."""
    return value.is_finite()


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def quantize_money(value: Numeric) -> Decimal:
    """
    Округление до центов (ROUND_HALF_UP).

    Args:
        value: Сумма

    Returns:
        Decimal с двумя знаками после запятой

    Examples:
        >>> quantize_money("0.115")
        Decimal('0.12')
        >>> quantize_money("0.0115")
        Decimal('0.01')
        >>> quantize_money("-0.125")
        Decimal('-0.13')
    """
    amount = to_decimal(value)

    with localcontext() as ctx:
        # Коэффициент результата: все цифры целой части + 2 знака
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def round_money(value: Numeric) -> float:
    """
    Округление до центов с возвратом float.

    Используется на границе публичного API калькуляторов.
    """
    return float(quantize_money(value))


def money_precision(*values: Decimal) -> int:
    """
    Точность decimal-контекста для точного произведения values и его округления до центов.

    Точность по умолчанию (28 цифр) недостаточна для сумм порядка 1e26 и выше:
    quantize() поднимает InvalidOperation, а умножение молча теряет центы.

    Args:
        values: Множители (конечные Decimal)

    Returns:
        Точность не ниже текущей точности контекста

    Examples:
        >>> with localcontext() as ctx:
        ...     ctx.prec = money_precision(Decimal("1E+30"), Decimal("1.15"))
    """
    digits = sum(len(v.as_tuple().digits) for v in values)
    integer_digits = sum(max(v.adjusted(), 0) + 1 for v in values)
    return max(getcontext().prec, digits, integer_digits + 3)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive_money(value: Numeric, name: str) -> Decimal:
    """
    Валидация, что сумма конечна и строго положительна.

    Args:
        value: Проверяемая сумма
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как Decimal

    Raises:
        ValueError: Если value <= 0, NaN/Inf или не парсится
        TypeError: Если value не числовой
    """
    amount = to_decimal(value)

    if not is_finite_money(amount):
        raise ValueError(f"{name} must be a finite number (not NaN/Inf), got {value}")

    if amount <= ZERO:
        raise ValueError(f"{name} must be positive (> 0), got {value}")

    return amount
