"""
Checkout errors.
"""

from typing import Any


class InvalidArgumentError(ValueError):
    """
    Невалидный аргумент расчёта (ошибка вызывающей стороны).

    Поднимается синхронно, без частичного результата и побочных эффектов.
    Примеры: amount <= 0, NaN сумма, неизвестный способ оплаты.

    Attributes:
        argument: Имя аргумента
        value: Отклонённое значение
    """

    def __init__(self, argument: str, value: Any, reason: str):
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}: {value!r} ({reason})")
