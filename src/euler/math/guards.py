"""
Guards — валидация аргументов числовых функций

Все функции библиотеки принимают обычные int/str значения. Некорректный вход
не должен приводить к бесконечному циклу или к тихо неверному результату,
поэтому проверки вынесены сюда и выбрасывают ValueError с именем параметра.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool не считается int (True/False отклоняются)
2. Сообщение об ошибке всегда содержит имя параметра и полученное значение
"""

from typing import Any


def _is_strict_int(value: Any) -> bool:
    """int, но не bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_non_negative_int(value: Any, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0

    Examples:
        >>> validate_non_negative_int(0, "n")
        >>> validate_non_negative_int(-1, "n")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: n must be non-negative, got -1
    """
    if not _is_strict_int(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: Any, name: str) -> None:
    """
    Валидация, что значение — положительное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value <= 0
    """
    if not _is_strict_int(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_digit_string(value: Any, name: str) -> None:
    """
    Валидация, что значение — непустая строка из десятичных цифр ASCII.

    str.isdigit() не подходит: он пропускает '²' и цифры других алфавитов.

    Raises:
        ValueError: Если value не str, пустая или содержит не-цифры
    """
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")

    if not value:
        raise ValueError(f"{name} must not be empty")

    for ch in value:
        if not "0" <= ch <= "9":
            raise ValueError(f"{name} must contain only digits 0-9, got {value!r}")
