"""
Digits — операции над десятичной записью чисел

Палиндромы, пандигитальные строки, суммы цифр, перестановки цифр,
конверсии число <-> цифры <-> байты.

Examples:
    >>> is_palindrome(12321)
    True
    >>> is_pandigital("4560123", 0)
    True
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar, Union

from src.euler.math.guards import validate_digit_string, validate_non_negative_int

T = TypeVar("T")


def is_pandigital(s: str, start: int) -> bool:
    """
    Использует ли s каждую цифру от start до start + len(s) - 1 ровно один раз.

    Обычное определение — цифры 1..n; параметр start позволяет
    проверять и 0..n-1.

    Examples:
        >>> is_pandigital("456123", 1)
        True
        >>> is_pandigital("1223", 1)
        False
    """
    validate_non_negative_int(start, "start")

    expected = {chr(ord("0") + start + i) for i in range(len(s))}
    return set(s) == expected


def sum_of_digits(s: Union[str, int]) -> int:
    """
    Сумма цифр десятичной записи.

    Raises:
        ValueError: Если s содержит не-цифры

    Examples:
        >>> sum_of_digits("123")
        6
        >>> sum_of_digits(2 ** 15)
        26
    """
    text = str(s)
    validate_digit_string(text, "s")
    return sum(ord(ch) - ord("0") for ch in text)


def to_bytes(value: Any) -> bytes:
    """
    ASCII-байты строкового представления value.

    Examples:
        >>> to_bytes(123)
        b'123'
    """
    return str(value).encode("ascii")


def from_bytes(data: bytes, cast: Callable[[str], T] = int) -> T:
    """
    Разбор байтов обратно в значение.

    Args:
        data: ASCII-байты
        cast: Конструктор результата (default: int)

    Raises:
        ValueError: Если байты не ASCII или cast не смог разобрать строку

    Examples:
        >>> from_bytes(b"321")
        321
    """
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as e:
        raise ValueError(f"data must be ASCII, got {data!r}") from e
    return cast(text)


def to_digits(n: int) -> list[int]:
    """
    Десятичные цифры n, старшая первой.

    Examples:
        >>> to_digits(123)
        [1, 2, 3]
        >>> to_digits(0)
        [0]
    """
    validate_non_negative_int(n, "n")
    return [int(ch) for ch in str(n)]


def from_digits(digits: Sequence[int]) -> int:
    """
    Число из списка десятичных цифр (пустой список -> 0).

    Examples:
        >>> from_digits([1, 2, 3])
        123
    """
    result = 0
    for d in digits:
        result = result * 10 + d
    return result


def is_palindrome(value: Any) -> bool:
    """
    Читается ли str(value) одинаково в обе стороны.

    Examples:
        >>> is_palindrome("abcba")
        True
        >>> is_palindrome(123)
        False
    """
    text = str(value)
    return text == text[::-1]


def is_perm(a: Any, b: Any) -> bool:
    """
    Являются ли str(a) и str(b) перестановками друг друга.

    Examples:
        >>> is_perm(123, 231)
        True
        >>> is_perm("yes", "esy")
        True
    """
    return sorted(str(a)) == sorted(str(b))
