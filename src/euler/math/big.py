"""
Big — арифметика произвольной точности

Python int не ограничен по размеру, поэтому все функции работают с обычными
int и не требуют отдельной big-integer библиотеки.

Модуль содержит:
- factorial: n!
- precision_sqrt: цифры sqrt(n) методом поразрядного вычитания
- continued_fraction / convergents: вычисление цепных дробей
- integer_partitions: p(0..n) через рекуррентность пентагональных чисел

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. factorial(n) == n * factorial(n - 1) для n >= 2
2. integer_partitions(n)[0] == 1 для любого n >= 0
3. Все функции детерминированы и не имеют состояния

Examples:
    >>> factorial(31)
    8222838654177922817725562880000000
    >>> precision_sqrt(2, 40)
    1414213562373095048801688724209698078569
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Final

from src.euler.math.guards import validate_non_negative_int, validate_positive_int

logger = logging.getLogger(__name__)

# Знаки слагаемых рекуррентности Эйлера: + + - - + + - - ...
PARTITION_SIGNS: Final[tuple[int, int, int, int]] = (1, 1, -1, -1)


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    n! для любого неотрицательного n.

    Args:
        n: Неотрицательное целое

    Returns:
        n! (factorial(0) == factorial(1) == 1)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> factorial(15)
        1307674368000
    """
    validate_non_negative_int(n, "n")

    fact = 1
    for i in range(2, n + 1):
        fact *= i
    return fact


# =============================================================================
# PRECISION SQRT
# =============================================================================


def precision_sqrt(n: int, digits: int) -> int:
    """
    Цифры квадратного корня из n, вычисленные методом поразрядного вычитания.

    Функция не сообщает, где стоит десятичная точка: для sqrt(2) = 1.41421...
    возвращается 141421...

    Алгоритм (subtraction method, F. Jarvis):
        a = 5n, b = 5
        пока b < 10^(digits + 1):
            если a >= b: a -= b, b += 10
            иначе:       a *= 100, b = (b // 10) * 100 + 5
        результат = b // 100

    Args:
        n: Положительное целое (при n = 0 метод не завершается)
        digits: Требуемая точность

    Returns:
        Цифры sqrt(n) без десятичной точки

    Raises:
        ValueError: Если n <= 0 или digits < 0

    Examples:
        >>> precision_sqrt(2, 10)
        14142135623
    """
    validate_positive_int(n, "n")
    validate_non_negative_int(digits, "digits")

    limit = 10 ** (digits + 1)
    a = 5 * n
    b = 5
    while b < limit:
        if a >= b:
            a -= b
            b += 10
        else:
            a *= 100
            b = (b // 10) * 100 + 5

    logger.debug("precision_sqrt(%d, %d) finished", n, digits)
    return b // 100


# =============================================================================
# CONTINUED FRACTIONS
# =============================================================================


def continued_fraction(a0: int, terms: Sequence[int]) -> tuple[int, int]:
    """
    Вычисление цепной дроби a0 + 1/(t1 + 1/(t2 + ...)).

    Форма дроби: (a0, [t1, t2, t3, ...]). Периодическую форму для sqrt(n)
    даёт src.euler.math.number_theory.sqrt_terms.

    Дробь сворачивается от последнего члена к a0:
        (num, den) <- (t * num + den, num)

    Args:
        a0: Целая часть
        terms: Последовательность неполных частных t1..tk

    Returns:
        (numerator, denominator); при пустом terms — (a0, 1)

    Examples:
        >>> continued_fraction(3, [1, 1, 1, 1, 6] * 3)
        (154451, 42837)
        >>> continued_fraction(7, [])
        (7, 1)
    """
    validate_non_negative_int(a0, "a0")

    values = [a0, *terms]
    numerator = values.pop()
    denominator = 1
    while values:
        term = values.pop()
        numerator, denominator = term * numerator + denominator, numerator

    return (numerator, denominator)


def convergents(a0: int, terms: Sequence[int]) -> Iterator[tuple[int, int]]:
    """
    Последовательные подходящие дроби цепной дроби (a0, terms).

    k-я выданная пара совпадает с continued_fraction(a0, terms[:k]),
    но вычисляется прямой рекуррентностью за O(1) на шаг:
        h_k = t_k * h_{k-1} + h_{k-2}
        k_k = t_k * k_{k-1} + k_{k-2}

    Yields:
        (h_k, k_k) начиная с (a0, 1)

    Examples:
        >>> list(convergents(1, [2, 2, 2]))
        [(1, 1), (3, 2), (7, 5), (17, 12)]
    """
    validate_non_negative_int(a0, "a0")

    h_prev, h = 1, a0
    k_prev, k = 0, 1
    yield (h, k)

    for term in terms:
        h_prev, h = h, term * h + h_prev
        k_prev, k = k, term * k + k_prev
        yield (h, k)


# =============================================================================
# INTEGER PARTITIONS
# =============================================================================


def generalized_pentagonals(limit: int) -> list[int]:
    """
    Обобщённые пентагональные числа, не превосходящие limit.

    Для m = 1, 2, 3, ...: m(3m - 1)/2 и m(3m + 1)/2,
    т.е. 1, 2, 5, 7, 12, 15, 22, 26, ...

    Examples:
        >>> generalized_pentagonals(20)
        [1, 2, 5, 7, 12, 15]
    """
    validate_non_negative_int(limit, "limit")

    result: list[int] = []
    m = 1
    while True:
        first = m * (3 * m - 1) // 2
        if first > limit:
            break
        result.append(first)

        second = first + m
        if second > limit:
            break
        result.append(second)
        m += 1

    return result


def integer_partitions(n: int) -> list[int]:
    """
    Список [p(0), p(1), ..., p(n)] значений функции разбиений.

    Рекуррентность Эйлера (теорема о пентагональных числах):
        p(i) = Σ sign(j) * p(i - g_j),
    где g_j — обобщённые пентагональные числа, знаки идут как + + - -.

    См. http://oeis.org/A000041

    Args:
        n: Неотрицательное целое

    Returns:
        Список длины n + 1

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> integer_partitions(10)
        [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42]
    """
    validate_non_negative_int(n, "n")

    pentagonals = generalized_pentagonals(n)
    p = [1]

    for i in range(1, n + 1):
        total = 0
        for j, g in enumerate(pentagonals):
            if g > i:
                break
            total += PARTITION_SIGNS[j % 4] * p[i - g]
        p.append(total)

    logger.debug("integer_partitions(%d): %d pentagonal terms used", n, len(pentagonals))
    return p
