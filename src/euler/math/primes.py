"""
Primes — разложение на простые множители

Examples:
    >>> prime_factors(360)
    [2, 2, 2, 3, 3, 5]
    >>> sopf(360)
    10
"""

import logging

from src.euler.math.guards import validate_non_negative_int

logger = logging.getLogger(__name__)


def prime_factors(n: int) -> list[int]:
    """
    Простые множители n с кратностью, по возрастанию.

    Пробное деление до sqrt(остатка); остаток > 1 после цикла — простой.

    Returns:
        Список множителей; [] для n <= 1
    """
    validate_non_negative_int(n, "n")

    factors: list[int] = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def prime_factors_unique(n: int) -> list[int]:
    """Различные простые множители n по возрастанию."""
    return list(dict.fromkeys(prime_factors(n)))


def sopf(n: int) -> int:
    """Сумма различных простых множителей n (sopf, OEIS A008472)."""
    return sum(prime_factors_unique(n))


def prime_factor_cnt(n: int) -> list[int]:
    """
    Количество различных простых делителей для каждого i в [0, n) (решето).

    Returns:
        Список длины n

    Examples:
        >>> prime_factor_cnt(11)
        [0, 0, 1, 1, 1, 1, 2, 1, 1, 1, 2]
    """
    validate_non_negative_int(n, "n")

    counts = [0] * n
    for i in range(2, n):
        if counts[i] == 0:
            for j in range(i, n, i):
                counts[j] += 1

    logger.debug("prime_factor_cnt(%d) computed", n)
    return counts
