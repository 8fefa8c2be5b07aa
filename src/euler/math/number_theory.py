"""
Number Theory — суммы делителей, функция Эйлера, цепные дроби корней

Examples:
    >>> divisor_sum(10)
    8
    >>> divisor_sum_list(10)
    [0, 0, 1, 1, 3, 1, 6, 1, 7, 4, 8]
"""

import logging
import math
from typing import Optional

from src.euler.math.guards import validate_non_negative_int

logger = logging.getLogger(__name__)


# =============================================================================
# DIVISOR SUMS
# =============================================================================


def divisor_sum(n: int) -> int:
    """
    Сумма собственных делителей n (без самого n).

    Перебор делителей x до isqrt(n); парный делитель n // x добавляется
    один раз, если x * x == n.

    Args:
        n: Неотрицательное целое

    Returns:
        Сумма собственных делителей; 0 для n = 0 и n = 1

    Examples:
        >>> divisor_sum(28)
        28
        >>> divisor_sum(1)
        0
    """
    validate_non_negative_int(n, "n")

    if n < 2:
        return 0

    total = 1
    for x in range(2, math.isqrt(n) + 1):
        if n % x == 0:
            d = n // x
            total += x if d == x else x + d
    return total


def divisor_sum_list(limit: int) -> list[int]:
    """
    Список divisor_sum(i) для i от 0 до limit (решето).

    Каждое i прибавляется ко всем кратным 2i, 3i, ... <= limit.

    Returns:
        Список длины limit + 1, result[n] == divisor_sum(n)
    """
    validate_non_negative_int(limit, "limit")

    sums = [0] * (limit + 1)
    for i in range(1, limit // 2 + 1):
        for j in range(2 * i, limit + 1, i):
            sums[j] += i

    logger.debug("divisor_sum_list(%d) computed", limit)
    return sums


# =============================================================================
# TOTIENT
# =============================================================================


def phis(d: int) -> list[int]:
    """
    Значения функции Эйлера phi(i) для i от 0 до d.

    phi(n) — количество чисел в [1, n], взаимно простых с n.

    Решето: для каждого простого p (phi[p] ещё равно p) каждое кратное m
    умножается на (1 - 1/p), т.е. phi[m] -= phi[m] // p.

    Returns:
        Список длины d + 1; phi(0) = 0, phi(1) = 1

    Examples:
        >>> phis(100)[90:]
        [24, 72, 44, 60, 46, 72, 32, 96, 42, 60, 40]
    """
    validate_non_negative_int(d, "d")

    phi = list(range(d + 1))
    for p in range(2, d + 1):
        if phi[p] != p:
            continue
        for m in range(p, d + 1, p):
            phi[m] -= phi[m] // p

    logger.debug("phis(%d) computed", d)
    return phi


# =============================================================================
# CONTINUED FRACTION OF SQRT
# =============================================================================


def sqrt_terms(n: int) -> Optional[tuple[int, list[int]]]:
    """
    Периодическая цепная дробь sqrt(n) в форме (a0, [t1, ..., tk]).

    Период заканчивается, когда очередное неполное частное равно 2 * a0.
    См. https://projecteuler.net/problem=64

    Args:
        n: Неотрицательное целое

    Returns:
        (a0, period) или None, если n — точный квадрат

    Examples:
        >>> sqrt_terms(13)
        (3, [1, 1, 1, 1, 6])
        >>> sqrt_terms(25) is None
        True
    """
    validate_non_negative_int(n, "n")

    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return None

    period: list[int] = []
    m, d, a = 0, 1, a0
    while a != 2 * a0:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        period.append(a)

    return (a0, period)
