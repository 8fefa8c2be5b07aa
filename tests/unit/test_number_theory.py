"""
Тесты для модуля Number Theory

Проверяет:
1. divisor_sum и согласованность с divisor_sum_list
2. phis: известные значения и свойства функции Эйлера
3. sqrt_terms: периоды цепных дробей корней
"""

import math

import pytest

from src.euler.math.number_theory import divisor_sum, divisor_sum_list, phis, sqrt_terms


class TestDivisorSum:
    """Тесты divisor_sum"""

    def test_small_values(self) -> None:
        assert divisor_sum(0) == 0
        assert divisor_sum(1) == 0
        assert divisor_sum(10) == 8
        assert divisor_sum(12) == 16

    def test_perfect_numbers(self) -> None:
        for n in (6, 28, 496, 8128):
            assert divisor_sum(n) == n

    def test_square_counts_root_once(self) -> None:
        """16: 1 + 2 + 4 + 8 = 15 (4 не удваивается)"""
        assert divisor_sum(16) == 15

    def test_amicable_pair(self) -> None:
        assert divisor_sum(220) == 284
        assert divisor_sum(284) == 220

    def test_prime(self) -> None:
        assert divisor_sum(97) == 1

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="n must be non-negative"):
            divisor_sum(-4)


class TestDivisorSumList:
    """Тесты divisor_sum_list"""

    def test_first_values(self) -> None:
        assert divisor_sum_list(10) == [0, 0, 1, 1, 3, 1, 6, 1, 7, 4, 8]

    def test_matches_divisor_sum(self) -> None:
        sums = divisor_sum_list(2000)
        assert len(sums) == 2001
        for n, s in enumerate(sums):
            assert s == divisor_sum(n)

    def test_zero_limit(self) -> None:
        assert divisor_sum_list(0) == [0]


class TestPhis:
    """Тесты phis"""

    def test_known_tail(self) -> None:
        assert phis(100)[90:] == [24, 72, 44, 60, 46, 72, 32, 96, 42, 60, 40]

    def test_first_values(self) -> None:
        assert phis(10) == [0, 1, 1, 2, 2, 4, 2, 6, 4, 6, 4]

    def test_matches_gcd_count(self) -> None:
        values = phis(300)
        for n in range(1, 301):
            assert values[n] == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)

    def test_prime_is_n_minus_one(self) -> None:
        values = phis(1000)
        for p in (2, 3, 97, 997):
            assert values[p] == p - 1

    def test_small_limits(self) -> None:
        assert phis(0) == [0]
        assert phis(1) == [0, 1]


class TestSqrtTerms:
    """Тесты sqrt_terms"""

    def test_sqrt_13(self) -> None:
        assert sqrt_terms(13) == (3, [1, 1, 1, 1, 6])

    def test_sqrt_23(self) -> None:
        assert sqrt_terms(23) == (4, [1, 3, 1, 8])

    def test_sqrt_2(self) -> None:
        assert sqrt_terms(2) == (1, [2])

    def test_perfect_squares(self) -> None:
        for n in (0, 1, 4, 25, 10000):
            assert sqrt_terms(n) is None

    def test_period_ends_with_double_a0(self) -> None:
        for n in range(2, 200):
            result = sqrt_terms(n)
            if result is None:
                continue
            a0, period = result
            assert period[-1] == 2 * a0

    def test_odd_periods_below_13(self) -> None:
        """Project Euler 64: ровно 4 нечётных периода для N <= 13"""
        odd = [n for n in range(2, 14) if (r := sqrt_terms(n)) is not None and len(r[1]) % 2 == 1]
        assert len(odd) == 4
