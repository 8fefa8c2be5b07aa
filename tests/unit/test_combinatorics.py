"""
Тесты для модуля Combinatorics

Проверяет:
1. replicate и cartesian_product
2. Перестановки с повторениями и без
3. k вложенных циклов
4. Нарастающий итог
"""

import pytest

from src.euler.math.combinatorics import (
    accumulate,
    cartesian_product,
    k_nested,
    perms_with_reps,
    perms_without_reps,
    replicate,
)


class TestReplicate:
    """Тесты replicate"""

    def test_lists(self) -> None:
        assert list(replicate(2, [1, 2, 3])) == [[1, 2, 3], [1, 2, 3]]

    def test_strings(self) -> None:
        assert "".join(replicate(3, "abc")) == "abcabcabc"

    def test_zero(self) -> None:
        assert list(replicate(0, "x")) == []

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="n must be non-negative"):
            replicate(-1, "x")


class TestCartesianProduct:
    """Тесты cartesian_product"""

    def test_two_lists(self) -> None:
        assert cartesian_product([[1, 2], [3, 4]]) == [[1, 3], [1, 4], [2, 3], [2, 4]]

    def test_single_list(self) -> None:
        assert cartesian_product([[1, 2, 3]]) == [[1], [2], [3]]

    def test_empty_input(self) -> None:
        assert cartesian_product([]) == []

    def test_empty_member(self) -> None:
        assert cartesian_product([[1, 2], []]) == []

    def test_size(self) -> None:
        assert len(cartesian_product([[1, 2], "abc", (True, False)])) == 12


class TestPermsWithReps:
    """Тесты perms_with_reps"""

    def test_two_of_two(self) -> None:
        assert perms_with_reps(2, [1, 2]) == [[1, 1], [1, 2], [2, 1], [2, 2]]

    def test_two_of_three(self) -> None:
        expected = [[1, 1], [1, 2], [1, 3], [2, 1], [2, 2], [2, 3], [3, 1], [3, 2], [3, 3]]
        assert perms_with_reps(2, [1, 2, 3]) == expected

    def test_count(self) -> None:
        assert len(perms_with_reps(4, "abc")) == 3 ** 4


class TestPermsWithoutReps:
    """Тесты perms_without_reps"""

    def test_two_of_two(self) -> None:
        assert perms_without_reps(2, [1, 2]) == [[1, 2], [2, 1]]

    def test_k_zero(self) -> None:
        assert perms_without_reps(0, [1, 2, 3]) == [[]]

    def test_k_one_keeps_order(self) -> None:
        assert perms_without_reps(1, [3, 1, 2]) == [[3], [1], [2]]

    def test_full_permutations_sorted(self) -> None:
        result = perms_without_reps(3, [3, 1, 2])
        assert result == [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]

    def test_count(self) -> None:
        """P(5, 3) = 60"""
        assert len(perms_without_reps(3, [1, 2, 3, 4, 5])) == 60

    def test_k_larger_than_input(self) -> None:
        assert perms_without_reps(3, [1, 2]) == []


class TestKNested:
    """Тесты k_nested"""

    def test_three_of_two(self) -> None:
        expected = [
            [1, 1, 1], [1, 1, 2], [1, 2, 1], [1, 2, 2],
            [2, 1, 1], [2, 1, 2], [2, 2, 1], [2, 2, 2],
        ]
        assert k_nested(3, [1, 2]) == expected

    def test_colours(self) -> None:
        assert len(k_nested(8, ["red", "green", "blue", "orange"])) == 65536

    def test_k_zero(self) -> None:
        assert k_nested(0, [1, 2]) == [[]]


class TestAccumulate:
    """Тесты accumulate"""

    def test_running_total(self) -> None:
        assert accumulate([1, 2, 3, 4]) == [1, 3, 6, 10]
        assert accumulate([1, 1, 1, 1, 1]) == [1, 2, 3, 4, 5]

    def test_empty(self) -> None:
        assert accumulate([]) == []
