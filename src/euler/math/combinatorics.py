"""
Combinatorics — перестановки, декартово произведение, вложенные циклы

Все функции возвращают списки списков (а не кортежи itertools), чтобы
результат можно было сравнивать с литералами и изменять на месте.

Examples:
    >>> perms_with_reps(2, [1, 2])
    [[1, 1], [1, 2], [2, 1], [2, 2]]
    >>> cartesian_product([[1, 2], [3, 4]])
    [[1, 3], [1, 4], [2, 3], [2, 4]]
"""

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

from src.euler.math.guards import validate_non_negative_int

T = TypeVar("T")


def replicate(n: int, elt: T) -> Iterator[T]:
    """
    Итератор из n повторений elt.

    Examples:
        >>> list(replicate(2, [1, 2, 3]))
        [[1, 2, 3], [1, 2, 3]]
        >>> "".join(replicate(3, "abc"))
        'abcabcabc'
    """
    validate_non_negative_int(n, "n")
    return itertools.repeat(elt, n)


def cartesian_product(lists: Sequence[Sequence[T]]) -> list[list[T]]:
    """
    Декартово произведение списков в лексикографическом порядке входа.

    Пустой вход даёт пустой результат (а не [[]], как itertools.product).
    """
    if not lists:
        return []
    return [list(combo) for combo in itertools.product(*lists)]


def perms_with_reps(k: int, xs: Sequence[T]) -> list[list[T]]:
    """
    Упорядоченные выборки k элементов из xs с повторениями.

    Examples:
        >>> perms_with_reps(2, [1, 2, 3])[:4]
        [[1, 1], [1, 2], [1, 3], [2, 1]]
    """
    return cartesian_product(list(replicate(k, list(xs))))


def perms_without_reps(k: int, xs: Sequence[T]) -> list[list[T]]:
    """
    Упорядоченные выборки k элементов из xs без повторения значений.

    Элементы сравниваются по значению: одинаковые значения в xs
    не могут встретиться в одной выборке.

    Returns:
        k == 0 -> [[]]; k == 1 -> по одному элементу в порядке xs;
        k >= 2 -> отсортированный список выборок

    Examples:
        >>> perms_without_reps(2, [1, 2])
        [[1, 2], [2, 1]]
    """
    validate_non_negative_int(k, "k")

    if k == 0:
        return [[]]
    if k == 1:
        return [[x] for x in xs]

    tails = perms_without_reps(k - 1, xs)
    result = [tail + [x] for x in xs for tail in tails if x not in tail]
    result.sort()
    return result


def k_nested(k: int, xs: Sequence[T]) -> list[list[T]]:
    """
    Все последовательности длины k над xs — k вложенных циклов.

    k_nested(3, [1, 2]) эквивалентно:
        for i in xs: for j in xs: for l in xs: yield [i, j, l]
    с последующей сортировкой.

    Examples:
        >>> len(k_nested(8, ["red", "green", "blue", "orange"]))
        65536
    """
    validate_non_negative_int(k, "k")

    if k == 0:
        return [[]]
    if k == 1:
        return [[x] for x in xs]

    tails = k_nested(k - 1, xs)
    result = [tail + [x] for x in xs for tail in tails]
    result.sort()
    return result


def accumulate(xs: Iterable[int]) -> list[int]:
    """
    Нарастающий итог.

    Examples:
        >>> accumulate([1, 2, 3, 4])
        [1, 3, 6, 10]
    """
    return list(itertools.accumulate(xs))
