"""
Combinations: выбор по одному элементу из каждого набора

Генерирует все способы выбрать ровно одно значение из каждого набора
(декартово произведение конечных наборов). Используется генератором знаков
ортантов как black-box комбинатор.

ПОРЯДОК:
    Левый набор меняется медленнее всех (порядок "одометра"):
    [[a, b], [x, y]] → [a, x], [a, y], [b, x], [b, y]
"""

import itertools
import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def list_combinations(choice_sets: Sequence[Sequence[T]]) -> list[list[T]]:
    """
    Все комбинации "по одному элементу из каждого набора".

    Args:
        choice_sets: Последовательность конечных наборов (один на измерение)

    Returns:
        Список комбинаций; каждая комбинация имеет длину len(choice_sets)

    Examples:
        >>> list_combinations([[-1, 1], [-1, 1]])
        [[-1, -1], [-1, 1], [1, -1], [1, 1]]
        >>> list_combinations([])
        [[]]
        >>> list_combinations([[1, 2], []])
        []
    """
    return [list(combo) for combo in itertools.product(*choice_sets)]


def count_combinations(choice_sets: Sequence[Sequence[T]]) -> int:
    """
    Количество комбинаций без их материализации.

    Args:
        choice_sets: Последовательность конечных наборов

    Returns:
        Произведение размеров наборов (1 для пустой последовательности)
    """
    return math.prod(len(choices) for choices in choice_sets)
