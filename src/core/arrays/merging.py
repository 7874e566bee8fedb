"""
Merging — слияние двух отсортированных последовательностей

Слияние двумя указателями с ИНКРЕМЕНТАЛЬНОЙ проверкой сортировки:
вход не проверяется заранее, каждый элемент сравнивается со своим
предшественником в момент, когда он попадает в результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат отсортирован по возрастанию, если оба входа отсортированы
2. Любой элемент, меньший предыдущего в своём входе → InvalidArgumentError
3. При равенстве первым берётся элемент из input2
"""

import logging
from collections.abc import Sequence

from src.core.arrays.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def is_ascending(input: Sequence[int]) -> bool:
    """
    Проверка, что каждый элемент >= предыдущего.

    Examples:
        >>> is_ascending([-4, -2, 3, 3, 5])
        True
        >>> is_ascending([5, 1])
        False
    """
    return all(previous <= current for previous, current in zip(input, input[1:]))


def _check_step(input: Sequence[int], index: int, name: str) -> None:
    """Проверка, что input[index] не меньше input[index - 1]."""
    if index > 0 and input[index] < input[index - 1]:
        logger.debug(
            "merge_sorted_arrays rejected: %s[%d]=%d < %s[%d]=%d",
            name,
            index,
            input[index],
            name,
            index - 1,
            input[index - 1],
        )
        raise InvalidArgumentError(
            f"{name} is not sorted ascending at index {index}: "
            f"{input[index]} < {input[index - 1]}"
        )


def merge_sorted_arrays(input: Sequence[int], input2: Sequence[int]) -> list[int]:
    """
    Слияние двух отсортированных по возрастанию последовательностей.

    Args:
        input: Первая отсортированная последовательность
        input2: Вторая отсортированная последовательность

    Returns:
        Новый отсортированный список из всех элементов input и input2

    Raises:
        InvalidArgumentError: если input или input2 не отсортированы по возрастанию

    Examples:
        >>> merge_sorted_arrays([-4, -2, 3], [1, 12])
        [-4, -2, 1, 3, 12]
    """
    merged: list[int] = []
    i = 0
    j = 0

    while i < len(input) and j < len(input2):
        if input[i] < input2[j]:
            _check_step(input, i, "input")
            merged.append(input[i])
            i += 1
        else:
            _check_step(input2, j, "input2")
            merged.append(input2[j])
            j += 1

    # Хвосты: проверка продолжается поэлементно
    while i < len(input):
        _check_step(input, i, "input")
        merged.append(input[i])
        i += 1

    while j < len(input2):
        _check_step(input2, j, "input2")
        merged.append(input2[j])
        j += 1

    return merged
