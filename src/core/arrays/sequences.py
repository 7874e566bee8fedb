"""
Sequences — преобразования одномерных последовательностей int

Модуль содержит операции, которые строят НОВУЮ последовательность из входной:
- Копирование диапазона [start, end)
- Замена элементов по чётности индекса
- Поиск второго максимума
- Перестановка: отрицательные, затем неотрицательные (в обратном порядке)
- Фильтрация по порогу, вычисленному из длины
- Вставка значений по индексу
- Удаление дубликатов

ИНВАРИАНТЫ:
1. Входная последовательность никогда не изменяется
2. Результат всегда новый list
3. Ошибки границ → InvalidArgumentError в точке обнаружения
"""

import logging
from collections.abc import Sequence
from typing import Final

from src.core.arrays.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Множитель для элементов с чётным индексом в replace
REPLACE_EVEN_FACTOR: Final[int] = 2

# Смещение порога filter_values: threshold = len(input) - FILTER_LENGTH_OFFSET
FILTER_LENGTH_OFFSET: Final[int] = 10


# =============================================================================
# КОПИРОВАНИЕ И ВСТАВКА
# =============================================================================


def copy_values(
    input: Sequence[int],
    start_inclusive: int,
    end_exclusive: int,
) -> list[int]:
    """
    Копирование элементов из диапазона [start_inclusive, end_exclusive).

    Граница end_exclusive должна быть строго меньше len(input), то есть
    скопировать "до самого конца" нельзя.

    Args:
        input: Исходная последовательность
        start_inclusive: Индекс первого копируемого элемента
        end_exclusive: Индекс, до которого (не включая) идёт копирование

    Returns:
        Новый список из end_exclusive - start_inclusive элементов

    Raises:
        InvalidArgumentError: если start < 0, end >= len(input) или start >= end

    Examples:
        >>> copy_values([214, 331, 1243, 214, 991232, 120], 1, 4)
        [331, 1243, 214]
    """
    if (
        start_inclusive < 0
        or end_exclusive >= len(input)
        or start_inclusive >= end_exclusive
    ):
        logger.debug(
            "copy_values rejected: start=%d end=%d length=%d",
            start_inclusive,
            end_exclusive,
            len(input),
        )
        raise InvalidArgumentError(
            f"Invalid copy range [{start_inclusive}, {end_exclusive}) "
            f"for input of length {len(input)}"
        )

    return list(input[start_inclusive:end_exclusive])


def insert_values(
    input: Sequence[int],
    start_inclusive: int,
    values: Sequence[int],
) -> list[int]:
    """
    Вставка values в input, начиная с индекса start_inclusive.

    Args:
        input: Исходная последовательность
        start_inclusive: Индекс input, на место которого встаёт первый элемент values
        values: Вставляемые значения

    Returns:
        Новый список длины len(input) + len(values)

    Raises:
        InvalidArgumentError: если start_inclusive < 0 или >= len(input)

    Examples:
        >>> insert_values([3, 5, 6, 12], 2, [7, 45])
        [3, 5, 7, 45, 6, 12]
    """
    if start_inclusive < 0 or start_inclusive >= len(input):
        logger.debug(
            "insert_values rejected: start=%d length=%d",
            start_inclusive,
            len(input),
        )
        raise InvalidArgumentError(
            f"start_inclusive must be in [0, {len(input)}), got {start_inclusive}"
        )

    return [*input[:start_inclusive], *values, *input[start_inclusive:]]


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def replace(input: Sequence[int]) -> list[int]:
    """
    Чётные индексы удваиваются, нечётные меняют знак.

    Examples:
        >>> replace([0, 31, 24, 7])
        [0, -31, 48, -7]
    """
    return [
        REPLACE_EVEN_FACTOR * value if index % 2 == 0 else -value
        for index, value in enumerate(input)
    ]


def rearrange(input: Sequence[int]) -> list[int]:
    """
    Сначала отрицательные числа, затем неотрицательные, обе группы в обратном порядке.

    Examples:
        >>> rearrange([3, -5, 4, -7, 2, 9])
        [-7, -5, 9, 2, 4, 3]
    """
    negatives = [value for value in reversed(input) if value < 0]
    non_negatives = [value for value in reversed(input) if value >= 0]
    return negatives + non_negatives


def filter_values(input: Sequence[int]) -> list[int]:
    """
    Удаление всех элементов, меньших чем len(input) - FILTER_LENGTH_OFFSET.

    Порог вычисляется из ДЛИНЫ входа, а не из максимального элемента.
    Результат не содержит "пустых" ячеек, порядок сохраняется.

    Examples:
        >>> filter_values([3, -5, 4, -7, 2, 9])  # threshold = 6 - 10 = -4
        [3, 4, 2, 9]
    """
    threshold = len(input) - FILTER_LENGTH_OFFSET
    return [value for value in input if value >= threshold]


# =============================================================================
# АГРЕГАТЫ
# =============================================================================


def find_second_max(input: Sequence[int]) -> int:
    """
    Второе по величине РАЗЛИЧНОЕ значение.

    Дубликаты максимума не считаются: для [63, 62, 63] результат 62.

    Args:
        input: Последовательность int

    Returns:
        Второй максимум среди уникальных значений

    Raises:
        InvalidArgumentError: если уникальных значений меньше двух

    Examples:
        >>> find_second_max([6, 23, 61, 44, 63, 62, 63])
        62
    """
    unique_sorted = sorted(set(input))

    if len(unique_sorted) < 2:
        logger.debug(
            "find_second_max rejected: %d distinct value(s)", len(unique_sorted)
        )
        raise InvalidArgumentError(
            f"At least 2 distinct values required, got {len(unique_sorted)}"
        )

    return unique_sorted[-2]


def distinct(input: Sequence[int]) -> list[int]:
    """
    Только уникальные значения.

    Сохраняется порядок первого вхождения, но вызывающий код не должен
    на него полагаться.

    Examples:
        >>> sorted(distinct([12, 53, 22, 76, 12, 54, 53, 76, 12]))
        [12, 22, 53, 54, 76]
    """
    return list(dict.fromkeys(input))
