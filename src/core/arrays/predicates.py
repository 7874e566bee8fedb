"""
Predicates — проверки принадлежности для последовательностей

Модуль содержит операции, которые отвечают на вопрос "есть ли / все ли
элементы удовлетворяют условию":
- none_match: ни один элемент не делится на 10
- some_match: хотя бы один элемент удовлетворяет предикату
- all_match: все строки после преобразования в int удовлетворяют предикату

Предикаты и преобразования передаются как обычные callable.
"""

from collections.abc import Callable, Sequence
from typing import Final, TypeAlias

# =============================================================================
# ТИПЫ
# =============================================================================

# Предикат над int (аналог test(int) -> bool)
IntPredicate: TypeAlias = Callable[[int], bool]

# Преобразование строки в int (аналог applyAsInt(str) -> int)
ToIntFunction: TypeAlias = Callable[[str], int]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Делитель для none_match: элемент "совпадает", если делится на него без остатка
NONE_MATCH_DIVISOR: Final[int] = 10


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def none_match(input: Sequence[int]) -> bool:
    """
    Проверка, что ни одно число не делится на 10.

    Args:
        input: Последовательность int (не изменяется)

    Returns:
        True если нет ни одного элемента, кратного NONE_MATCH_DIVISOR

    Examples:
        >>> none_match([1, 31, 49, -33])
        True
        >>> none_match([3, -930, 50])
        False
        >>> none_match([])
        True
    """
    for value in input:
        if value % NONE_MATCH_DIVISOR == 0:
            return False

    return True


def some_match(input: Sequence[int], predicate: IntPredicate) -> bool:
    """
    Проверка, что хотя бы один элемент удовлетворяет предикату.

    Args:
        input: Последовательность int (не изменяется)
        predicate: Вызывается predicate(value) для каждого элемента

    Returns:
        True при первом совпадении, False если совпадений нет (или input пуст)

    Examples:
        >>> some_match([352, 3591, 33], lambda k: k % 2 == 1)
        True
        >>> some_match([5512, 418], lambda k: k % 2 == 1)
        False
    """
    return any(predicate(value) for value in input)


def all_match(
    input: Sequence[str],
    function: ToIntFunction,
    predicate: IntPredicate,
) -> bool:
    """
    Проверка, что все строки после преобразования удовлетворяют предикату.

    Каждая строка сначала преобразуется через function(value), затем
    результат проверяется predicate(number). Обход прекращается на первом
    несовпадении, оставшиеся строки не преобразуются.

    Args:
        input: Последовательность строк, без None
        function: Преобразование строки в int
        predicate: Проверка полученного int

    Returns:
        True если все значения прошли проверку (для пустого input тоже True)

    Examples:
        >>> all_match(["214", "991232", "120"], int, lambda n: n % 2 == 0)
        True
        >>> all_match(["214", "331"], int, lambda n: n % 2 == 0)
        False
    """
    for value in input:
        if not predicate(function(value)):
            return False

    return True
