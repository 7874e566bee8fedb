"""
ArrayProcessor — единый интерфейс каталога операций над массивами

ArrayProcessor объявляет весь каталог операций одним абстрактным классом,
чтобы вызывающий код (и тесты) мог подменять реализацию.
LoopArrayProcessor: stateless реализация поверх функций модулей
predicates, sequences, merging и matrix.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.core.arrays import matrix, merging, predicates, sequences
from src.core.arrays.matrix import Matrix
from src.core.arrays.predicates import IntPredicate, ToIntFunction
from src.core.domain.matrix_shape import MatrixShape


# =============================================================================
# ИНТЕРФЕЙС
# =============================================================================


class ArrayProcessor(ABC):
    """Каталог операций над последовательностями int и матрицами."""

    @abstractmethod
    def none_match(self, input: Sequence[int]) -> bool: ...

    @abstractmethod
    def some_match(self, input: Sequence[int], predicate: IntPredicate) -> bool: ...

    @abstractmethod
    def all_match(
        self,
        input: Sequence[str],
        function: ToIntFunction,
        predicate: IntPredicate,
    ) -> bool: ...

    @abstractmethod
    def copy_values(
        self, input: Sequence[int], start_inclusive: int, end_exclusive: int
    ) -> list[int]: ...

    @abstractmethod
    def replace(self, input: Sequence[int]) -> list[int]: ...

    @abstractmethod
    def find_second_max(self, input: Sequence[int]) -> int: ...

    @abstractmethod
    def rearrange(self, input: Sequence[int]) -> list[int]: ...

    @abstractmethod
    def filter_values(self, input: Sequence[int]) -> list[int]: ...

    @abstractmethod
    def insert_values(
        self, input: Sequence[int], start_inclusive: int, values: Sequence[int]
    ) -> list[int]: ...

    @abstractmethod
    def merge_sorted_arrays(
        self, input: Sequence[int], input2: Sequence[int]
    ) -> list[int]: ...

    @abstractmethod
    def validate_for_matrix_multiplication(
        self, left_matrix: Matrix | None, right_matrix: Matrix | None
    ) -> MatrixShape: ...

    @abstractmethod
    def matrix_multiplication(
        self, left_matrix: Matrix | None, right_matrix: Matrix | None
    ) -> list[list[int]]: ...

    @abstractmethod
    def distinct(self, input: Sequence[int]) -> list[int]: ...


# =============================================================================
# РЕАЛИЗАЦИЯ
# =============================================================================


class LoopArrayProcessor(ArrayProcessor):
    """
    Реализация ArrayProcessor на функциях модуля arrays.

    Не хранит состояния: один экземпляр можно использовать из любого числа
    вызывающих сторон.
    """

    def none_match(self, input: Sequence[int]) -> bool:
        return predicates.none_match(input)

    def some_match(self, input: Sequence[int], predicate: IntPredicate) -> bool:
        return predicates.some_match(input, predicate)

    def all_match(
        self,
        input: Sequence[str],
        function: ToIntFunction,
        predicate: IntPredicate,
    ) -> bool:
        return predicates.all_match(input, function, predicate)

    def copy_values(
        self, input: Sequence[int], start_inclusive: int, end_exclusive: int
    ) -> list[int]:
        return sequences.copy_values(input, start_inclusive, end_exclusive)

    def replace(self, input: Sequence[int]) -> list[int]:
        return sequences.replace(input)

    def find_second_max(self, input: Sequence[int]) -> int:
        return sequences.find_second_max(input)

    def rearrange(self, input: Sequence[int]) -> list[int]:
        return sequences.rearrange(input)

    def filter_values(self, input: Sequence[int]) -> list[int]:
        return sequences.filter_values(input)

    def insert_values(
        self, input: Sequence[int], start_inclusive: int, values: Sequence[int]
    ) -> list[int]:
        return sequences.insert_values(input, start_inclusive, values)

    def merge_sorted_arrays(
        self, input: Sequence[int], input2: Sequence[int]
    ) -> list[int]:
        return merging.merge_sorted_arrays(input, input2)

    def validate_for_matrix_multiplication(
        self, left_matrix: Matrix | None, right_matrix: Matrix | None
    ) -> MatrixShape:
        return matrix.validate_for_matrix_multiplication(left_matrix, right_matrix)

    def matrix_multiplication(
        self, left_matrix: Matrix | None, right_matrix: Matrix | None
    ) -> list[list[int]]:
        return matrix.matrix_multiplication(left_matrix, right_matrix)

    def distinct(self, input: Sequence[int]) -> list[int]:
        return sequences.distinct(input)
