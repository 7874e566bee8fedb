"""
Тесты для ArrayProcessor / LoopArrayProcessor

Проверяет, что реализация покрывает весь каталог операций и
делегирует в функции модуля arrays без изменения поведения.
"""

import pytest

from src.core.arrays import (
    ArrayProcessor,
    InvalidArgumentError,
    LoopArrayProcessor,
    NullInputError,
)
from src.core.domain.matrix_shape import MatrixShape


@pytest.fixture
def processor() -> ArrayProcessor:
    """Stateless processor instance."""
    return LoopArrayProcessor()


class TestArrayProcessorInterface:
    """Тесты интерфейса"""

    def test_abstract_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            ArrayProcessor()

    def test_loop_processor_is_array_processor(self, processor: ArrayProcessor) -> None:
        assert isinstance(processor, ArrayProcessor)


class TestLoopArrayProcessor:
    """Сквозные проверки каталога через LoopArrayProcessor"""

    def test_matching(self, processor: ArrayProcessor) -> None:
        assert processor.none_match([1, 31, 49]) is True
        assert processor.none_match([3, -930]) is False
        assert processor.some_match([352, 3591], lambda k: k % 2 == 1) is True
        assert processor.all_match(["214", "120"], int, lambda n: n % 2 == 0) is True

    def test_copy_and_insert(self, processor: ArrayProcessor) -> None:
        data = [214, 331, 1243, 214, 991232, 120]
        assert processor.copy_values(data, 1, 4) == [331, 1243, 214]
        assert processor.insert_values([3, 5, 6], 1, [7]) == [3, 7, 5, 6]
        with pytest.raises(InvalidArgumentError):
            processor.copy_values(data, 4, 1)
        with pytest.raises(InvalidArgumentError):
            processor.insert_values(data, -3, [1])

    def test_transforms(self, processor: ArrayProcessor) -> None:
        assert processor.replace([0, 31, 24]) == [0, -31, 48]
        assert processor.rearrange([3, -5, 4, -7, 2, 9]) == [-7, -5, 9, 2, 4, 3]
        assert processor.filter_values([3, -5, 4, -7, 2, 9]) == [3, 4, 2, 9]

    def test_aggregates(self, processor: ArrayProcessor) -> None:
        assert processor.find_second_max([6, 23, 61, 44, 63, 62, 63]) == 62
        assert set(processor.distinct([12, 53, 12, 76])) == {12, 53, 76}

    def test_merge(self, processor: ArrayProcessor) -> None:
        assert processor.merge_sorted_arrays([-4, 3], [1, 12]) == [-4, 1, 3, 12]
        with pytest.raises(InvalidArgumentError):
            processor.merge_sorted_arrays([3, 1], [2])

    def test_matrix(self, processor: ArrayProcessor) -> None:
        left = [[1, 2, 3], [4, 5, 6]]
        right = [[7, 8], [9, 10], [11, 12]]
        assert processor.validate_for_matrix_multiplication(left, right) == MatrixShape(
            rows=2, columns=2
        )
        assert processor.matrix_multiplication(left, right) == [[58, 64], [139, 154]]
        with pytest.raises(NullInputError):
            processor.matrix_multiplication(None, right)
