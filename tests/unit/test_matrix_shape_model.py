"""
Тесты для Pydantic модели MatrixShape

Проверяет:
1. Валидацию полей (неотрицательные rows/columns)
2. Immutability (frozen=True)
3. Совместимость для умножения и размерность произведения
"""

import pytest
from pydantic import ValidationError

from src.core.domain import MatrixShape


class TestMatrixShapeModel:
    """Тесты для модели MatrixShape"""

    def test_creation(self) -> None:
        shape = MatrixShape(rows=2, columns=3)
        assert shape.rows == 2
        assert shape.columns == 3
        assert not shape.is_empty()

    def test_empty(self) -> None:
        assert MatrixShape(rows=0, columns=0).is_empty()

    @pytest.mark.parametrize(("rows", "columns"), [(-1, 0), (0, -1)])
    def test_negative_dimensions_rejected(self, rows: int, columns: int) -> None:
        with pytest.raises(ValidationError):
            MatrixShape(rows=rows, columns=columns)

    def test_frozen(self) -> None:
        shape = MatrixShape(rows=1, columns=1)
        with pytest.raises(ValidationError):
            shape.rows = 5

    def test_can_multiply(self) -> None:
        left = MatrixShape(rows=2, columns=3)
        right = MatrixShape(rows=3, columns=4)
        assert left.can_multiply(right)
        assert not right.can_multiply(left)

    def test_product_shape(self) -> None:
        left = MatrixShape(rows=2, columns=3)
        right = MatrixShape(rows=3, columns=4)
        assert left.product_shape(right) == MatrixShape(rows=2, columns=4)

    def test_product_shape_incompatible(self) -> None:
        with pytest.raises(ValueError, match="Cannot multiply"):
            MatrixShape(rows=2, columns=3).product_shape(MatrixShape(rows=2, columns=3))

    def test_json_roundtrip(self) -> None:
        shape = MatrixShape(rows=4, columns=7)
        assert MatrixShape.model_validate_json(shape.model_dump_json()) == shape
