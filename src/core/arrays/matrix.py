"""
Matrix — валидация и умножение целочисленных матриц

Матрица задаётся как последовательность строк [row][column].

Порядок проверок validate_for_matrix_multiplication:
1. Левая и правая матрицы не None → иначе NullInputError
2. Ни одна строка левой, затем правой матрицы не None → иначе NullInputError
3. Ни одна из матриц не пустая → иначе InvalidArgumentError
4. Обе матрицы прямоугольные → иначе InvalidArgumentError
5. columns(left) == rows(right) → иначе InvalidArgumentError

matrix_multiplication всегда вызывает валидацию до вычислений.
"""

import logging
from collections.abc import Sequence
from typing import TypeAlias

from src.core.arrays.errors import InvalidArgumentError, NullInputError
from src.core.domain.matrix_shape import MatrixShape

logger = logging.getLogger(__name__)

# Строка матрицы может отсутствовать (None): это отдельное невалидное состояние
Matrix: TypeAlias = Sequence[Sequence[int] | None]


# =============================================================================
# ПРОВЕРКИ ОДНОЙ МАТРИЦЫ
# =============================================================================


def _require_rows(matrix: Matrix | None, name: str) -> None:
    """NullInputError если матрица или любая её строка равны None."""
    if matrix is None:
        logger.debug("%s rejected: matrix is None", name)
        raise NullInputError(f"{name} must not be None")

    for index, row in enumerate(matrix):
        if row is None:
            logger.debug("%s rejected: row %d is None", name, index)
            raise NullInputError(f"{name} row {index} must not be None")


def _rectangular_shape(matrix: Matrix, name: str) -> MatrixShape:
    """MatrixShape для матрицы без None-строк; InvalidArgumentError для рваной матрицы."""
    if len(matrix) == 0:
        return MatrixShape(rows=0, columns=0)

    columns = len(matrix[0])

    for index, row in enumerate(matrix):
        if len(row) != columns:
            logger.debug(
                "%s rejected: row %d has %d columns, expected %d",
                name,
                index,
                len(row),
                columns,
            )
            raise InvalidArgumentError(
                f"{name} is not rectangular: row {index} has {len(row)} columns, "
                f"expected {columns}"
            )

    return MatrixShape(rows=len(matrix), columns=columns)


def matrix_shape(matrix: Matrix | None, name: str = "matrix") -> MatrixShape:
    """
    Размерность матрицы с проверкой на None и прямоугольность.

    Args:
        matrix: Матрица [row][column]
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        MatrixShape (для пустой матрицы rows=0, columns=0)

    Raises:
        NullInputError: если матрица или любая строка равны None
        InvalidArgumentError: если строки имеют разную длину

    Examples:
        >>> matrix_shape([[1, 2, 3], [4, 5, 6]])
        MatrixShape(rows=2, columns=3)
    """
    _require_rows(matrix, name)
    return _rectangular_shape(matrix, name)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def validate_for_matrix_multiplication(
    left_matrix: Matrix | None,
    right_matrix: Matrix | None,
) -> MatrixShape:
    """
    Валидация входа для умножения left_matrix x right_matrix.

    Все проверки на None выполняются до проверок размерности, поэтому
    None-строка в правой матрице даёт NullInputError даже если левая
    матрица рваная.

    Args:
        left_matrix: Левая матрица [row][column]
        right_matrix: Правая матрица [row][column]

    Returns:
        MatrixShape результата умножения

    Raises:
        NullInputError: если любая матрица или строка равны None
        InvalidArgumentError: если матрица пустая, рваная, или
            columns(left) != rows(right)
    """
    if left_matrix is None or right_matrix is None:
        logger.debug("matrix multiplication rejected: matrix is None")
        raise NullInputError("left_matrix and right_matrix must not be None")

    _require_rows(left_matrix, "left_matrix")
    _require_rows(right_matrix, "right_matrix")

    if len(left_matrix) == 0 or len(right_matrix) == 0:
        logger.debug(
            "matrix multiplication rejected: empty matrix (left rows=%d, right rows=%d)",
            len(left_matrix),
            len(right_matrix),
        )
        raise InvalidArgumentError(
            f"Matrices must have at least one row, got left rows={len(left_matrix)}, "
            f"right rows={len(right_matrix)}"
        )

    left_shape = _rectangular_shape(left_matrix, "left_matrix")
    right_shape = _rectangular_shape(right_matrix, "right_matrix")

    if not left_shape.can_multiply(right_shape):
        logger.debug(
            "matrix multiplication rejected: %dx%d by %dx%d",
            left_shape.rows,
            left_shape.columns,
            right_shape.rows,
            right_shape.columns,
        )
        raise InvalidArgumentError(
            f"left_matrix columns ({left_shape.columns}) must equal "
            f"right_matrix rows ({right_shape.rows})"
        )

    return left_shape.product_shape(right_shape)


def matrix_multiplication(
    left_matrix: Matrix | None,
    right_matrix: Matrix | None,
) -> list[list[int]]:
    """
    Произведение матриц: result[r][c] = Σ_k left[r][k] * right[k][c].

    Args:
        left_matrix: Левая матрица [row][column]
        right_matrix: Правая матрица [row][column]

    Returns:
        Новая матрица размерности rows(left) x columns(right)

    Raises:
        NullInputError, InvalidArgumentError: см. validate_for_matrix_multiplication

    Examples:
        >>> matrix_multiplication([[1, 2, 3], [4, 5, 6]], [[7, 8], [9, 10], [11, 12]])
        [[58, 64], [139, 154]]
    """
    shape = validate_for_matrix_multiplication(left_matrix, right_matrix)
    inner = len(right_matrix)

    return [
        [
            sum(left_matrix[r][k] * right_matrix[k][c] for k in range(inner))
            for c in range(shape.columns)
        ]
        for r in range(shape.rows)
    ]
