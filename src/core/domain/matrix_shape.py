"""
MatrixShape — Модель размерности прямоугольной матрицы

Immutable Pydantic модель: количество строк и столбцов уже провалидированной
(прямоугольной) матрицы. Используется при проверке совместимости матриц
для умножения.
"""

from pydantic import BaseModel, Field


class MatrixShape(BaseModel):
    """
    Размерность прямоугольной матрицы [rows x columns].

    Immutable модель (frozen=True). Матрица без строк имеет rows=0 и columns=0.
    """

    rows: int = Field(..., ge=0, description="Количество строк")
    columns: int = Field(..., ge=0, description="Количество столбцов (одинаково для всех строк)")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        """True если у матрицы нет ни одной строки."""
        return self.rows == 0

    def can_multiply(self, right: "MatrixShape") -> bool:
        """
        Проверка совместимости для умножения self x right.

        Returns:
            True если количество столбцов self равно количеству строк right
        """
        return self.columns == right.rows

    def product_shape(self, right: "MatrixShape") -> "MatrixShape":
        """
        Размерность произведения self x right.

        Raises:
            ValueError: если матрицы несовместимы для умножения
        """
        if not self.can_multiply(right):
            raise ValueError(
                f"Cannot multiply {self.rows}x{self.columns} by {right.rows}x{right.columns}"
            )
        return MatrixShape(rows=self.rows, columns=right.columns)
