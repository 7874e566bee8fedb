"""
Domain models and value objects.

Contains value objects used by the array operations, like MatrixShape.
"""

from src.core.domain.matrix_shape import MatrixShape

__all__ = [
    "MatrixShape",
]
