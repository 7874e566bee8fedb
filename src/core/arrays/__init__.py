"""
Core arrays modules

Stateless операции над последовательностями int и целочисленными матрицами.
Каждая операция независима, не изменяет вход и возвращает новый результат.
"""

# Errors
from src.core.arrays.errors import (
    ArrayOpsError,
    InvalidArgumentError,
    NullInputError,
)

# Predicates
from src.core.arrays.predicates import (
    NONE_MATCH_DIVISOR,
    IntPredicate,
    ToIntFunction,
    all_match,
    none_match,
    some_match,
)

# Sequences
from src.core.arrays.sequences import (
    FILTER_LENGTH_OFFSET,
    REPLACE_EVEN_FACTOR,
    copy_values,
    distinct,
    filter_values,
    find_second_max,
    insert_values,
    rearrange,
    replace,
)

# Merging
from src.core.arrays.merging import (
    is_ascending,
    merge_sorted_arrays,
)

# Matrix
from src.core.arrays.matrix import (
    Matrix,
    matrix_multiplication,
    matrix_shape,
    validate_for_matrix_multiplication,
)

# Processor (импортируется последним: зависит от модулей выше)
from src.core.arrays.processor import (
    ArrayProcessor,
    LoopArrayProcessor,
)

__all__ = [
    # Errors
    "ArrayOpsError",
    "InvalidArgumentError",
    "NullInputError",
    # Predicates — Constants
    "NONE_MATCH_DIVISOR",
    # Predicates — Types
    "IntPredicate",
    "ToIntFunction",
    # Predicates — Functions
    "all_match",
    "none_match",
    "some_match",
    # Sequences — Constants
    "FILTER_LENGTH_OFFSET",
    "REPLACE_EVEN_FACTOR",
    # Sequences — Functions
    "copy_values",
    "distinct",
    "filter_values",
    "find_second_max",
    "insert_values",
    "rearrange",
    "replace",
    # Merging
    "is_ascending",
    "merge_sorted_arrays",
    # Matrix — Types
    "Matrix",
    # Matrix — Functions
    "matrix_multiplication",
    "matrix_shape",
    "validate_for_matrix_multiplication",
    # Processor
    "ArrayProcessor",
    "LoopArrayProcessor",
]
