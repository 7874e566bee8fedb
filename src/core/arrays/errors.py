"""
Array Errors — исключения модуля arrays

Два вида отказов:
- InvalidArgumentError: индексы вне границ, неотсортированный вход,
  несовместимые размерности матриц
- NullInputError: отсутствует обязательная матрица или строка матрицы

Все исключения поднимаются синхронно в точке обнаружения и не
перехватываются внутри библиотеки.
"""


class ArrayOpsError(Exception):
    """Базовое исключение для всех операций над массивами."""


class InvalidArgumentError(ArrayOpsError, ValueError):
    """
    Невалидный аргумент операции.

    Наследуется от ValueError, поэтому вызывающий код, который ловит
    ValueError, продолжает работать без изменений.
    """


class NullInputError(ArrayOpsError, TypeError):
    """
    Отсутствует обязательный вход (матрица или строка матрицы равна None).

    Используется только при валидации умножения матриц.
    """
