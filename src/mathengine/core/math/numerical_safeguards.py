"""
Numerical Safeguards — Errors, Tolerances and Shared Validators

Модуль содержит общие примитивы для всех вычислительных групп движка:
- Типизированные ошибки (DomainError / ShapeError / UnsupportedSizeError)
- Epsilon-толерантности для сравнения float
- Проверки NaN/Inf
- Усечение размерностей, переданных как float, к int (toward zero)
- Валидация формы контейнеров (равные длины, прямоугольность, квадратность)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка возбуждается в точке обнаружения, до любого частичного результата
2. Прямоугольность матрицы проверяется до запуска любого алгоритма
3. Все проверки детерминированы и не имеют состояния
"""

import math
from enum import Enum
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close / is_zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ErrorKind(str, Enum):
    """Категория ошибки, видимая на границе вызова."""

    DOMAIN = "domain"
    SHAPE = "shape"
    NOT_IMPLEMENTED = "not_implemented"
    UNKNOWN_OPERATION = "unknown_operation"
    INVALID_ARGUMENT = "invalid_argument"


class MathEngineError(Exception):
    """Базовый класс всех ошибок движка."""

    kind: ErrorKind = ErrorKind.DOMAIN


class DomainError(MathEngineError, ValueError):
    """
    Значение вне математической области определения операции.

    Деление на ноль, отрицательный аргумент корня/логарифма, аргумент
    arcsin/arccos вне [-1, 1], неположительное stddev, вырожденная матрица,
    вырожденная регрессия.
    """

    kind = ErrorKind.DOMAIN


class ShapeError(MathEngineError, ValueError):
    """
    Несовместимые размеры контейнеров.

    Разные длины векторов, несовместимые размерности матриц,
    непрямоугольная матрица, пустой вход там, где нужен элемент.
    """

    kind = ErrorKind.SHAPE


class UnsupportedSizeError(MathEngineError, NotImplementedError):
    """
    Операция определена в общем случае, но движок поддерживает только
    ограниченный набор размеров (determinant > 3x3, inverse != 2x2,
    регрессия с несколькими признаками).
    """

    kind = ErrorKind.NOT_IMPLEMENTED


class UnknownOperationError(MathEngineError, LookupError):
    """Имя операции отсутствует в реестре."""

    kind = ErrorKind.UNKNOWN_OPERATION


class InvalidArgumentError(MathEngineError, TypeError):
    """Аргумент не соответствует контракту операции (тип, арность, имя)."""

    kind = ErrorKind.INVALID_ARGUMENT


# =============================================================================
# NaN/Inf ПРОВЕРКИ И EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


# =============================================================================
# УСЕЧЕНИЕ РАЗМЕРНОСТЕЙ
# =============================================================================


def truncate_to_int(value: float, name: str) -> int:
    """
    Усечение числа к целому в сторону нуля.

    Размерности и счётчики на границе принимаются как float
    (например, 3.9 → 3, -0.5 → 0).

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        int(value), усечённый в сторону нуля

    Raises:
        DomainError: Если value равно NaN или Inf

    Examples:
        >>> truncate_to_int(3.9, "size")
        3
        >>> truncate_to_int(-2.7, "n")
        -2
    """
    if not is_valid_float(float(value)):
        raise DomainError(f"{name} must be a finite number, got {value}")

    return int(value)


def validate_positive_dimension(value: float, name: str) -> int:
    """
    Усечение и проверка положительной размерности.

    Raises:
        DomainError: Если усечённое значение <= 0 или NaN/Inf
    """
    dimension = truncate_to_int(value, name)

    if dimension <= 0:
        raise DomainError(f"{name} must be positive, got {value}")

    return dimension


def validate_positive_stddev(stddev: float) -> None:
    """
    Raises:
        DomainError: Если stddev <= 0 (или NaN)
    """
    if not stddev > 0:
        raise DomainError(f"Standard deviation must be positive, got {stddev}")


# =============================================================================
# ВАЛИДАЦИЯ ФОРМЫ
# =============================================================================


def require_same_length(
    a: Sequence[float],
    b: Sequence[float],
    operation: str,
) -> int:
    """
    Проверка равенства длин двух последовательностей.

    Args:
        a: Первая последовательность
        b: Вторая последовательность
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        Общая длина

    Raises:
        ShapeError: Если длины различаются
    """
    if len(a) != len(b):
        raise ShapeError(
            f"Vectors must have same size for {operation}, got {len(a)} and {len(b)}"
        )

    return len(a)


def require_non_empty(values: Sequence[float], operation: str) -> None:
    """
    Raises:
        ShapeError: Если последовательность пустая
    """
    if len(values) == 0:
        raise ShapeError(f"Cannot compute {operation} of empty data")


def validate_matrix(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    """
    Проверка прямоугольности матрицы.

    Матрица — непустая последовательность строк одинаковой
    ненулевой длины.

    Args:
        matrix: Последовательность строк

    Returns:
        (rows, cols)

    Raises:
        ShapeError: Если матрица пустая, строки пустые или разной длины

    Examples:
        >>> validate_matrix([[1.0, 2.0], [3.0, 4.0]])
        (2, 2)
    """
    if len(matrix) == 0:
        raise ShapeError("Matrix is empty")

    cols = len(matrix[0])
    if cols == 0:
        raise ShapeError("Matrix rows are empty")

    for index, row in enumerate(matrix):
        if len(row) != cols:
            raise ShapeError(
                f"Matrix has inconsistent row sizes: row 0 has {cols} columns, "
                f"row {index} has {len(row)}"
            )

    return len(matrix), cols


def require_square(matrix: Sequence[Sequence[float]], operation: str) -> int:
    """
    Проверка прямоугольности, затем квадратности.

    Returns:
        Размер n квадратной матрицы n x n

    Raises:
        ShapeError: Если матрица не прямоугольная или не квадратная
    """
    rows, cols = validate_matrix(matrix)

    if rows != cols:
        raise ShapeError(
            f"Matrix must be square for {operation} calculation, got {rows}x{cols}"
        )

    return rows
