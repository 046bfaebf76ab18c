"""
Vector Operations — алгебра последовательностей float

Группа VectorOps: арифметика, нормы, редукции, моменты.

Политика пустых входов:
- total / mean / variance / standard_deviation / norm: пустой вектор → 0.0
- minimum / maximum: пустой вектор → ShapeError

Политика normalize: нулевая норма → вход возвращается без изменений
(копия), а не ошибка деления на ноль.

Variance по умолчанию — выборочная (делитель n − 1). Для n == 1 выборочная
дисперсия не определена → DomainError.
"""

import math
from typing import Final, Sequence

from mathengine.core.math.numerical_safeguards import (
    DomainError,
    ShapeError,
    require_non_empty,
    require_same_length,
)

# Размерность векторного произведения
CROSS_PRODUCT_DIM: Final[int] = 3


# =============================================================================
# КОНСТРУКЦИЯ И АРИФМЕТИКА
# =============================================================================


def create(elements: Sequence[float]) -> list[float]:
    return [float(value) for value in elements]


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Скалярное произведение Σ a_i·b_i.

    Raises:
        ShapeError: Если длины различаются

    Examples:
        >>> dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        32.0
    """
    require_same_length(a, b, "dot product")

    result = 0.0
    for x, y in zip(a, b):
        result += x * y
    return result


def cross_product(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """
    Векторное произведение в R³.

    Raises:
        ShapeError: Если хотя бы один вектор не длины 3

    Examples:
        >>> cross_product([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
        [0.0, 0.0, 1.0]
    """
    if len(a) != CROSS_PRODUCT_DIM or len(b) != CROSS_PRODUCT_DIM:
        raise ShapeError(
            f"Cross product requires 3D vectors, got lengths {len(a)} and {len(b)}"
        )

    return [
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]


def add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """
    Raises:
        ShapeError: Если длины различаются
    """
    require_same_length(a, b, "addition")
    return [x + y for x, y in zip(a, b)]


def subtract(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """
    Raises:
        ShapeError: Если длины различаются
    """
    require_same_length(a, b, "subtraction")
    return [x - y for x, y in zip(a, b)]


def scale(vector: Sequence[float], scalar: float) -> list[float]:
    return [value * scalar for value in vector]


# =============================================================================
# НОРМЫ
# =============================================================================


def norm(vector: Sequence[float], p: float = 2.0) -> float:
    """
    p-норма вектора.

    - p = 1: Σ|x|
    - p = 2: sqrt(Σx²) (по умолчанию)
    - p = +Inf: max|x|
    - иначе: (Σ|x|^p)^(1/p)

    Args:
        vector: Вектор
        p: Порядок нормы (> 0)

    Returns:
        Норма; пустой вектор → 0.0; переполнение Σ|x|^p → Inf

    Raises:
        DomainError: Если p <= 0 или p равно NaN

    Examples:
        >>> norm([3.0, 4.0])
        5.0
        >>> norm([3.0, -4.0], p=1.0)
        7.0
        >>> norm([3.0, -4.0], p=math.inf)
        4.0
    """
    if not p > 0:
        raise DomainError(f"Norm order p must be positive, got {p}")

    if len(vector) == 0:
        return 0.0

    if p == 2.0:
        return math.sqrt(sum(value * value for value in vector))

    if p == 1.0:
        return sum(abs(value) for value in vector)

    if p == math.inf:
        return max(abs(value) for value in vector)

    try:
        total_power = sum(math.pow(abs(value), p) for value in vector)
        return math.pow(total_power, 1.0 / p)
    except OverflowError:
        return math.inf


def normalize(vector: Sequence[float]) -> list[float]:
    """
    Деление на L2-норму.

    Если норма равна 0, возвращается копия входа без изменений.

    Examples:
        >>> normalize([3.0, 4.0])
        [0.6, 0.8]
        >>> normalize([0.0, 0.0])
        [0.0, 0.0]
    """
    length = norm(vector, 2.0)
    if length == 0.0:
        return list(vector)

    return [value / length for value in vector]


# =============================================================================
# РЕДУКЦИИ
# =============================================================================


def total(vector: Sequence[float]) -> float:
    """Сумма элементов; пустой вектор → 0.0."""
    return sum(vector, 0.0)


def mean(vector: Sequence[float]) -> float:
    """Среднее арифметическое; пустой вектор → 0.0."""
    if len(vector) == 0:
        return 0.0

    return total(vector) / len(vector)


def minimum(vector: Sequence[float]) -> float:
    """
    Raises:
        ShapeError: Если вектор пустой
    """
    require_non_empty(vector, "min")
    return min(vector)


def maximum(vector: Sequence[float]) -> float:
    """
    Raises:
        ShapeError: Если вектор пустой
    """
    require_non_empty(vector, "max")
    return max(vector)


# =============================================================================
# МОМЕНТЫ
# =============================================================================


def variance(vector: Sequence[float], population: bool = False) -> float:
    """
    Дисперсия вектора.

    population=False (по умолчанию): выборочная, Σ(x − x̄)² / (n − 1)
    population=True: генеральная, Σ(x − x̄)² / n

    Args:
        vector: Значения
        population: Делить на n вместо n − 1

    Returns:
        Дисперсия; пустой вектор → 0.0

    Raises:
        DomainError: Если population=False и n == 1 (делитель n − 1 == 0)

    Examples:
        >>> variance([2, 4, 4, 4, 5, 5, 7, 9], population=True)
        4.0
    """
    n = len(vector)
    if n == 0:
        return 0.0

    if not population and n == 1:
        raise DomainError(
            "Sample variance is undefined for a single value (n - 1 == 0); "
            "use population=True"
        )

    center = mean(vector)
    sum_sq = sum((value - center) * (value - center) for value in vector)

    divisor = n if population else n - 1
    return sum_sq / divisor


def standard_deviation(vector: Sequence[float], population: bool = False) -> float:
    """sqrt(variance(vector, population)) с той же политикой для n == 0 и n == 1."""
    return math.sqrt(variance(vector, population))
