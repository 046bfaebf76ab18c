"""
Statistics — описательная статистика и нормальное распределение

Переиспользует семантику VectorOps для mean / variance / standard_deviation,
включая выборочную дисперсию по умолчанию.

Асимметрия correlation (намеренная):
    correlation = covariance / (std_a · std_b)
    covariance — ВЫБОРОЧНАЯ (делитель n − 1),
    std_a, std_b — ГЕНЕРАЛЬНЫЕ (делитель n).
Для идеально коррелированных данных результат равен n / (n − 1), а не 1.0.
Публичный default (population=False) здесь НЕ применяется.
"""

import math
from typing import Final, Sequence

from mathengine.core.math import vector
from mathengine.core.math.numerical_safeguards import (
    DomainError,
    require_non_empty,
    require_same_length,
    validate_positive_stddev,
)

SQRT_2: Final[float] = math.sqrt(2.0)
SQRT_2PI: Final[float] = math.sqrt(2.0 * math.pi)


# =============================================================================
# ОПИСАТЕЛЬНАЯ СТАТИСТИКА
# =============================================================================


def mean(data: Sequence[float]) -> float:
    """Среднее; пустой вход → 0.0 (как vector.mean)."""
    return vector.mean(data)


def median(data: Sequence[float]) -> float:
    """
    Медиана: средний элемент для нечётного n, среднее двух средних для чётного.

    Raises:
        ShapeError: Если data пустой

    Examples:
        >>> median([3.0, 1.0, 2.0])
        2.0
        >>> median([4.0, 1.0, 3.0, 2.0])
        2.5
    """
    require_non_empty(data, "median")

    ordered = sorted(data)
    n = len(ordered)
    middle = n // 2

    if n % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return float(ordered[middle])


def variance(data: Sequence[float], population: bool = False) -> float:
    return vector.variance(data, population)


def standard_deviation(data: Sequence[float], population: bool = False) -> float:
    return vector.standard_deviation(data, population)


def covariance(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Выборочная ковариация Σ(a_i − ā)(b_i − b̄) / (n − 1).

    Returns:
        Ковариация; пустые входы → 0.0

    Raises:
        ShapeError: Если длины различаются
        DomainError: Если n == 1 (делитель n − 1 == 0)

    Examples:
        >>> covariance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
        2.0
    """
    n = require_same_length(a, b, "covariance")
    if n == 0:
        return 0.0

    if n == 1:
        raise DomainError("Sample covariance is undefined for a single pair (n - 1 == 0)")

    mean_a = vector.mean(a)
    mean_b = vector.mean(b)

    acc = 0.0
    for x, y in zip(a, b):
        acc += (x - mean_a) * (y - mean_b)

    return acc / (n - 1)


def correlation(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Корреляция covariance(a, b) / (std_a · std_b).

    std вычисляется как ГЕНЕРАЛЬНОЕ (population=True), ковариация — выборочная.
    Если хотя бы одно std равно 0, возвращается 0.0; в том числе для
    пустых входов и n == 1, где выборочная ковариация не определена.

    Raises:
        ShapeError: Если длины различаются

    Examples:
        >>> round(correlation([1.0, 2.0, 3.0], [2.0, 4.0, 6.0]), 12)  # n / (n - 1)
        1.5
    """
    require_same_length(a, b, "correlation")

    std_a = vector.standard_deviation(a, population=True)
    std_b = vector.standard_deviation(b, population=True)

    if std_a == 0 or std_b == 0:
        return 0.0

    cov = covariance(a, b)
    return cov / (std_a * std_b)


# =============================================================================
# НОРМАЛЬНОЕ РАСПРЕДЕЛЕНИЕ
# =============================================================================


def normal_pdf(x: float, mean: float = 0.0, stddev: float = 1.0) -> float:
    """
    Плотность N(mean, stddev²):

        φ(x) = exp(−½·((x − μ)/σ)²) / (σ·√(2π))

    Raises:
        DomainError: Если stddev <= 0

    Examples:
        >>> round(normal_pdf(0.0), 12)
        0.398942280401
    """
    validate_positive_stddev(stddev)

    z = (x - mean) / stddev
    return math.exp(-0.5 * z * z) / (stddev * SQRT_2PI)


def normal_cdf(x: float, mean: float = 0.0, stddev: float = 1.0) -> float:
    """
    Функция распределения через erf:

        Φ(x) = ½·(1 + erf((x − μ)/(σ·√2)))

    Raises:
        DomainError: Если stddev <= 0

    Examples:
        >>> normal_cdf(0.0)
        0.5
    """
    validate_positive_stddev(stddev)

    return 0.5 * (1.0 + math.erf((x - mean) / (stddev * SQRT_2)))
