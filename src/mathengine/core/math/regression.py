"""
Linear Regression — МНК для одного предиктора

y = slope · x + intercept, решение нормальных уравнений в закрытой форме:

    slope     = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
    intercept = (Σy − slope·Σx) / n

X — последовательность строк признаков, каждая ровно из одного элемента.
"""

from typing import NamedTuple, Sequence

from mathengine.core.config import DEFAULT_LIMITS
from mathengine.core.math.numerical_safeguards import (
    DomainError,
    ShapeError,
    UnsupportedSizeError,
)


class RegressionResult(NamedTuple):
    slope: float
    intercept: float


class FeatureCountError(ShapeError, UnsupportedSizeError):
    """
    Строка X содержит больше одного признака.

    Это одновременно несоответствие формы (строка не из одного элемента)
    и неподдерживаемая конфигурация (многофакторная регрессия).
    """

    kind = UnsupportedSizeError.kind


def linear_regression(
    X: Sequence[Sequence[float]],
    y: Sequence[float],
) -> RegressionResult:
    """
    Простая линейная регрессия методом наименьших квадратов.

    Args:
        X: Строки признаков [[x_0], [x_1], ...]
        y: Целевые значения той же длины

    Returns:
        RegressionResult(slope, intercept)

    Raises:
        ShapeError: Если len(X) != len(y), данные пустые или строка без признака
        FeatureCountError: Если строка содержит больше одного признака
        DomainError: Если n·Σx² − (Σx)² == 0 (все x одинаковы, collinear)

    Examples:
        >>> linear_regression([[1.0], [2.0], [3.0]], [2.0, 4.0, 6.0])
        RegressionResult(slope=2.0, intercept=0.0)
    """
    if len(X) != len(y):
        raise ShapeError(
            f"X and y must have same number of samples, got {len(X)} and {len(y)}"
        )

    if len(X) == 0:
        raise ShapeError("Cannot perform regression on empty data")

    n_features = DEFAULT_LIMITS.max_regression_features
    sum_x = sum_y = sum_xy = sum_xx = 0.0

    for index, (row, target) in enumerate(zip(X, y)):
        if len(row) > n_features:
            raise FeatureCountError(
                f"Only single feature regression implemented, "
                f"row {index} has {len(row)} features"
            )
        if len(row) < n_features:
            raise ShapeError(f"Row {index} of X has no feature")

        x_val = row[0]
        sum_x += x_val
        sum_y += target
        sum_xy += x_val * target
        sum_xx += x_val * x_val

    n = len(X)
    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise DomainError(
            "Cannot compute regression for collinear data: all x values are identical"
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    return RegressionResult(slope, intercept)
