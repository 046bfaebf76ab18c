"""
Engine Limits — таблица поддерживаемых размеров

Движок намеренно ограничивает ряд алгоритмов фиксированными размерами:
- determinant: закрытые формулы для 1x1, 2x2, 3x3
- inverse: закрытая формула только для 2x2
- factorial: вход <= 20 (результат помещается в 64-bit integer)
- linear regression: ровно один признак

Размеры вне таблицы → UnsupportedSizeError через явную проверку
возможностей (matrix.supports_size), а не через цепочку сравнений.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineLimits:
    """Конфигурация ограничений движка.

    Attributes:
        determinant_sizes: Размеры n, для которых есть закрытая формула det
        inverse_sizes: Размеры n, для которых есть закрытая формула inverse
        max_factorial_input: Максимальный вход factorial
        max_regression_features: Число признаков в строке X для регрессии
    """

    determinant_sizes: tuple[int, ...] = (1, 2, 3)
    inverse_sizes: tuple[int, ...] = (2,)
    max_factorial_input: int = 20
    max_regression_features: int = 1


DEFAULT_LIMITS = EngineLimits()
