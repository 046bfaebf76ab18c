"""
Random Sampling — псевдослучайные выборки

Каждый вызов по умолчанию создаёт собственный генератор random.Random(),
засеянный интерпретатором из системного источника энтропии. Генератор не
разделяется между вызовами и потоками, поэтому синхронизация не нужна.
Воспроизводимость между вызовами НЕ гарантируется.

Для воспроизводимой выборки вызывающий код может передать явный
генератор через rng.
"""

import logging
import random

from mathengine.core.math.numerical_safeguards import (
    DomainError,
    truncate_to_int,
    validate_positive_stddev,
)

logger = logging.getLogger(__name__)


def _validate_count(count: float) -> int:
    n = truncate_to_int(count, "count")

    if n <= 0:
        raise DomainError(f"Count must be positive, got {count}")

    return n


def random_uniform(
    count: float,
    minimum: float = 0.0,
    maximum: float = 1.0,
    rng: random.Random | None = None,
) -> list[float]:
    """
    count независимых значений из U(minimum, maximum).

    Args:
        count: Размер выборки (усекается к int)
        minimum: Нижняя граница
        maximum: Верхняя граница
        rng: Явный генератор (по умолчанию — новый на каждый вызов)

    Returns:
        Список из count значений

    Raises:
        DomainError: Если count <= 0 или minimum >= maximum
    """
    n = _validate_count(count)

    if minimum >= maximum:
        raise DomainError(f"Min must be less than max, got min={minimum}, max={maximum}")

    generator = rng if rng is not None else random.Random()
    logger.debug("Drawing %d uniform samples on [%s, %s)", n, minimum, maximum)

    return [generator.uniform(minimum, maximum) for _ in range(n)]


def random_normal(
    count: float,
    mean: float = 0.0,
    stddev: float = 1.0,
    rng: random.Random | None = None,
) -> list[float]:
    """
    count независимых значений из N(mean, stddev²).

    Raises:
        DomainError: Если count <= 0 или stddev <= 0
    """
    n = _validate_count(count)
    validate_positive_stddev(stddev)

    generator = rng if rng is not None else random.Random()
    logger.debug("Drawing %d normal samples with mean=%s stddev=%s", n, mean, stddev)

    return [generator.gauss(mean, stddev) for _ in range(n)]
