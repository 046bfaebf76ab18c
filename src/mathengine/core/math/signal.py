"""
Signal Processing — прямое DFT и линейная свёртка

fft() вычисляет ПРЯМОЕ дискретное преобразование Фурье за O(N²):

    X[k] = Σ_n x[n] · e^{−i·2πkn/N}

Имя fft отражает публичный API, а не алгоритм (быстрого алгоритма нет).
"""

import math
from typing import NamedTuple, Sequence

from mathengine.core.math.numerical_safeguards import ShapeError


class FourierTransform(NamedTuple):
    """Спектр как пара последовательностей (real, imag) одинаковой длины."""

    real: list[float]
    imag: list[float]


def fft(real: Sequence[float], imag: Sequence[float]) -> FourierTransform:
    """
    Прямое DFT комплексного сигнала, заданного частями real и imag.

    Args:
        real: Вещественная часть x[n]
        imag: Мнимая часть x[n]

    Returns:
        FourierTransform(real, imag) длины N

    Raises:
        ShapeError: Если длины real и imag различаются

    Examples:
        >>> fft([1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0]).real
        [1.0, 1.0, 1.0, 1.0]
    """
    n_samples = len(real)
    if n_samples != len(imag):
        raise ShapeError(
            f"Real and imaginary parts must have same size, "
            f"got {n_samples} and {len(imag)}"
        )

    result_real = [0.0] * n_samples
    result_imag = [0.0] * n_samples

    for k in range(n_samples):
        real_sum = 0.0
        imag_sum = 0.0

        for n in range(n_samples):
            angle = -2.0 * math.pi * k * n / n_samples
            cos_val = math.cos(angle)
            sin_val = math.sin(angle)

            # (xr + i·xi)(cos + i·sin)
            real_sum += real[n] * cos_val - imag[n] * sin_val
            imag_sum += real[n] * sin_val + imag[n] * cos_val

        result_real[k] = real_sum
        result_imag[k] = imag_sum

    return FourierTransform(result_real, result_imag)


def convolve(signal: Sequence[float], kernel: Sequence[float]) -> list[float]:
    """
    Полная линейная свёртка длины len(signal) + len(kernel) − 1.

    Пустой signal или kernel → пустой результат (не ошибка).

    Examples:
        >>> convolve([1.0, 1.0, 1.0], [1.0, 1.0])
        [1.0, 2.0, 2.0, 1.0]
        >>> convolve([], [1.0])
        []
    """
    if len(signal) == 0 or len(kernel) == 0:
        return []

    result = [0.0] * (len(signal) + len(kernel) - 1)
    for i, s in enumerate(signal):
        for j, w in enumerate(kernel):
            result[i + j] += s * w
    return result
