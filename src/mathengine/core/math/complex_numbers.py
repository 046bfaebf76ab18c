"""
Complex Operations — арифметика пар (real, imaginary)

Complex — неизменяемая пара float. Каждая операция возвращает новую пару;
изменение на месте невозможно (NamedTuple).
"""

import math
from typing import NamedTuple

from mathengine.core.math.numerical_safeguards import DomainError


class Complex(NamedTuple):
    """Комплексное число как упорядоченная пара (real, imag)."""

    real: float
    imag: float


def create(real: float, imaginary: float) -> Complex:
    return Complex(float(real), float(imaginary))


def add(a: Complex, b: Complex) -> Complex:
    """Покомпонентная сумма."""
    return Complex(a[0] + b[0], a[1] + b[1])


def subtract(a: Complex, b: Complex) -> Complex:
    """Покомпонентная разность."""
    return Complex(a[0] - b[0], a[1] - b[1])


def multiply(a: Complex, b: Complex) -> Complex:
    """
    Произведение (ar·br − ai·bi, ar·bi + ai·br).

    Examples:
        >>> multiply(Complex(1.0, 2.0), Complex(3.0, 4.0))
        Complex(real=-5.0, imag=10.0)
    """
    ar, ai = a
    br, bi = b
    return Complex(ar * br - ai * bi, ar * bi + ai * br)


def divide(a: Complex, b: Complex) -> Complex:
    """
    Деление через сопряжённый знаменатель:

        (ar + i·ai) / (br + i·bi) =
            ((ar·br + ai·bi) + i·(ai·br − ar·bi)) / (br² + bi²)

    Raises:
        DomainError: Если br² + bi² == 0

    Examples:
        >>> divide(Complex(-5.0, 10.0), Complex(3.0, 4.0))
        Complex(real=1.0, imag=2.0)
    """
    ar, ai = a
    br, bi = b

    denominator = br * br + bi * bi
    if denominator == 0.0:
        raise DomainError(f"Complex division by zero: divisor is {tuple(b)}")

    return Complex(
        (ar * br + ai * bi) / denominator,
        (ai * br - ar * bi) / denominator,
    )


def absolute(a: Complex) -> float:
    """Модуль sqrt(real² + imag²)."""
    real, imag = a
    return math.sqrt(real * real + imag * imag)
