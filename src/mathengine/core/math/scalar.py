"""
Scalar Operations — арифметика, элементарные и специальные функции

Группа ScalarOps: каждая функция принимает один или два float и
возвращает float, либо возбуждает DomainError при нарушении области
определения. Специальные функции (gamma, erf, erfc) делегируются
стандартной библиотеке math.

Также содержит целочисленные утилиты (factorial, combinations, gcd, lcm),
которые усекают float-входы к int в сторону нуля.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Область определения проверяется ДО вычисления
2. Переполнение следует IEEE-754: результат ±Inf, а не исключение
3. Полюса gamma (0, -1, -2, ...) → Inf, а не ошибка
4. sin / cos / tan от ±Inf → NaN
5. Целый результат, не помещающийся в float (combinations, lcm) → Inf
6. Нет скрытого состояния; результат детерминирован
"""

import math
from typing import Callable

from mathengine.core.config import DEFAULT_LIMITS
from mathengine.core.math.numerical_safeguards import (
    DomainError,
    truncate_to_int,
)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """
    Деление a / b.

    Raises:
        DomainError: Если b == 0

    Examples:
        >>> divide(10.0, 4.0)
        2.5
    """
    if b == 0:
        raise DomainError(f"Division by zero: {a} / {b}")

    return a / b


# =============================================================================
# СТЕПЕНИ, ЛОГАРИФМЫ, ЭКСПОНЕНТА
# =============================================================================


def power(base: float, exponent: float) -> float:
    """
    Возведение в степень base ** exponent.

    Переполнение возвращает ±Inf (знак как у нечётной целой степени
    отрицательного основания).

    Raises:
        DomainError: 0 в отрицательной степени или отрицательное основание
            в дробной степени (результат не вещественный)

    Examples:
        >>> power(2.0, 10.0)
        1024.0
        >>> power(-2.0, 3.0)
        -8.0
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        raise DomainError(
            f"power is undefined for base={base}, exponent={exponent}"
        ) from None
    except OverflowError:
        odd_integer_exponent = float(exponent).is_integer() and int(exponent) % 2 == 1
        if base < 0 and odd_integer_exponent:
            return -math.inf
        return math.inf


def square_root(x: float) -> float:
    """
    Raises:
        DomainError: Если x < 0
    """
    if x < 0:
        raise DomainError(f"Square root of negative number: {x}")

    return math.sqrt(x)


def absolute(x: float) -> float:
    return math.fabs(x)


def exponential(x: float) -> float:
    """e ** x; переполнение → Inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def natural_log(x: float) -> float:
    """
    Raises:
        DomainError: Если x <= 0
    """
    if x <= 0:
        raise DomainError(f"Logarithm of non-positive number: {x}")

    return math.log(x)


def log10(x: float) -> float:
    """
    Raises:
        DomainError: Если x <= 0
    """
    if x <= 0:
        raise DomainError(f"Logarithm of non-positive number: {x}")

    return math.log10(x)


def log2(x: float) -> float:
    """
    Raises:
        DomainError: Если x <= 0
    """
    if x <= 0:
        raise DomainError(f"Logarithm of non-positive number: {x}")

    return math.log2(x)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def _periodic(func: Callable[[float], float], x: float) -> float:
    # math.sin(±Inf) возбуждает ValueError; IEEE-754 даёт NaN
    if math.isinf(x):
        return math.nan

    return func(x)


def sine(x: float) -> float:
    """sin(x); sin(±Inf) → NaN."""
    return _periodic(math.sin, x)


def cosine(x: float) -> float:
    """cos(x); cos(±Inf) → NaN."""
    return _periodic(math.cos, x)


def tangent(x: float) -> float:
    """tan(x); tan(±Inf) → NaN."""
    return _periodic(math.tan, x)


def arcsine(x: float) -> float:
    """
    Raises:
        DomainError: Если x вне [-1, 1]
    """
    if x < -1.0 or x > 1.0:
        raise DomainError(f"Arcsin argument out of range [-1, 1]: {x}")

    return math.asin(x)


def arccosine(x: float) -> float:
    """
    Raises:
        DomainError: Если x вне [-1, 1]
    """
    if x < -1.0 or x > 1.0:
        raise DomainError(f"Arccos argument out of range [-1, 1]: {x}")

    return math.acos(x)


def arctangent(x: float) -> float:
    return math.atan(x)


def arctan2(y: float, x: float) -> float:
    return math.atan2(y, x)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def tanh(x: float) -> float:
    return math.tanh(x)


# =============================================================================
# СПЕЦИАЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def gamma(x: float) -> float:
    """
    Гамма-функция Γ(x) через math.gamma.

    Полюса в неположительных целых и переполнение дают Inf
    (а не исключение).

    Examples:
        >>> gamma(5.0)
        24.0
        >>> gamma(0.0)
        inf
    """
    try:
        return math.gamma(x)
    except (ValueError, OverflowError):
        return math.inf


def beta(a: float, b: float) -> float:
    """
    Бета-функция B(a, b) = Γ(a)·Γ(b) / Γ(a+b).

    Raises:
        DomainError: Если Γ(a+b) == 0

    Examples:
        >>> beta(2.0, 3.0)
        0.08333333333333333
    """
    gamma_ab = gamma(a + b)
    if gamma_ab == 0.0:
        raise DomainError(f"Invalid gamma in beta(): Γ({a} + {b}) evaluates to zero")

    return (gamma(a) * gamma(b)) / gamma_ab


def erf(x: float) -> float:
    return math.erf(x)


def erfc(x: float) -> float:
    return math.erfc(x)


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ УТИЛИТЫ
# =============================================================================


def _int_to_float(value: int) -> float:
    """Точное целое → float; вне диапазона float → Inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf


def factorial(n: float) -> float:
    """
    Факториал n! для 0 <= n <= 20.

    n усекается к int в сторону нуля. Верхняя граница — максимальный
    вход, при котором n! помещается в 64-bit integer.

    Raises:
        DomainError: Если n < 0 или n > 20

    Examples:
        >>> factorial(5.0)
        120.0
        >>> factorial(5.9)
        120.0
    """
    n_int = truncate_to_int(n, "n")

    if n_int < 0:
        raise DomainError(f"Factorial of negative number: {n}")

    if n_int > DEFAULT_LIMITS.max_factorial_input:
        raise DomainError(
            f"Factorial too large for 64-bit integer: {n} > "
            f"{DEFAULT_LIMITS.max_factorial_input}"
        )

    return float(math.factorial(n_int))


def combinations(n: float, k: float) -> float:
    """
    Биномиальный коэффициент C(n, k).

    Точное целое C(n, k) вне диапазона float → Inf.

    Raises:
        DomainError: Если n < 0, k < 0 или k > n (после усечения)

    Examples:
        >>> combinations(5.0, 2.0)
        10.0
    """
    n_int = truncate_to_int(n, "n")
    k_int = truncate_to_int(k, "k")

    if n_int < 0 or k_int < 0 or k_int > n_int:
        raise DomainError(f"Invalid combination parameters: n={n}, k={k}")

    return _int_to_float(math.comb(n_int, k_int))


def gcd(a: float, b: float) -> float:
    """
    НОД по алгоритму Евклида на усечённых целых.

    Результат неотрицательный; gcd(0, 0) == 0.

    Examples:
        >>> gcd(12.0, 18.0)
        6.0
        >>> gcd(12.7, 18.2)
        6.0
    """
    a_int = abs(truncate_to_int(a, "a"))
    b_int = abs(truncate_to_int(b, "b"))

    while b_int != 0:
        a_int, b_int = b_int, a_int % b_int

    return float(a_int)


def lcm(a: float, b: float) -> float:
    """
    НОК на усечённых целых: |a| / gcd(a, b) * |b|.

    Если хотя бы один операнд равен 0, результат 0.
    Результат вне диапазона float → Inf.

    Examples:
        >>> lcm(4.0, 6.0)
        12.0
    """
    a_int = abs(truncate_to_int(a, "a"))
    b_int = abs(truncate_to_int(b, "b"))

    if a_int == 0 or b_int == 0:
        return 0.0

    divisor = math.gcd(a_int, b_int)
    return _int_to_float((a_int // divisor) * b_int)
