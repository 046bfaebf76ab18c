"""
Тесты для ComplexOps
"""

import math

import pytest

from mathengine.core.math import complex_numbers
from mathengine.core.math.complex_numbers import Complex
from mathengine.core.math.numerical_safeguards import DomainError


class TestComplexType:
    """Тесты типа Complex"""

    def test_create(self) -> None:
        """create приводит компоненты к float"""
        z = complex_numbers.create(3, 4)
        assert z == Complex(3.0, 4.0)
        assert z.real == 3.0
        assert z.imag == 4.0
        assert isinstance(z.real, float)

    def test_immutable(self) -> None:
        """Complex нельзя изменить на месте"""
        z = Complex(1.0, 2.0)
        with pytest.raises(AttributeError):
            z.real = 5.0  # type: ignore[misc]

    def test_accepts_plain_pairs(self) -> None:
        """Операции принимают любую пару (real, imag)"""
        assert complex_numbers.add((1.0, 2.0), [3.0, 4.0]) == Complex(4.0, 6.0)


class TestComplexArithmetic:
    """Тесты арифметики комплексных чисел"""

    def test_add_subtract(self) -> None:
        """Покомпонентные сложение и вычитание"""
        a = Complex(1.0, 2.0)
        b = Complex(3.0, -1.0)
        assert complex_numbers.add(a, b) == Complex(4.0, 1.0)
        assert complex_numbers.subtract(a, b) == Complex(-2.0, 3.0)

    def test_multiply(self) -> None:
        """(1 + 2i)(3 + 4i) == −5 + 10i"""
        result = complex_numbers.multiply(Complex(1.0, 2.0), Complex(3.0, 4.0))
        assert result == Complex(-5.0, 10.0)

    def test_multiply_i_squared(self) -> None:
        """i · i == −1"""
        i = Complex(0.0, 1.0)
        assert complex_numbers.multiply(i, i) == Complex(-1.0, 0.0)

    def test_divide(self) -> None:
        """(−5 + 10i) / (3 + 4i) == 1 + 2i"""
        result = complex_numbers.divide(Complex(-5.0, 10.0), Complex(3.0, 4.0))
        assert result.real == pytest.approx(1.0)
        assert result.imag == pytest.approx(2.0)

    def test_divide_inverts_multiply(self) -> None:
        """(a · b) / b == a"""
        a = Complex(2.5, -1.5)
        b = Complex(0.5, 3.0)
        result = complex_numbers.divide(complex_numbers.multiply(a, b), b)
        assert result.real == pytest.approx(a.real)
        assert result.imag == pytest.approx(a.imag)

    def test_divide_by_zero_raises(self) -> None:
        """Деление на 0 + 0i → DomainError"""
        with pytest.raises(DomainError, match="Complex division by zero"):
            complex_numbers.divide(Complex(1.0, 1.0), Complex(0.0, 0.0))

    def test_absolute(self) -> None:
        """|3 + 4i| == 5"""
        assert complex_numbers.absolute(Complex(3.0, 4.0)) == 5.0
        assert complex_numbers.absolute(Complex(0.0, 0.0)) == 0.0
        assert complex_numbers.absolute(Complex(-1.0, 1.0)) == pytest.approx(math.sqrt(2))
