"""
Тесты для VectorOps

Проверяет:
1. Арифметику и проверку длин
2. Скалярное и векторное произведение
3. Нормы и нормализацию
4. Редукции и моменты (политика пустых входов, n == 1)
"""

import math

import pytest

from mathengine.core.math import vector
from mathengine.core.math.numerical_safeguards import DomainError, ShapeError


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestVectorArithmetic:
    """Тесты create / add / subtract / scale"""

    def test_create_copies(self) -> None:
        """create возвращает новый список float"""
        source = [1, 2, 3]
        result = vector.create(source)
        assert result == [1.0, 2.0, 3.0]
        assert result is not source

    def test_add_subtract(self) -> None:
        """Поэлементные сложение и вычитание"""
        assert vector.add([1.0, 2.0], [3.0, 4.0]) == [4.0, 6.0]
        assert vector.subtract([1.0, 2.0], [3.0, 4.0]) == [-2.0, -2.0]

    def test_add_length_mismatch(self) -> None:
        """Разные длины в add → ShapeError"""
        with pytest.raises(ShapeError, match="same size for addition"):
            vector.add([1.0, 2.0], [1.0])

    def test_subtract_length_mismatch(self) -> None:
        """Разные длины в subtract → ShapeError"""
        with pytest.raises(ShapeError, match="same size for subtraction"):
            vector.subtract([1.0], [1.0, 2.0])

    def test_empty_vectors(self) -> None:
        """Пустые векторы допустимы"""
        assert vector.add([], []) == []

    def test_scale(self) -> None:
        """Умножение на скаляр"""
        assert vector.scale([1.0, -2.0], 3.0) == [3.0, -6.0]


# =============================================================================
# ТЕСТЫ ПРОИЗВЕДЕНИЙ
# =============================================================================


class TestProducts:
    """Тесты dot_product / cross_product"""

    def test_dot_product(self) -> None:
        """[1, 2, 3] · [4, 5, 6] == 32"""
        assert vector.dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_dot_product_commutative(self) -> None:
        """a · b == b · a"""
        a = [0.1, -2.5, 3.75]
        b = [4.0, 0.3, -1.2]
        assert vector.dot_product(a, b) == vector.dot_product(b, a)

    def test_dot_product_empty(self) -> None:
        """Пустые векторы → 0.0"""
        assert vector.dot_product([], []) == 0.0

    def test_dot_product_length_mismatch(self) -> None:
        """Разные длины → ShapeError"""
        with pytest.raises(ShapeError, match="dot product"):
            vector.dot_product([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_cross_product_basis(self) -> None:
        """x × y == z"""
        assert vector.cross_product([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]) == [0.0, 0.0, 1.0]

    def test_cross_product_anticommutative(self) -> None:
        """a × b == −(b × a)"""
        a = [1.0, 2.0, 3.0]
        b = [4.0, 5.0, 6.0]
        assert vector.cross_product(a, b) == [-3.0, 6.0, -3.0]
        assert vector.cross_product(b, a) == [3.0, -6.0, 3.0]

    def test_cross_product_orthogonal(self) -> None:
        """a × b ортогонален a и b"""
        a = [2.0, -1.0, 0.5]
        b = [0.3, 4.0, -2.0]
        c = vector.cross_product(a, b)
        assert vector.dot_product(a, c) == pytest.approx(0.0, abs=1e-12)
        assert vector.dot_product(b, c) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize(
        "a, b",
        [
            ([1.0, 2.0], [3.0, 4.0]),
            ([1.0, 2.0, 3.0], [1.0, 2.0]),
            ([1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0]),
        ],
    )
    def test_cross_product_requires_3d(self, a: list, b: list) -> None:
        """Векторное произведение только для 3D"""
        with pytest.raises(ShapeError, match="3D vectors"):
            vector.cross_product(a, b)


# =============================================================================
# ТЕСТЫ НОРМ
# =============================================================================


class TestNorm:
    """Тесты norm / normalize"""

    def test_default_euclidean(self) -> None:
        """По умолчанию p = 2"""
        assert vector.norm([3.0, 4.0]) == 5.0

    def test_l1(self) -> None:
        """p = 1: сумма модулей"""
        assert vector.norm([3.0, -4.0], p=1.0) == 7.0

    def test_infinity(self) -> None:
        """p = Inf: максимум модуля"""
        assert vector.norm([3.0, -4.0], p=math.inf) == 4.0

    def test_general_p(self) -> None:
        """p = 3: (1 + 8)^(1/3)"""
        assert vector.norm([1.0, 2.0], p=3.0) == pytest.approx(9.0 ** (1.0 / 3.0))

    def test_general_p_overflow_is_infinite(self) -> None:
        """Переполнение Σ|x|^p → Inf без исключения"""
        assert vector.norm([1e200], p=3.0) == math.inf
        assert vector.norm([1e200, 1.0], p=2.5) == math.inf

    def test_empty_is_zero(self) -> None:
        """Норма пустого вектора равна 0"""
        assert vector.norm([]) == 0.0
        assert vector.norm([], p=math.inf) == 0.0

    @pytest.mark.parametrize("p", [0.0, -1.0, math.nan])
    def test_invalid_order_raises(self, p: float) -> None:
        """p <= 0 или NaN → DomainError"""
        with pytest.raises(DomainError, match="Norm order p must be positive"):
            vector.norm([1.0, 2.0], p=p)

    def test_normalize(self) -> None:
        """[3, 4] → [0.6, 0.8]"""
        result = vector.normalize([3.0, 4.0])
        assert result == pytest.approx([0.6, 0.8])
        assert vector.norm(result) == pytest.approx(1.0)

    @pytest.mark.parametrize("v", [[1.0], [-2.0, 0.5, 7.0], [1e-3, 1e-3, 1e-3, 1e-3]])
    def test_normalized_has_unit_norm(self, v: list) -> None:
        """Нормализованный вектор имеет норму 1"""
        assert vector.norm(vector.normalize(v)) == pytest.approx(1.0)

    def test_normalize_zero_vector_unchanged(self) -> None:
        """Нулевой вектор возвращается без изменений, без ошибки"""
        source = [0.0, 0.0, 0.0]
        result = vector.normalize(source)
        assert result == [0.0, 0.0, 0.0]
        assert result is not source

    def test_normalize_empty(self) -> None:
        """Пустой вектор → пустой вектор"""
        assert vector.normalize([]) == []


# =============================================================================
# ТЕСТЫ РЕДУКЦИЙ И МОМЕНТОВ
# =============================================================================


class TestReductions:
    """Тесты total / mean / minimum / maximum"""

    def test_total_and_mean(self) -> None:
        """Сумма и среднее"""
        assert vector.total([1.0, 2.0, 3.0, 4.0]) == 10.0
        assert vector.mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_empty_total_and_mean(self) -> None:
        """Пустой вектор → 0.0"""
        assert vector.total([]) == 0.0
        assert vector.mean([]) == 0.0

    def test_min_max(self) -> None:
        """Минимум и максимум"""
        data = [3.0, -1.0, 7.5, 2.0]
        assert vector.minimum(data) == -1.0
        assert vector.maximum(data) == 7.5

    def test_min_max_empty_raise(self) -> None:
        """min / max пустого вектора → ShapeError"""
        with pytest.raises(ShapeError):
            vector.minimum([])
        with pytest.raises(ShapeError):
            vector.maximum([])


class TestMoments:
    """Тесты variance / standard_deviation"""

    DATA = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]

    def test_population_variance(self) -> None:
        """Генеральная дисперсия и std"""
        assert vector.variance(self.DATA, population=True) == 4.0
        assert vector.standard_deviation(self.DATA, population=True) == 2.0

    def test_sample_variance_is_default(self) -> None:
        """По умолчанию делитель n − 1"""
        assert vector.variance(self.DATA) == pytest.approx(32.0 / 7.0)
        assert vector.standard_deviation(self.DATA) == pytest.approx(math.sqrt(32.0 / 7.0))

    def test_empty_is_zero(self) -> None:
        """Пустой вход → 0.0"""
        assert vector.variance([]) == 0.0
        assert vector.standard_deviation([], population=True) == 0.0

    def test_single_value_sample_raises(self) -> None:
        """Выборочная дисперсия одного значения не определена"""
        with pytest.raises(DomainError, match="single value"):
            vector.variance([5.0])
        with pytest.raises(DomainError):
            vector.standard_deviation([5.0])

    def test_single_value_population(self) -> None:
        """Генеральная дисперсия одного значения равна 0"""
        assert vector.variance([5.0], population=True) == 0.0

    def test_constant_data(self) -> None:
        """Постоянные данные → нулевая дисперсия"""
        assert vector.variance([3.0, 3.0, 3.0]) == 0.0
