"""
Operation Registry — каталог именованных операций движка

Каждая публичная операция (camelCase-имя границы) отображается на чистую
функцию ядра вместе с контрактом аргументов:
- виды позиционных аргументов (scalar / complex / vector / matrix / flag)
- опциональные параметры с default-значениями

Таблица опциональных параметров:
    vectorNorm                                  p (2.0)
    vectorVariance / vectorStandardDeviation /
    variance / standardDeviation                population (False)
    normalPDF / normalCDF                       mean (0.0), stddev (1.0)
    randomUniform                               min (0.0), max (1.0)
    randomNormal                                mean (0.0), stddev (1.0)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, NamedTuple

from mathengine.core.math import (
    complex_numbers,
    matrix,
    random_sampling,
    regression,
    scalar,
    signal,
    statistics,
    vector,
)
from mathengine.core.math.numerical_safeguards import UnknownOperationError


# =============================================================================
# ТИПЫ КОНТРАКТА
# =============================================================================


class ArgKind(str, Enum):
    """Вид аргумента; совпадает с именем JSON Schema контракта."""

    SCALAR = "scalar"
    COMPLEX = "complex"
    VECTOR = "vector"
    MATRIX = "matrix"
    FLAG = "flag"


class OptionalParam(NamedTuple):
    """Опциональный параметр операции."""

    name: str  # имя на границе (например, 'min')
    kind: ArgKind
    default: Any
    target: str  # имя keyword-аргумента функции ядра (например, 'minimum')


@dataclass(frozen=True)
class OperationSpec:
    """Контракт именованной операции."""

    name: str
    func: Callable[..., Any]
    arg_kinds: tuple[ArgKind, ...]
    optional: tuple[OptionalParam, ...] = field(default_factory=tuple)

    @property
    def min_args(self) -> int:
        return len(self.arg_kinds)

    @property
    def max_args(self) -> int:
        return len(self.arg_kinds) + len(self.optional)

    def optional_param(self, name: str) -> OptionalParam | None:
        for param in self.optional:
            if param.name == name:
                return param
        return None


S = ArgKind.SCALAR
C = ArgKind.COMPLEX
V = ArgKind.VECTOR
M = ArgKind.MATRIX

_POPULATION = OptionalParam("population", ArgKind.FLAG, False, "population")
_MEAN = OptionalParam("mean", S, 0.0, "mean")
_STDDEV = OptionalParam("stddev", S, 1.0, "stddev")


def _op(
    name: str,
    func: Callable[..., Any],
    *arg_kinds: ArgKind,
    optional: tuple[OptionalParam, ...] = (),
) -> OperationSpec:
    return OperationSpec(name=name, func=func, arg_kinds=arg_kinds, optional=optional)


# =============================================================================
# РЕЕСТР
# =============================================================================


_SPECS: tuple[OperationSpec, ...] = (
    # Arithmetic
    _op("add", scalar.add, S, S),
    _op("subtract", scalar.subtract, S, S),
    _op("multiply", scalar.multiply, S, S),
    _op("divide", scalar.divide, S, S),
    # Powers, logarithms
    _op("power", scalar.power, S, S),
    _op("squareRoot", scalar.square_root, S),
    _op("absolute", scalar.absolute, S),
    _op("exponential", scalar.exponential, S),
    _op("naturalLog", scalar.natural_log, S),
    _op("log10", scalar.log10, S),
    _op("log2", scalar.log2, S),
    # Trigonometry
    _op("sine", scalar.sine, S),
    _op("cosine", scalar.cosine, S),
    _op("tangent", scalar.tangent, S),
    _op("arcsine", scalar.arcsine, S),
    _op("arccosine", scalar.arccosine, S),
    _op("arctangent", scalar.arctangent, S),
    _op("arctan2", scalar.arctan2, S, S),
    # Hyperbolic
    _op("sinh", scalar.sinh, S),
    _op("cosh", scalar.cosh, S),
    _op("tanh", scalar.tanh, S),
    # Special functions
    _op("gamma", scalar.gamma, S),
    _op("beta", scalar.beta, S, S),
    _op("erf", scalar.erf, S),
    _op("erfc", scalar.erfc, S),
    # Complex
    _op("complexCreate", complex_numbers.create, S, S),
    _op("complexAdd", complex_numbers.add, C, C),
    _op("complexSubtract", complex_numbers.subtract, C, C),
    _op("complexMultiply", complex_numbers.multiply, C, C),
    _op("complexDivide", complex_numbers.divide, C, C),
    _op("complexAbsolute", complex_numbers.absolute, C),
    # Vector
    _op("vectorCreate", vector.create, V),
    _op("vectorDotProduct", vector.dot_product, V, V),
    _op("vectorCrossProduct", vector.cross_product, V, V),
    _op("vectorNorm", vector.norm, V, optional=(OptionalParam("p", S, 2.0, "p"),)),
    _op("vectorNormalize", vector.normalize, V),
    _op("vectorAdd", vector.add, V, V),
    _op("vectorSubtract", vector.subtract, V, V),
    _op("vectorScale", vector.scale, V, S),
    _op("vectorSum", vector.total, V),
    _op("vectorMean", vector.mean, V),
    _op("vectorVariance", vector.variance, V, optional=(_POPULATION,)),
    _op("vectorStandardDeviation", vector.standard_deviation, V, optional=(_POPULATION,)),
    _op("vectorMin", vector.minimum, V),
    _op("vectorMax", vector.maximum, V),
    # Matrix
    _op("matrixCreate", matrix.create, M),
    _op("matrixIdentity", matrix.identity, S),
    _op("matrixZeros", matrix.zeros, S, S),
    _op("matrixOnes", matrix.ones, S, S),
    _op("matrixTranspose", matrix.transpose, M),
    _op("matrixAdd", matrix.add, M, M),
    _op("matrixSubtract", matrix.subtract, M, M),
    _op("matrixMultiply", matrix.multiply, M, M),
    _op("matrixScalarMultiply", matrix.scalar_multiply, M, S),
    _op("matrixDeterminant", matrix.determinant, M),
    _op("matrixInverse", matrix.inverse, M),
    _op("matrixTrace", matrix.trace, M),
    # Statistics
    _op("mean", statistics.mean, V),
    _op("median", statistics.median, V),
    _op("variance", statistics.variance, V, optional=(_POPULATION,)),
    _op("standardDeviation", statistics.standard_deviation, V, optional=(_POPULATION,)),
    _op("covariance", statistics.covariance, V, V),
    _op("correlation", statistics.correlation, V, V),
    # Distributions
    _op("normalPDF", statistics.normal_pdf, S, optional=(_MEAN, _STDDEV)),
    _op("normalCDF", statistics.normal_cdf, S, optional=(_MEAN, _STDDEV)),
    # Random sampling
    _op(
        "randomUniform",
        random_sampling.random_uniform,
        S,
        optional=(
            OptionalParam("min", S, 0.0, "minimum"),
            OptionalParam("max", S, 1.0, "maximum"),
        ),
    ),
    _op("randomNormal", random_sampling.random_normal, S, optional=(_MEAN, _STDDEV)),
    # Signal processing
    _op("fft", signal.fft, V, V),
    _op("convolve", signal.convolve, V, V),
    # Machine learning
    _op("linearRegression", regression.linear_regression, M, V),
    # Utilities
    _op("factorial", scalar.factorial, S),
    _op("combinations", scalar.combinations, S, S),
    _op("gcd", scalar.gcd, S, S),
    _op("lcm", scalar.lcm, S, S),
)

OPERATIONS: dict[str, OperationSpec] = {spec.name: spec for spec in _SPECS}


def get_operation(name: str) -> OperationSpec:
    """
    Контракт операции по имени.

    Raises:
        UnknownOperationError: Если операция не зарегистрирована
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation: {name!r}") from None


def operation_names() -> list[str]:
    return sorted(OPERATIONS)
