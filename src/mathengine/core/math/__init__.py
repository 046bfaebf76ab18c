"""
Core math modules для mathengine

Чистые функции без состояния: ScalarOps, ComplexOps, VectorOps, MatrixOps,
статистика, выборки, сигналы, регрессия.
"""

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

# Complex Operations
from mathengine.core.math.complex_numbers import Complex

# Matrix Operations
from mathengine.core.math.matrix import max_supported_size, supports_size

# Numerical Safeguards
from mathengine.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exceptions
    DomainError,
    ErrorKind,
    InvalidArgumentError,
    MathEngineError,
    ShapeError,
    UnknownOperationError,
    UnsupportedSizeError,
    # Comparisons
    is_close,
    is_valid_float,
    is_zero,
    # Validation
    require_same_length,
    require_square,
    truncate_to_int,
    validate_matrix,
)

# Linear Regression
from mathengine.core.math.regression import (
    FeatureCountError,
    RegressionResult,
    linear_regression,
)

# Signal Processing
from mathengine.core.math.signal import FourierTransform, convolve, fft

__all__ = [
    # Submodules
    "complex_numbers",
    "matrix",
    "random_sampling",
    "regression",
    "scalar",
    "signal",
    "statistics",
    "vector",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Exceptions
    "DomainError",
    "ErrorKind",
    "InvalidArgumentError",
    "MathEngineError",
    "ShapeError",
    "UnknownOperationError",
    "UnsupportedSizeError",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — Validation
    "require_same_length",
    "require_square",
    "truncate_to_int",
    "validate_matrix",
    # Complex — Types
    "Complex",
    # Matrix — Capability
    "max_supported_size",
    "supports_size",
    # Regression
    "FeatureCountError",
    "RegressionResult",
    "linear_regression",
    # Signal
    "FourierTransform",
    "convolve",
    "fft",
]
