"""
Matrix Operations — двумерные массивы float

Группа MatrixOps: конструкция, поэлементная алгебра, умножение,
determinant / inverse / trace для малых квадратных матриц.

Матрица — последовательность строк одинаковой длины. Прямоугольность
(затем квадратность, где требуется) проверяется ДО запуска алгоритма;
нарушение → ShapeError.

Determinant и inverse ограничены закрытыми формулами для фиксированных
размеров (EngineLimits). Размер вне поддерживаемого набора →
UnsupportedSizeError через явную проверку возможностей supports_size().
"""

from typing import Final, Sequence

from mathengine.core.config import DEFAULT_LIMITS
from mathengine.core.math.numerical_safeguards import (
    DomainError,
    ShapeError,
    UnsupportedSizeError,
    require_square,
    validate_matrix,
    validate_positive_dimension,
)

Matrix = list[list[float]]

# Операции с ограниченным набором размеров
OPERATION_DETERMINANT: Final[str] = "determinant"
OPERATION_INVERSE: Final[str] = "inverse"


# =============================================================================
# ПРОВЕРКА ВОЗМОЖНОСТЕЙ
# =============================================================================


def supported_sizes(operation: str) -> tuple[int, ...]:
    """
    Размеры n, для которых операция реализована закрытой формулой.

    Args:
        operation: "determinant" или "inverse"

    Raises:
        ValueError: Если операция не имеет ограничений по размеру
    """
    if operation == OPERATION_DETERMINANT:
        return DEFAULT_LIMITS.determinant_sizes
    if operation == OPERATION_INVERSE:
        return DEFAULT_LIMITS.inverse_sizes

    raise ValueError(f"Operation {operation!r} has no size restriction")


def max_supported_size(operation: str) -> int:
    """
    Максимальный поддерживаемый размер n для операции.

    Examples:
        >>> max_supported_size("determinant")
        3
        >>> max_supported_size("inverse")
        2
    """
    return max(supported_sizes(operation))


def supports_size(operation: str, n: int) -> bool:
    return n in supported_sizes(operation)


def _require_supported_size(operation: str, n: int) -> None:
    if not supports_size(operation, n):
        sizes = ", ".join(f"{size}x{size}" for size in supported_sizes(operation))
        raise UnsupportedSizeError(
            f"{operation.capitalize()} only implemented for {sizes} matrices, "
            f"got {n}x{n}"
        )


# =============================================================================
# КОНСТРУКЦИЯ
# =============================================================================


def create(elements: Sequence[Sequence[float]]) -> Matrix:
    """
    Глубокая копия прямоугольной матрицы.

    Raises:
        ShapeError: Если матрица не прямоугольная
    """
    validate_matrix(elements)
    return [[float(value) for value in row] for row in elements]


def identity(size: float) -> Matrix:
    """
    Единичная матрица n x n (size усекается к int).

    Raises:
        DomainError: Если усечённый size <= 0

    Examples:
        >>> identity(2)
        [[1.0, 0.0], [0.0, 1.0]]
    """
    n = validate_positive_dimension(size, "Matrix size")

    result = [[0.0] * n for _ in range(n)]
    for i in range(n):
        result[i][i] = 1.0
    return result


def zeros(rows: float, cols: float) -> Matrix:
    """
    Raises:
        DomainError: Если rows или cols (усечённые) <= 0
    """
    r = validate_positive_dimension(rows, "Matrix rows")
    c = validate_positive_dimension(cols, "Matrix cols")
    return [[0.0] * c for _ in range(r)]


def ones(rows: float, cols: float) -> Matrix:
    """
    Raises:
        DomainError: Если rows или cols (усечённые) <= 0
    """
    r = validate_positive_dimension(rows, "Matrix rows")
    c = validate_positive_dimension(cols, "Matrix cols")
    return [[1.0] * c for _ in range(r)]


# =============================================================================
# СТРУКТУРНЫЕ И ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """
    Транспонирование: result[j][i] = matrix[i][j].

    Examples:
        >>> transpose([[1.0, 2.0, 3.0]])
        [[1.0], [2.0], [3.0]]
    """
    rows, cols = validate_matrix(matrix)
    return [[matrix[i][j] for i in range(rows)] for j in range(cols)]


def _require_same_dimensions(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    operation: str,
) -> tuple[int, int]:
    a_shape = validate_matrix(a)
    b_shape = validate_matrix(b)

    if a_shape != b_shape:
        raise ShapeError(
            f"Matrix dimensions must match for {operation}, "
            f"got {a_shape[0]}x{a_shape[1]} and {b_shape[0]}x{b_shape[1]}"
        )

    return a_shape


def add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """
    Raises:
        ShapeError: Если размерности различаются
    """
    rows, cols = _require_same_dimensions(a, b, "addition")
    return [[a[i][j] + b[i][j] for j in range(cols)] for i in range(rows)]


def subtract(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """
    Raises:
        ShapeError: Если размерности различаются
    """
    rows, cols = _require_same_dimensions(a, b, "subtraction")
    return [[a[i][j] - b[i][j] for j in range(cols)] for i in range(rows)]


def scalar_multiply(matrix: Sequence[Sequence[float]], scalar: float) -> Matrix:
    validate_matrix(matrix)
    return [[value * scalar for value in row] for row in matrix]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """
    Матричное произведение тройным циклом, O(rows_a × cols_b × cols_a).

    Raises:
        ShapeError: Если cols(a) != rows(b)

    Examples:
        >>> multiply([[1.0, 2.0], [3.0, 4.0]], [[5.0], [6.0]])
        [[17.0], [39.0]]
    """
    a_rows, a_cols = validate_matrix(a)
    b_rows, b_cols = validate_matrix(b)

    if a_cols != b_rows:
        raise ShapeError(
            f"Matrix dimensions incompatible for multiplication: "
            f"{a_rows}x{a_cols} and {b_rows}x{b_cols}"
        )

    result = [[0.0] * b_cols for _ in range(a_rows)]
    for i in range(a_rows):
        for j in range(b_cols):
            acc = 0.0
            for k in range(a_cols):
                acc += a[i][k] * b[k][j]
            result[i][j] = acc
    return result


# =============================================================================
# DETERMINANT / INVERSE / TRACE
# =============================================================================


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """
    Определитель по закрытой формуле для 1x1, 2x2, 3x3.

    Raises:
        ShapeError: Если матрица не прямоугольная или не квадратная
        UnsupportedSizeError: Если размер не поддерживается

    Examples:
        >>> determinant([[1.0, 2.0], [3.0, 4.0]])
        -2.0
    """
    n = require_square(matrix, OPERATION_DETERMINANT)
    _require_supported_size(OPERATION_DETERMINANT, n)

    m = matrix
    if n == 1:
        return float(m[0][0])

    if n == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]

    # Разложение по первой строке
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def inverse(matrix: Sequence[Sequence[float]]) -> Matrix:
    """
    Обратная матрица по закрытой формуле для 2x2:

        [[a, b], [c, d]]^-1 = 1/det · [[d, -b], [-c, a]]

    Порядок проверок: прямоугольность → квадратность → вырожденность
    (для любого размера с закрытой формулой det) → поддерживаемый размер.
    Вырожденная 1x1 или 3x3 → DomainError; невырожденная → UnsupportedSizeError.

    Raises:
        ShapeError: Если матрица не квадратная
        UnsupportedSizeError: Если размер не 2x2
        DomainError: Если det == 0 (singular)

    Examples:
        >>> inverse([[4.0, 7.0], [2.0, 6.0]])
        [[0.6, -0.7], [-0.2, 0.4]]
    """
    n = require_square(matrix, OPERATION_INVERSE)
    if not supports_size(OPERATION_DETERMINANT, n):
        _require_supported_size(OPERATION_INVERSE, n)

    det = determinant(matrix)
    if det == 0:
        raise DomainError("Matrix is singular, cannot compute inverse")

    _require_supported_size(OPERATION_INVERSE, n)

    (a, b), (c, d) = matrix
    return [
        [d / det, -b / det],
        [-c / det, a / det],
    ]


def trace(matrix: Sequence[Sequence[float]]) -> float:
    """
    Сумма главной диагонали.

    Raises:
        ShapeError: Если матрица не квадратная
    """
    n = require_square(matrix, "trace")
    return sum((matrix[i][i] for i in range(n)), 0.0)
