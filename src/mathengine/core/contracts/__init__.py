"""
Contract Validation Module

Модуль для валидации JSON контрактов аргументов операций mathengine.
"""

from .validators import (
    ARGUMENT_VALIDATORS,
    ComplexValidator,
    ContractValidator,
    FlagValidator,
    MatrixValidator,
    OperationCallValidator,
    ScalarValidator,
    SchemaLoader,
    VectorValidator,
    validate_argument,
    validate_operation_call,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ScalarValidator",
    "ComplexValidator",
    "VectorValidator",
    "MatrixValidator",
    "FlagValidator",
    "OperationCallValidator",
    # Registry
    "ARGUMENT_VALIDATORS",
    # Functions
    "validate_argument",
    "validate_operation_call",
]
