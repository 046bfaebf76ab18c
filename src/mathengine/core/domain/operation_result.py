"""
OperationResult — типизированный результат вызова операции

Immutable Pydantic модели границы вызова. Ошибки ядра (DomainError,
ShapeError, UnsupportedSizeError, ...) переводятся в OperationError с
категорией ErrorKind; значение и ошибка взаимоисключающие.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from mathengine.core.math.numerical_safeguards import ErrorKind, MathEngineError


# =============================================================================
# ERROR MODEL
# =============================================================================


class OperationError(BaseModel):
    """Описание неудачного вызова."""

    kind: ErrorKind = Field(..., description="Категория ошибки")
    message: str = Field(..., min_length=1, description="Сообщение об ошибке")

    model_config = {"frozen": True}

    @classmethod
    def from_exception(cls, exc: MathEngineError) -> "OperationError":
        return cls(kind=exc.kind, message=str(exc) or type(exc).__name__)


# =============================================================================
# RESULT MODEL
# =============================================================================


class OperationResult(BaseModel):
    """
    Результат вызова именованной операции.

    ok=True  → value содержит результат, error is None
    ok=False → error содержит категорию и сообщение, value is None
    """

    operation: str = Field(..., min_length=1, description="Имя операции")
    ok: bool = Field(..., description="Успешен ли вызов")
    value: Any = Field(None, description="Результат (скаляр, пара, вектор, матрица)")
    error: Optional[OperationError] = Field(None, description="Ошибка вызова")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_outcome(self) -> "OperationResult":
        """Успех и ошибка взаимоисключающие."""
        if self.ok and self.error is not None:
            raise ValueError("successful result cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("failed result must carry an error")
        if not self.ok and self.value is not None:
            raise ValueError("failed result cannot carry a value")
        return self

    @classmethod
    def success(cls, operation: str, value: Any) -> "OperationResult":
        return cls(operation=operation, ok=True, value=value)

    @classmethod
    def failure(cls, operation: str, exc: MathEngineError) -> "OperationResult":
        return cls(
            operation=operation,
            ok=False,
            error=OperationError.from_exception(exc),
        )

    def unwrap(self) -> Any:
        """
        Значение успешного результата.

        Raises:
            ValueError: Если результат неуспешный
        """
        if not self.ok:
            raise ValueError(
                f"{self.operation} failed ({self.error.kind.value}): {self.error.message}"
            )
        return self.value
