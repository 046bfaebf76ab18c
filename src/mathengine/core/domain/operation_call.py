"""
OperationCall — сериализованный вызов операции

Immutable Pydantic модель. Соответствует схеме operation_call.json.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class OperationCall(BaseModel):
    """
    Вызов именованной операции с позиционными и опциональными аргументами.

    Пример:
        {"operation": "vectorNorm", "args": [[3, 4]], "kwargs": {"p": 1}}
    """

    operation: str = Field(..., min_length=1, description="Имя операции (camelCase)")
    args: list[Any] = Field(default_factory=list, description="Позиционные аргументы")
    kwargs: dict[str, Any] = Field(
        default_factory=dict, description="Опциональные параметры по имени"
    )

    model_config = {"frozen": True}

    @field_validator("operation")
    @classmethod
    def validate_operation_name(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"operation must be an identifier, got {v!r}")
        return v
