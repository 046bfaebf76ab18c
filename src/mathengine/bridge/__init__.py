"""Bridge — граница вызова именованных операций mathengine.

- registry: каталог операций и контракты аргументов
- dispatcher: invoke (типизированный результат) / call (исключения)
"""

from .dispatcher import call, invoke, invoke_call, to_plain
from .registry import (
    OPERATIONS,
    ArgKind,
    OperationSpec,
    OptionalParam,
    get_operation,
    operation_names,
)

__all__ = [
    "ArgKind",
    "OPERATIONS",
    "OperationSpec",
    "OptionalParam",
    "call",
    "get_operation",
    "invoke",
    "invoke_call",
    "operation_names",
    "to_plain",
]
