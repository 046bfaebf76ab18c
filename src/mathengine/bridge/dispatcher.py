"""
Dispatcher — вызов именованных операций на границе движка

Граница выполняет:
1. Поиск контракта операции в реестре
2. Связывание позиционных и опциональных аргументов (None → default)
3. Валидацию каждого аргумента по JSON Schema контракту его вида
4. Вызов чистой функции ядра
5. Нормализацию результата к простым контейнерам (tuple → list)

invoke() никогда не возбуждает ошибки ядра: они переводятся в
OperationResult с категорией ErrorKind. call() — вариант с исключениями.
"""

import logging
from typing import Any, Dict

from jsonschema import ValidationError

from mathengine.bridge.registry import ArgKind, OperationSpec, get_operation
from mathengine.core.contracts import validate_argument, validate_operation_call
from mathengine.core.domain import OperationCall, OperationResult
from mathengine.core.math.complex_numbers import Complex
from mathengine.core.math.numerical_safeguards import (
    InvalidArgumentError,
    MathEngineError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНВЕРТАЦИЯ
# =============================================================================


def to_plain(value: Any) -> Any:
    """
    Нормализация к JSON-совместимым контейнерам.

    Complex, FourierTransform, RegressionResult и прочие tuple → list.

    Examples:
        >>> to_plain(Complex(1.0, 2.0))
        [1.0, 2.0]
    """
    if isinstance(value, (tuple, list)):
        return [to_plain(item) for item in value]
    return value


def _coerce(operation: str, label: str, kind: ArgKind, value: Any) -> Any:
    plain = to_plain(value)

    try:
        validate_argument(kind.value, plain)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"{operation}: argument {label} is not a valid {kind.value}: {e.message}"
        ) from e

    if kind is ArgKind.COMPLEX:
        return Complex(float(plain[0]), float(plain[1]))
    return plain


def _bind(
    spec: OperationSpec,
    args: tuple[Any, ...],
    kwargs: Dict[str, Any],
) -> tuple[list[Any], Dict[str, Any]]:
    """
    Связывание аргументов с контрактом операции.

    Returns:
        (positional, keyword) для вызова функции ядра

    Raises:
        InvalidArgumentError: Неверная арность, неизвестный или повторный
            параметр, значение не соответствует схеме
    """
    if not spec.min_args <= len(args) <= spec.max_args:
        expected = (
            str(spec.min_args)
            if spec.min_args == spec.max_args
            else f"{spec.min_args}..{spec.max_args}"
        )
        raise InvalidArgumentError(
            f"{spec.name} expects {expected} positional arguments, got {len(args)}"
        )

    positional = [
        _coerce(spec.name, str(index), kind, value)
        for index, (kind, value) in enumerate(zip(spec.arg_kinds, args))
    ]

    # Опциональные параметры: позиционно после обязательных, затем по имени
    supplied: Dict[str, Any] = {}
    for param, value in zip(spec.optional, args[spec.min_args:]):
        supplied[param.name] = value

    for name, value in kwargs.items():
        if spec.optional_param(name) is None:
            raise InvalidArgumentError(f"{spec.name} got an unexpected parameter {name!r}")
        if name in supplied:
            raise InvalidArgumentError(f"{spec.name} got multiple values for {name!r}")
        supplied[name] = value

    keyword: Dict[str, Any] = {}
    for param in spec.optional:
        value = supplied.get(param.name)
        if value is None:
            value = param.default
        keyword[param.target] = _coerce(spec.name, param.name, param.kind, value)

    return positional, keyword


# =============================================================================
# ВЫЗОВ
# =============================================================================


def call(name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Вызов операции с исключениями.

    Args:
        name: Имя операции (например, 'matrixDeterminant')
        *args: Позиционные аргументы
        **kwargs: Опциональные параметры по имени (например, population=True)

    Returns:
        Результат в виде простых контейнеров (float, list, list of lists)

    Raises:
        UnknownOperationError: Операция не зарегистрирована
        InvalidArgumentError: Аргументы не соответствуют контракту
        DomainError / ShapeError / UnsupportedSizeError: Ошибки ядра
    """
    spec = get_operation(name)
    positional, keyword = _bind(spec, args, kwargs)

    logger.debug("Invoking %s with %d positional arguments", name, len(positional))
    return to_plain(spec.func(*positional, **keyword))


def invoke(name: str, *args: Any, **kwargs: Any) -> OperationResult:
    """
    Вызов операции с типизированным результатом.

    Ошибки движка (MathEngineError) не пробрасываются, а возвращаются
    как OperationResult(ok=False, error=...).

    Examples:
        >>> invoke("divide", 10.0, 4.0).value
        2.5
        >>> invoke("divide", 10.0, 0.0).error.kind.value
        'domain'
    """
    try:
        value = call(name, *args, **kwargs)
    except MathEngineError as exc:
        logger.warning("Operation %s failed (%s): %s", name, exc.kind.value, exc)
        return OperationResult.failure(name or "unknown", exc)

    return OperationResult.success(name, value)


def invoke_call(payload: Dict[str, Any]) -> OperationResult:
    """
    Выполнение сериализованного вызова {operation, args, kwargs}.

    Payload проверяется по operation_call.json, затем по модели
    OperationCall; нарушения → OperationResult с INVALID_ARGUMENT.
    """
    operation = payload.get("operation") if isinstance(payload, dict) else None
    label = operation if isinstance(operation, str) and operation else "unknown"

    try:
        validate_operation_call(payload)
    except ValidationError as e:
        exc = InvalidArgumentError(f"Invalid operation call: {e.message}")
        logger.warning("Rejected operation call for %s: %s", label, e.message)
        return OperationResult.failure(label, exc)

    request = OperationCall.model_validate(payload)
    return invoke(request.operation, *request.args, **request.kwargs)
