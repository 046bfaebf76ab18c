"""
JSON Schema Contract Validators

Модуль для валидации аргументов операций согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (contracts/schema/):
- scalar.json          — число
- complex.json         — пара [real, imag]
- vector.json          — массив чисел
- matrix.json          — массив массивов чисел (прямоугольность проверяет ядро)
- flag.json            — boolean
- operation_call.json  — сериализованный вызов {operation, args, kwargs}
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема невалидна (meta-validation)
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ScalarValidator(ContractValidator):
    def __init__(self):
        super().__init__("scalar")


class ComplexValidator(ContractValidator):
    def __init__(self):
        super().__init__("complex")


class VectorValidator(ContractValidator):
    def __init__(self):
        super().__init__("vector")


class MatrixValidator(ContractValidator):
    def __init__(self):
        super().__init__("matrix")


class FlagValidator(ContractValidator):
    def __init__(self):
        super().__init__("flag")


class OperationCallValidator(ContractValidator):
    def __init__(self):
        super().__init__("operation_call")


# Валидаторы по виду аргумента (ключи совпадают с ArgKind в bridge.registry)
ARGUMENT_VALIDATORS: Dict[str, ContractValidator] = {
    "scalar": ScalarValidator(),
    "complex": ComplexValidator(),
    "vector": VectorValidator(),
    "matrix": MatrixValidator(),
    "flag": FlagValidator(),
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_argument(kind: str, value: Any) -> None:
    """
    Валидация одного аргумента по его виду.

    Args:
        kind: Вид аргумента ('scalar', 'complex', 'vector', 'matrix', 'flag')
        value: Значение (JSON-совместимое: list, а не tuple)

    Raises:
        KeyError: Если вид аргумента неизвестен
        ValidationError: Если значение не соответствует схеме
    """
    ARGUMENT_VALIDATORS[kind].validate(value)


def validate_operation_call(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если вызов не соответствует operation_call.json
    """
    OperationCallValidator().validate(data)
