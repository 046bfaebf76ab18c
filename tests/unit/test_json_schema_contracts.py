"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов аргументов:
- Валидность самих схем (meta-validation)
- Валидация правильных значений по виду аргумента
- Детекция нарушений типов и constraints
- Контракт сериализованного вызова operation_call
"""

import json

import pytest
from jsonschema import ValidationError

from mathengine.core.contracts import (
    ARGUMENT_VALIDATORS,
    ComplexValidator,
    MatrixValidator,
    OperationCallValidator,
    ScalarValidator,
    SchemaLoader,
    VectorValidator,
    validate_argument,
    validate_operation_call,
)


SCHEMA_NAMES = ["scalar", "complex", "vector", "matrix", "flag", "operation_call"]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", SCHEMA_NAMES)
    def test_schema_loads(self, schema_name: str) -> None:
        """Каждая схема загружается и проходит meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает кэшированную схему"""
        loader = SchemaLoader()
        assert loader.load_schema("vector") is loader.load_schema("vector")

    def test_missing_schema_raises(self) -> None:
        """Неизвестная схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("tensor")

    def test_missing_directory_raises(self, tmp_path) -> None:
        """Отсутствующая директория схем → RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_raises(self, tmp_path) -> None:
        """Схема, нарушающая meta-schema → ValueError"""
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "not-a-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ARGUMENT CONTRACTS
# =============================================================================


class TestScalarContract:
    """Тесты scalar.json"""

    @pytest.mark.parametrize("value", [0, 1.5, -3, 1e300])
    def test_valid(self, value: float) -> None:
        """Целые и вещественные числа допустимы"""
        ScalarValidator().validate(value)

    @pytest.mark.parametrize("value", ["1", None, True, [1.0]])
    def test_invalid(self, value) -> None:
        """Строки, None, bool и списки — не скаляры"""
        with pytest.raises(ValidationError):
            ScalarValidator().validate(value)


class TestComplexContract:
    """Тесты complex.json"""

    def test_valid_pair(self) -> None:
        """Пара [re, im]"""
        ComplexValidator().validate([1.0, -2.0])

    @pytest.mark.parametrize("value", [[1.0], [1.0, 2.0, 3.0], [1.0, "i"], 1.0])
    def test_invalid(self, value) -> None:
        """Не пара чисел → ValidationError"""
        with pytest.raises(ValidationError):
            ComplexValidator().validate(value)


class TestVectorContract:
    """Тесты vector.json"""

    def test_valid(self) -> None:
        """Числовой список, в том числе пустой"""
        validator = VectorValidator()
        validator.validate([1.0, 2, -3.5])
        validator.validate([])

    def test_non_numeric_element(self) -> None:
        """Строковый элемент отклоняется"""
        assert not VectorValidator().is_valid([1.0, "2"])

    def test_nested_rejected(self) -> None:
        """Вложенный список отклоняется"""
        assert not VectorValidator().is_valid([[1.0]])


class TestMatrixContract:
    """Тесты matrix.json"""

    def test_valid(self) -> None:
        """Список числовых строк"""
        MatrixValidator().validate([[1.0, 2.0], [3.0, 4.0]])

    def test_ragged_passes_schema(self) -> None:
        """Прямоугольность проверяет ядро, а не схема"""
        assert MatrixValidator().is_valid([[1.0, 2.0], [3.0]])

    def test_flat_rejected(self) -> None:
        """Плоский список отклоняется"""
        assert not MatrixValidator().is_valid([1.0, 2.0])

    def test_error_path(self) -> None:
        """Путь ошибки указывает на элемент [1][0]"""
        errors = list(MatrixValidator().iter_errors([[1.0], ["x"]]))
        assert len(errors) == 1
        assert list(errors[0].absolute_path) == [1, 0]


class TestValidateArgument:
    """Тесты validate_argument"""

    def test_registry_covers_all_kinds(self) -> None:
        """Валидатор для каждого вида аргумента"""
        assert set(ARGUMENT_VALIDATORS) == {"scalar", "complex", "vector", "matrix", "flag"}

    def test_dispatch_by_kind(self) -> None:
        """Валидация выбирается по виду аргумента"""
        validate_argument("flag", True)
        with pytest.raises(ValidationError):
            validate_argument("flag", 1)

    def test_unknown_kind(self) -> None:
        """Неизвестный вид → KeyError"""
        with pytest.raises(KeyError):
            validate_argument("tensor", [])


# =============================================================================
# OPERATION CALL CONTRACT
# =============================================================================


class TestOperationCallContract:
    """Тесты operation_call.json"""

    def test_minimal(self) -> None:
        """Достаточно одного operation"""
        validate_operation_call({"operation": "mean"})

    def test_full(self) -> None:
        """operation, args и kwargs вместе"""
        validate_operation_call(
            {"operation": "vectorNorm", "args": [[3, 4]], "kwargs": {"p": 1}}
        )

    def test_null_kwarg_allowed(self) -> None:
        """null означает значение по умолчанию"""
        validate_operation_call(
            {"operation": "variance", "args": [[1, 2]], "kwargs": {"population": None}}
        )

    def test_missing_operation(self) -> None:
        """Без operation → ValidationError"""
        with pytest.raises(ValidationError, match="'operation' is a required property"):
            validate_operation_call({"args": []})

    @pytest.mark.parametrize("name", ["", "matrix-inverse", "1add", "a b"])
    def test_invalid_operation_name(self, name: str) -> None:
        """Имя не camelCase → ValidationError"""
        with pytest.raises(ValidationError):
            validate_operation_call({"operation": name})

    def test_extra_field_rejected(self) -> None:
        """Лишние поля не допускаются"""
        assert not OperationCallValidator().is_valid({"operation": "add", "extra": 1})

    def test_non_scalar_kwarg_rejected(self) -> None:
        """kwargs принимают только скаляры, bool и null"""
        assert not OperationCallValidator().is_valid(
            {"operation": "vectorNorm", "args": [[1]], "kwargs": {"p": [1]}}
        )
