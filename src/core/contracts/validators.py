"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- point.json (сериализованная точка: dims + coords)
- orthant_sign.json (результат поиска знаков ортанта)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'point')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """
        Проверка валидности данных без exception.

        Согласована с validate(), включая проверки подклассов.
        """
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по ошибкам JSON Schema (без cross-field проверок подклассов)."""
        return self.validator.iter_errors(data)


class PointValidator(ContractValidator):
    """
    Валидатор для point контракта.

    Кроме схемы проверяет согласованность dims и длины coords
    (JSON Schema этого выразить не может).
    """

    def __init__(self):
        super().__init__("point")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        if data["dims"] != len(data["coords"]):
            raise ValidationError(
                f"dims {data['dims']} does not match number of coords {len(data['coords'])}"
            )


class OrthantSignValidator(ContractValidator):
    """Валидатор для orthant_sign контракта."""

    def __init__(self):
        super().__init__("orthant_sign")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        signs = data["signs"]
        if not (data["dims"] == signs["dims"] == len(signs["coords"])):
            raise ValidationError(
                f"dims {data['dims']} does not match signs "
                f"(dims={signs['dims']}, coords={len(signs['coords'])})"
            )
        if data["orthant_count"] != 2 ** data["dims"]:
            raise ValidationError(
                f"orthant_count {data['orthant_count']} != 2^{data['dims']}"
            )
        if data["orthant"] > data["orthant_count"]:
            raise ValidationError(
                f"orthant {data['orthant']} exceeds orthant_count {data['orthant_count']}"
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_point(data: Dict[str, Any]) -> None:
    """
    Валидация point данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PointValidator().validate(data)


def validate_orthant_sign(data: Dict[str, Any]) -> None:
    """
    Валидация orthant_sign данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrthantSignValidator().validate(data)
