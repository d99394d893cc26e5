"""
Node Call Contracts

Node engine передаёт вызов функции как JSON payload:
{"library": "math", "function": "convertRange", "args": [...]}.
Форма payload (имя функции, позиционные args и допустимые типы аргументов:
число, строка, null, список чисел, точка {x, y}) описана в
contracts/schema/node_call.json (Draft 2020-12).

Схема проверяет только форму. Типы конкретных портов и значения
проверяет FunctionLibrary при вызове.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match


# Каталог схем по умолчанию: <repo>/contracts/schema
_DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Каталог схем payload'ов.

    По умолчанию читает contracts/schema/ репозитория. Библиотеки с
    собственными контрактами передают свой schema_dir. Схема читается
    с диска один раз и проверяется на соответствие Draft 2020-12 до
    первого использования.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir else _DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена схем каталога (без .json), по алфавиту."""
        return sorted(p.stem for p in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени ('node_call' → node_call.json).

        Raises:
            FileNotFoundError: Нет такого файла в каталоге
            ValueError: Файл не является корректной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка payload'а против одной схемы каталога.

    validate() поднимает одну ошибку, выбранную jsonschema best_match
    (самую глубокую и конкретную из найденных); error_messages() отдаёт
    все нарушения с путём внутри payload.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: payload не соответствует схеме
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Any) -> list[str]:
        """
        Все нарушения в виде "путь: сообщение", например "args/0: ...".

        Пустой список для валидного payload. Ошибки на корне payload
        имеют путь "$".
        """
        messages = []
        errors = sorted(self.validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        for error in errors:
            path = "/".join(str(p) for p in error.path) or "$"
            messages.append(f"{path}: {error.message}")
        return messages


class NodeCallValidator(ContractValidator):
    """Контракт node_call: {library?, function, args}."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("node_call", loader=loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_node_call(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: payload не соответствует node_call.json
    """
    NodeCallValidator().validate(data)
