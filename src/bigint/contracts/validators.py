"""
Integer Contract — JSON Schema контракт сериализованного Int

Двойная проверка входящих данных:
1. JSON Schema (schema/integer.json) — формат, который видят внешние системы
2. IntegerPayload (Pydantic) — модель, из которой строится Int

Обе проверки описывают один и тот же формат. Данные, принятые схемой,
но отвергнутые моделью, означают рассогласование контракта и модели
и сообщаются как InvalidArgument, а не как ошибка данных.

Использование:
    from src.bigint.contracts import dump_integer_payload, validate_integer_payload

    data = dump_integer_payload(Int(-42))   # {"sign": -1, "digits": "42"}
    value = validate_integer_payload(data)  # Int('-42')
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match
from pydantic import ValidationError as PydanticValidationError

from src.bigint.domain.integer import Int, IntLike, as_int
from src.bigint.domain.payload import IntegerPayload
from src.bigint.errors import InvalidArgument
from src.bigint.logging_config import get_logger

logger = get_logger(__name__)

# Каталог схем, поставляется вместе с пакетом
SCHEMA_DIR = Path(__file__).parent / "schema"

INTEGER_SCHEMA_FILE = "integer.json"

# Кэш схем: путь → meta-валидированная схема
_SCHEMA_CACHE: Dict[Path, Dict[str, Any]] = {}


def load_integer_schema(schema_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы integer.json (с кэшем по пути).

    Args:
        schema_dir: Каталог со схемой (default: SCHEMA_DIR)

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является валидной JSON Schema
    """
    path = (schema_dir or SCHEMA_DIR) / INTEGER_SCHEMA_FILE
    if path in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[path]

    if not path.exists():
        raise FileNotFoundError(f"Integer schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path}: {e}") from e

    logger.debug("Loaded integer schema from %s", path)
    _SCHEMA_CACHE[path] = schema
    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class IntegerContract:
    """
    Контракт сериализованного Int: схема + модель.

    Examples:
        >>> contract = IntegerContract()
        >>> contract.parse({"sign": 1, "digits": "7"}).to_int()
        Int('7')
        >>> contract.dump(-5)
        {'sign': -1, 'digits': '5'}
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema = load_integer_schema(schema_dir)
        self._validator = Draft202012Validator(self.schema)

    def is_valid(self, data: Any) -> bool:
        """Данные соответствуют схеме."""
        return self._validator.is_valid(data)

    def parse(self, data: Any) -> IntegerPayload:
        """
        Проверка данных схемой и построение IntegerPayload.

        Args:
            data: Десериализованный JSON

        Returns:
            IntegerPayload

        Raises:
            jsonschema.ValidationError: Данные нарушают схему (наиболее
                релевантная ошибка)
            InvalidArgument: Схема приняла данные, которые модель отвергла
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error

        try:
            return IntegerPayload.model_validate(data)
        except PydanticValidationError as e:
            logger.warning("Schema accepted a payload rejected by IntegerPayload: %r", data)
            raise InvalidArgument(
                f"Integer payload passed the schema but not the model: {data!r}"
            ) from e

    def dump(self, value: IntLike) -> Dict[str, Any]:
        """
        JSON форма Int, проверенная схемой.

        Raises:
            InvalidArgument: Модель выдала форму, которую отвергает схема
        """
        data = IntegerPayload.from_int(as_int(value)).model_dump(mode="json")

        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise InvalidArgument(
                f"IntegerPayload produced data rejected by the schema: {error.message}"
            ) from error

        return data


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_CONTRACT: Optional[IntegerContract] = None


def _default_contract() -> IntegerContract:
    global _DEFAULT_CONTRACT
    if _DEFAULT_CONTRACT is None:
        _DEFAULT_CONTRACT = IntegerContract()
    return _DEFAULT_CONTRACT


def validate_integer_payload(data: Any) -> Int:
    """
    Проверка сериализованного Int и его восстановление.

    Raises:
        jsonschema.ValidationError: Данные нарушают схему
        InvalidArgument: Рассогласование схемы и модели
    """
    return _default_contract().parse(data).to_int()


def dump_integer_payload(value: IntLike) -> Dict[str, Any]:
    """Сериализация Int в проверенную схемой JSON форму."""
    return _default_contract().dump(value)
