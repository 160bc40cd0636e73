"""
Value / Literal Converter — turns row values into native Python values and
SQL literals when data is copied between database engines.

- convert_to_native_type: raw driver value + SQL type → int / float / bool / dict / bytes / str
- convert_native_to_sql_literal: native value + native category → SQL literal text
- convert_value_to_sql_literal: same, starting from an SQL type name
- create_insert: one row dict → ``(v1, v2, ...)`` VALUES tuple for a target dialect
"""

import json
import logging
import re
from typing import Any, Dict, Mapping, Optional

from dialects import POSTGRESQL, SQLITE, SQLSERVER, normalize_dialect
from field_type_translator import split_type
from type_mappings import SQL_TO_NATIVE_TYPE, lookup_type

logger = logging.getLogger(__name__)

TRUE_STRINGS = ("1", "true", "on", "yes")
FALSE_STRINGS = ("0", "false", "off", "no", "")

BINARY_TYPES = (
    "blob", "tinyblob", "mediumblob", "longblob", "binary", "varbinary", "bytea", "image",
)


def escape_sql_string(value: str) -> str:
    """Double single quotes so the text can sit inside an SQL string literal."""
    return str(value).replace("'", "''")


def quote_string(value: Optional[str]) -> str:
    """``None`` → ``NULL``, anything else → ``'escaped text'``."""
    if value is None:
        return "NULL"
    return f"'{escape_sql_string(value)}'"


def parse_boolean(value: Any) -> Optional[bool]:
    """
    Lenient boolean parsing: 1/true/on/yes and 0/false/off/no/"" (any case).
    Anything else yields None.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if value in (0, 1):
            return bool(value)
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    return None


def _native_category(sql_type: str) -> str:
    normalized = re.sub(r"\s+", " ", str(sql_type or "").lower()).strip()
    base_type, params = split_type(normalized)
    if base_type in BINARY_TYPES:
        return "binary"
    return lookup_type(SQL_TO_NATIVE_TYPE, base_type, params) or "string"


def _read_binary(value: Any) -> bytes:
    if hasattr(value, "read"):
        try:
            data = value.read()
        finally:
            close = getattr(value, "close", None)
            if close is not None:
                close()
    else:
        data = value
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def convert_to_native_type(value: Any, sql_type: str, dialect: str) -> Any:
    """
    Convert a raw value read from a database to its Python representation.

    ``tinyint(1)``/``boolean`` columns become True/False (1/0 for SQLite) or
    None when the value is not recognizably boolean; JSON is decoded; binary
    columns become bytes, reading and closing stream-like values.
    """
    if value is None:
        return None

    category = _native_category(sql_type)

    if category == "bool":
        parsed = parse_boolean(value)
        if parsed is None:
            logger.debug(f"Unrecognized boolean value {value!r} for type {sql_type}")
            return None
        if normalize_dialect(dialect) == SQLITE:
            return 1 if parsed else 0
        return parsed

    if category == "int":
        try:
            return int(value)
        except ValueError:
            return int(float(value))

    if category == "float":
        return float(value)

    if category == "array":
        if isinstance(value, (bytes, bytearray)):
            value = value.decode("utf-8")
        return json.loads(value) if isinstance(value, str) else value

    if category == "binary":
        return _read_binary(value)

    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def convert_native_to_sql_literal(value: Any, native_type: str) -> str:
    """
    Render a Python value as an SQL literal according to its native category
    (``int``, ``float``, ``bool``, ``array``, ``string``).
    """
    native_type = str(native_type or "").lower().strip()
    if value is None or native_type == "null":
        return "NULL"

    if native_type in ("int", "integer"):
        return str(int(value))
    if native_type in ("float", "double"):
        return repr(float(value))
    if native_type in ("bool", "boolean"):
        return "1" if value else "0"
    if native_type == "array":
        encoded = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        return quote_string(encoded)
    return quote_string(str(value))


def convert_value_to_sql_literal(value: Any, sql_type: str) -> str:
    """Map ``sql_type`` to its native category (default ``string``) and render ``value`` as a literal."""
    normalized = re.sub(r"\s+", " ", str(sql_type or "").lower()).strip()
    base_type, params = split_type(normalized)
    native_type = lookup_type(SQL_TO_NATIVE_TYPE, base_type, params) or "string"
    return convert_native_to_sql_literal(value, native_type)


def _binary_literal(data: bytes, dialect: str) -> str:
    hex_digits = data.hex()
    if dialect == POSTGRESQL:
        return f"'\\x{hex_digits}'"
    if dialect == SQLSERVER:
        return f"0x{hex_digits}" if hex_digits else "0x"
    return f"X'{hex_digits}'"


def _sql_literal(native: Any, dialect: str) -> str:
    if native is None:
        return "NULL"
    if isinstance(native, bool):
        if dialect == POSTGRESQL:
            return "TRUE" if native else "FALSE"
        return "1" if native else "0"
    if isinstance(native, int):
        return str(native)
    if isinstance(native, float):
        return repr(native)
    if isinstance(native, (bytes, bytearray)):
        return _binary_literal(bytes(native), dialect)
    if isinstance(native, (dict, list)):
        return convert_native_to_sql_literal(native, "array")
    return quote_string(native)


def get_column_type(target_types: Mapping[str, str], column_name: str) -> str:
    """SQL type of ``column_name`` in ``target_types``, ``text`` when unknown."""
    return target_types.get(column_name, "text")


def create_insert(data: Dict[str, Any], target_types: Mapping[str, str], target_dialect: str) -> Optional[str]:
    """
    Build the ``(v1, v2, ...)`` VALUES tuple for one row.

    Returns None for an empty row.
    """
    dialect = normalize_dialect(target_dialect)
    values = []
    for column_name, raw_value in data.items():
        sql_type = get_column_type(target_types, column_name)
        native = convert_to_native_type(raw_value, sql_type, dialect)
        values.append(_sql_literal(native, dialect))
    if not values:
        return None
    return "(" + ", ".join(values) + ")"
