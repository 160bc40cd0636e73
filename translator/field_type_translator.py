"""
Field Type Translator — maps a single column type from a source dialect to a
target dialect.

Source-specific override rules run first (booleans, serials, JSONB, time zone
aware timestamps, ENUM/SET); anything they do not cover falls back to the
target's type map. Unknown types are passed through uppercased, so the
function is total for every valid target.
"""

import logging
import re
from typing import Optional, Tuple

from dialects import DIALECT_ALIASES, MYSQL, POSTGRESQL, SQLITE, SQLSERVER, get_dialect_profile
from type_mappings import lookup_type

logger = logging.getLogger(__name__)

BASE_TYPE_PATTERN = re.compile(r"^([a-z_][a-z0-9_ ]*?)\s*(\(.*\))?$")
ZONED_TYPE_PATTERN = re.compile(r"^(timestamp|time)\s*(\([^)]*\))\s+(with|without) time zone$")

CHARACTER_KEYWORDS = ("VARCHAR", "CHARACTER VARYING", "CHAR", "CHARACTER")
PRECISION_KEYWORDS = ("DECIMAL", "NUMERIC", "BINARY", "VARBINARY")
DEFAULT_PRECISION_PATTERN = re.compile(r"^(DECIMAL|NUMERIC)\(\d+,\d+\)$")


def split_type(type_name: str) -> Tuple[str, str]:
    """
    Split a normalized type into base type and parameter text.

    >>> split_type("varchar(255)")
    ('varchar', '(255)')
    >>> split_type("timestamp(3) with time zone")
    ('timestamp with time zone', '(3)')
    """
    zoned = ZONED_TYPE_PATTERN.match(type_name)
    if zoned:
        return f"{zoned.group(1)} {zoned.group(3)} time zone", zoned.group(2)

    match = BASE_TYPE_PATTERN.match(type_name)
    if not match:
        return type_name, ""
    return match.group(1).strip(), (match.group(2) or "").replace(" ", "")


def _source_override(base_type: str, params: str, type_name: str, source: str, target: str) -> Optional[str]:
    """Rules that encode cross-dialect semantics no plain table lookup can express."""
    if source == MYSQL:
        if base_type in ("enum", "set"):
            return "TEXT"
        if base_type == "tinyint" and params == "(1)":
            if target == POSTGRESQL:
                return "BOOLEAN"
            if target == SQLITE:
                return "INTEGER"

    elif source == POSTGRESQL:
        if base_type in ("serial", "bigserial"):
            if target == MYSQL:
                return "BIGINT" if base_type == "bigserial" else "INT"
            if target == SQLITE:
                return "INTEGER"
        if base_type in ("boolean", "bool"):
            if target == MYSQL:
                return "TINYINT(1)"
            if target == SQLITE:
                return "INTEGER"
        if base_type == "jsonb":
            if target == MYSQL:
                return "JSON"
            if target == SQLITE:
                return "TEXT"
        if base_type.startswith("timestamp"):
            if "with time zone" in type_name or base_type == "timestamptz":
                if target == MYSQL:
                    return "TIMESTAMP"
                if target == SQLITE:
                    return "DATETIME"
            elif "without time zone" in type_name:
                if target in (MYSQL, SQLITE):
                    return "DATETIME"

    elif source == SQLITE:
        if base_type == "datetime":
            if target == MYSQL:
                return "DATETIME"
            if target == POSTGRESQL:
                return "TIMESTAMP WITHOUT TIME ZONE"

    elif source == SQLSERVER:
        if base_type == "bit":
            return get_dialect_profile(target).boolean_type
        if params == "(max)":
            if base_type in ("varchar", "nvarchar"):
                return {MYSQL: "LONGTEXT", POSTGRESQL: "TEXT", SQLITE: "TEXT"}.get(target)
            if base_type == "varbinary":
                return {MYSQL: "LONGBLOB", POSTGRESQL: "BYTEA", SQLITE: "BLOB"}.get(target)

    return None


def _reappend_params(translated: str, params: str) -> str:
    """Carry length / precision through the generic mapping when the target keyword has none."""
    if not params:
        return translated
    upper = translated.upper()
    if "(" in translated:
        # DECIMAL(18,2) style defaults yield to an explicit source precision
        if DEFAULT_PRECISION_PATTERN.match(upper) and re.match(r"^\(\d+(,\d+)?\)$", params):
            return translated.split("(")[0] + params
        return translated
    if any(keyword in upper for keyword in CHARACTER_KEYWORDS):
        return translated + params
    if upper in PRECISION_KEYWORDS and re.match(r"^\(\d+(,\d+)?\)$", params):
        return translated + params
    return translated


def translate_field_type(type_name: str, source_dialect: str, target_dialect: str) -> str:
    """
    Translate a column type such as ``VARCHAR(255)`` or ``timestamp with time zone``.

    Raises UnsupportedDialectError for an unknown *target*; an unknown source
    only disables the source-specific override rules.
    """
    target_profile = get_dialect_profile(target_dialect)
    target = target_profile.name
    source = DIALECT_ALIASES.get(str(source_dialect or "").lower().strip())
    if source is None:
        logger.debug(f"Unknown source dialect '{source_dialect}', using generic mapping only")

    normalized = re.sub(r"\s+", " ", str(type_name).lower()).strip()
    base_type, params = split_type(normalized)

    if source is not None:
        override = _source_override(base_type, params, normalized, source, target)
        if override is not None:
            return override

    translated = lookup_type(target_profile.type_map, base_type, params)
    if translated is not None:
        if lookup_type(target_profile.type_map, base_type + params) == translated and params:
            # parameterized key matched exactly, e.g. tinyint(1)
            return translated
        return _reappend_params(translated, params)

    return normalized.upper()
