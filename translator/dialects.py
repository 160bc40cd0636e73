"""
Dialect profiles — one read-only capability object per supported database
(quoting style, type map, auto-increment syntax, boolean literals, trailing
table options) plus alias normalization and identifier quoting.

The translation pipeline is driven by a (source, target) pair of these
profiles, so adding a dialect means adding one profile class.
"""

import logging
from typing import Dict, Mapping

from translation_errors import UnsupportedDialectError
from type_mappings import DB_TO_MYSQL, DB_TO_POSTGRESQL, DB_TO_SQLITE, DB_TO_SQLSERVER

logger = logging.getLogger(__name__)

MYSQL = "mysql"
POSTGRESQL = "postgresql"
SQLITE = "sqlite"
SQLSERVER = "sqlserver"

DIALECT_ALIASES: Dict[str, str] = {
    "mysql": MYSQL,
    "mariadb": MYSQL,
    "postgresql": POSTGRESQL,
    "postgres": POSTGRESQL,
    "pgsql": POSTGRESQL,
    "sqlite": SQLITE,
    "sqlite3": SQLITE,
    "sqlserver": SQLSERVER,
    "mssql": SQLSERVER,
    "sqlsrv": SQLSERVER,
}

QUOTE_CHARACTERS = "`\"[]"


def normalize_dialect(dialect: str) -> str:
    """Return the canonical dialect name for any accepted alias."""
    key = str(dialect or "").lower().strip()
    canonical = DIALECT_ALIASES.get(key)
    if canonical is None:
        raise UnsupportedDialectError(dialect, DIALECT_ALIASES.keys())
    return canonical


# ═══════════════════════════════════════════════════════════════════════
#  Base profile
# ═══════════════════════════════════════════════════════════════════════

class DialectProfile:
    """Capabilities and rendering conventions of one SQL dialect."""

    name: str = "generic"
    quote_open: str = '"'
    quote_close: str = '"'
    type_map: Mapping[str, str] = {}

    # modifier: AUTO_INCREMENT, serial: SERIAL types, rowid: INTEGER PRIMARY KEY AUTOINCREMENT,
    # identity: IDENTITY(1,1)
    auto_increment_syntax: str = "modifier"
    true_literal: str = "TRUE"
    false_literal: str = "FALSE"
    boolean_type: str = "BOOLEAN"
    table_options: str = ""
    supports_if_not_exists: bool = True
    supports_inline_index: bool = False
    supports_column_comment: bool = False
    supports_on_update: bool = False
    supports_casts: bool = False
    named_unique: bool = True
    enum_type: str = "TEXT"
    array_type: str = "TEXT"

    def quote(self, identifier: str) -> str:
        """Strip any existing quoting from ``identifier`` and wrap it in this dialect's style."""
        name = str(identifier).strip().strip(QUOTE_CHARACTERS)
        if self.quote_close == "]":
            name = name.replace("]", "]]")
        else:
            name = name.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{name}{self.quote_close}"

    def quote_qualified(self, *parts: str) -> str:
        return ".".join(self.quote(part) for part in parts if part)

    def render_boolean(self, value: bool) -> str:
        return self.true_literal if value else self.false_literal

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


# ═══════════════════════════════════════════════════════════════════════
#  Concrete dialects
# ═══════════════════════════════════════════════════════════════════════

class MySqlDialect(DialectProfile):
    name = MYSQL
    quote_open = "`"
    quote_close = "`"
    type_map = DB_TO_MYSQL
    auto_increment_syntax = "modifier"
    # quoted form keeps TINYINT(1) defaults portable across MySQL versions
    true_literal = "'1'"
    false_literal = "'0'"
    boolean_type = "TINYINT(1)"
    table_options = "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"
    supports_inline_index = True
    supports_column_comment = True
    supports_on_update = True
    enum_type = "TEXT"
    array_type = "JSON"


class PostgreSqlDialect(DialectProfile):
    name = POSTGRESQL
    type_map = DB_TO_POSTGRESQL
    auto_increment_syntax = "serial"
    supports_casts = True
    array_type = "JSONB"


class SqliteDialect(DialectProfile):
    name = SQLITE
    type_map = DB_TO_SQLITE
    auto_increment_syntax = "rowid"
    true_literal = "1"
    false_literal = "0"
    boolean_type = "INTEGER"
    named_unique = False


class SqlServerDialect(DialectProfile):
    name = SQLSERVER
    quote_open = "["
    quote_close = "]"
    type_map = DB_TO_SQLSERVER
    auto_increment_syntax = "identity"
    true_literal = "1"
    false_literal = "0"
    boolean_type = "BIT"
    supports_if_not_exists = False
    supports_inline_index = True
    enum_type = "NVARCHAR(255)"
    array_type = "NVARCHAR(MAX)"


DIALECT_REGISTRY: Dict[str, DialectProfile] = {
    MYSQL: MySqlDialect(),
    POSTGRESQL: PostgreSqlDialect(),
    SQLITE: SqliteDialect(),
    SQLSERVER: SqlServerDialect(),
}


def get_dialect_profile(dialect: str) -> DialectProfile:
    """Factory: return the profile for a dialect name or alias."""
    if isinstance(dialect, DialectProfile):
        return dialect
    return DIALECT_REGISTRY[normalize_dialect(dialect)]


def quote_identifier(identifier: str, dialect: str) -> str:
    """
    Normalize and quote a table or column name for ``dialect``.

    Existing backticks, double quotes and brackets are removed first, so the
    function can be applied to names coming from any source dialect.
    """
    return get_dialect_profile(dialect).quote(identifier)
