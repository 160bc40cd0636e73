"""
CREATE TABLE Dialect Translator
Converts CREATE TABLE statements between MySQL, PostgreSQL, SQLite and
SQL Server.

One pipeline, parameterized by a (source, target) pair of dialect profiles,
handles every pair that touches MySQL. The remaining pairs are chained through
MySQL (source → mysql → target).

Usage:
    python create_table_translator.py --source mysql --target postgresql --input schema.sql --output schema_pg.sql
    python create_table_translator.py -s postgresql -t sqlite --inline "CREATE TABLE t (id SERIAL PRIMARY KEY)"
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import click

from ddl_parser import (
    IDENT, OP, STRING, ColumnClause, ConstraintClause, ParsedStatement, ReferenceClause, Token,
    is_identifier, parse_create_table, render_tokens, split_statements, string_literal_value,
    unquote_identifier,
)
from dialects import (
    DIALECT_ALIASES, MYSQL, POSTGRESQL, SQLITE, SQLSERVER, DialectProfile,
    get_dialect_profile, normalize_dialect,
)
from field_type_translator import translate_field_type
from sql_normalizer import fix_lines, sanitize_quoted_keywords, strip_table_options, trim_column_type
from translation_errors import DatabaseConversionError, UnsupportedTranslationPairError
from translator_config import TranslatorConfig, load_config

logger = logging.getLogger(__name__)

SERIAL_TYPES = ("serial", "bigserial", "smallserial")
BIG_INTEGER_TYPES = ("bigint", "int8", "bigserial")
MYSQL_INTEGER_TYPES = ("TINYINT", "SMALLINT", "MEDIUMINT", "INT", "INTEGER", "BIGINT")

# Unsigned MySQL integers need the next wider signed type elsewhere
UNSIGNED_WIDENING = {
    "tinyint": "smallint",
    "smallint": "integer",
    "mediumint": "integer",
    "int": "bigint",
    "integer": "bigint",
    "bigint": "numeric(20)",
}

TRUE_DEFAULTS = ("1", "TRUE", "T", "Y", "YES", "ON", "B'1'")
FALSE_DEFAULTS = ("0", "FALSE", "F", "N", "NO", "OFF", "B'0'")

CURRENT_TIMESTAMP_PATTERN = re.compile(
    r"^(NOW\(\)|GETDATE\(\)|GETUTCDATE\(\)|SYSDATETIME\(\)|LOCALTIMESTAMP|"
    r"CURRENT_TIMESTAMP(\(\d*\))?|DATETIME\('NOW'(,'LOCALTIME')?\))$",
    re.IGNORECASE,
)

# Words that may continue a PostgreSQL ``::type`` cast after its first word
CAST_CONTINUATION_WORDS = ("VARYING", "PRECISION", "WITH", "WITHOUT", "TIME", "ZONE")

DEFAULT_SCHEMAS = ("public", "dbo", "main")

SQLSERVER_MAX_LENGTHS = {"NVARCHAR": 4000, "VARCHAR": 8000, "VARBINARY": 8000}


# ═══════════════════════════════════════════════════════════════════════
#  Primary key model
# ═══════════════════════════════════════════════════════════════════════

@dataclass
class PrimaryKeyModel:
    """
    Where the primary key of the output table is declared: a table-level
    ``PRIMARY KEY (...)`` clause or a single column's inline ``PRIMARY KEY``.
    Exactly one of the two is rendered.
    """
    table_columns: List[str] = field(default_factory=list)
    constraint_name: Optional[str] = None
    inline_column: Optional[str] = None

    @classmethod
    def from_statement(cls, statement: ParsedStatement) -> "PrimaryKeyModel":
        model = cls()
        for constraint in statement.constraints:
            if constraint.kind != "PRIMARY KEY":
                continue
            if model.table_columns:
                logger.warning(f"Table {statement.table_name}: extra PRIMARY KEY ({', '.join(constraint.columns)}) ignored")
                continue
            model.table_columns = list(constraint.columns)
            model.constraint_name = constraint.name

        inline = [column.name for column in statement.columns if column.primary_key]
        if len(inline) > 1:
            logger.warning(f"Table {statement.table_name}: {len(inline)} inline PRIMARY KEY columns, keeping {inline[0]}")
        if inline:
            if not model.table_columns:
                model.inline_column = inline[0]
            elif _same_names(model.table_columns, [inline[0]]):
                model.table_columns = []
                model.constraint_name = None
                model.inline_column = inline[0]
        return model

    @property
    def has_primary_key(self) -> bool:
        return bool(self.table_columns or self.inline_column)

    def is_inline(self, name: str) -> bool:
        return self.inline_column is not None and self.inline_column.lower() == name.lower()

    def covers(self, name: str) -> bool:
        return self.is_inline(name) or name.lower() in [column.lower() for column in self.table_columns]

    def move_inline(self, name: str) -> bool:
        """Turn a single-column table-level key on ``name`` into an inline one."""
        if not _same_names(self.table_columns, [name]):
            return False
        self.table_columns = []
        self.constraint_name = None
        self.inline_column = name
        return True

    def promote(self, name: str) -> bool:
        """Make ``name`` the primary key when the table has none."""
        if self.has_primary_key:
            return False
        self.inline_column = name
        return True


def _same_names(left: List[str], right: List[str]) -> bool:
    return [name.lower() for name in left] == [name.lower() for name in right]


# ═══════════════════════════════════════════════════════════════════════
#  Translation pipeline
# ═══════════════════════════════════════════════════════════════════════

class CreateTableTranslator:
    """Translate one CREATE TABLE statement from ``source_dialect`` to ``target_dialect``."""

    def __init__(self, source_dialect: str, target_dialect: str, config: Optional[TranslatorConfig] = None):
        self.source: DialectProfile = get_dialect_profile(source_dialect)
        self.target: DialectProfile = get_dialect_profile(target_dialect)
        self.config = config or TranslatorConfig()
        self.applied_rewrites: List[str] = []

    @property
    def label(self) -> str:
        return f"{self.source.name}→{self.target.name}"

    def translate(self, sql: str) -> str:
        """Translate a single CREATE TABLE statement. Raises MalformedStatementError on bad input."""
        self.applied_rewrites = []
        statement = parse_create_table(sql)
        self._check_table_options(statement)

        pk = PrimaryKeyModel.from_statement(statement)
        auto_column = self._place_auto_increment(statement, pk)

        clauses = [self._render_column(column, pk, auto_column) for column in statement.columns]
        pk_rendered = False
        for constraint in statement.constraints:
            if constraint.kind == "PRIMARY KEY":
                if pk.table_columns and not pk_rendered:
                    clauses.append(self._render_primary_key(pk))
                    pk_rendered = True
                continue
            rendered = self._render_constraint(constraint, statement)
            if rendered:
                clauses.append(rendered)
        if pk.table_columns and not pk_rendered:
            clauses.append(self._render_primary_key(pk))

        result = self._assemble(statement, clauses)
        if self.applied_rewrites:
            logger.info(
                f"[{self.label}] Applied {len(self.applied_rewrites)} rewrites: {', '.join(self.applied_rewrites)}"
            )
        return result

    def _record(self, description: str) -> None:
        if description not in self.applied_rewrites:
            self.applied_rewrites.append(description)

    # ── statement level ───────────────────────────────────────────────

    def _check_table_options(self, statement: ParsedStatement) -> None:
        if not statement.table_options:
            return
        leftover = strip_table_options(statement.table_options)
        if leftover:
            logger.warning(f"Table {statement.table_name}: dropped unsupported table options '{leftover}'")
        self._record("source table options removed")

    def _table_name(self, statement: ParsedStatement) -> str:
        schema = statement.schema
        if schema and schema.lower() in DEFAULT_SCHEMAS:
            schema = None
        name = statement.table_name
        if statement.temporary and self.target.name == SQLSERVER:
            name = name if name.startswith("#") else f"#{name}"
            self._record("TEMPORARY → #table")
        return self.target.quote_qualified(schema, name)

    def _assemble(self, statement: ParsedStatement, clauses: List[str]) -> str:
        head = "CREATE "
        if statement.temporary and self.target.name != SQLSERVER:
            head += "TEMPORARY "
        head += "TABLE "
        if statement.if_not_exists:
            if self.target.supports_if_not_exists:
                head += "IF NOT EXISTS "
            else:
                self._record("IF NOT EXISTS removed")
        head += self._table_name(statement)

        indent = self.config.indent
        sql = head + " (\n" + ",\n".join(indent + clause for clause in clauses) + "\n)"
        options = self.config.mysql_table_options if self.target.name == MYSQL else self.target.table_options
        if options:
            sql += " " + options
        sql += ";"
        return trim_column_type(fix_lines(sql))

    # ── auto increment ────────────────────────────────────────────────

    def _is_auto_increment(self, column: ColumnClause) -> bool:
        if column.auto_increment or column.base_type in SERIAL_TYPES:
            return True
        return bool(column.default) and any(token.is_word("NEXTVAL") for token in column.default)

    def _place_auto_increment(self, statement: ParsedStatement, pk: PrimaryKeyModel) -> Optional[ColumnClause]:
        """
        Pick the column that keeps auto-increment semantics and make sure the
        primary key can carry it in the target dialect.
        """
        candidates = [column for column in statement.columns if self._is_auto_increment(column)]
        if not candidates:
            return None
        auto_column = candidates[0]
        for column in candidates[1:]:
            logger.warning(f"Column {column.name}: only one auto-increment column per table, dropping it")
            self._record("extra auto-increment stripped")

        syntax = self.target.auto_increment_syntax
        if syntax == "rowid":
            if pk.is_inline(auto_column.name) or pk.move_inline(auto_column.name) or pk.promote(auto_column.name):
                return auto_column
            logger.warning(
                f"Column {auto_column.name}: SQLite AUTOINCREMENT needs a single-column INTEGER PRIMARY KEY, "
                f"dropping AUTOINCREMENT"
            )
            self._record("AUTOINCREMENT stripped")
            return None

        if syntax == "serial" and pk.move_inline(auto_column.name):
            self._record("PRIMARY KEY moved onto SERIAL column")
            return auto_column
        if syntax in ("modifier", "serial") and pk.promote(auto_column.name):
            self._record("auto-increment column made PRIMARY KEY")
        return auto_column

    def _auto_increment_type(self, column: ColumnClause) -> str:
        base = column.base_type
        big = base in BIG_INTEGER_TYPES or (column.unsigned and base in ("int", "integer", "mediumint"))
        syntax = self.target.auto_increment_syntax
        if syntax == "serial":
            self._record("auto-increment → SERIAL")
            if base == "smallserial":
                return "SMALLSERIAL"
            return "BIGSERIAL" if big else "SERIAL"
        if syntax == "rowid":
            self._record("auto-increment → INTEGER PRIMARY KEY AUTOINCREMENT")
            return "INTEGER"
        if syntax == "identity":
            self._record("auto-increment → IDENTITY(1,1)")
            return "BIGINT" if big else "INT"

        self._record("auto-increment → AUTO_INCREMENT")
        translated = translate_field_type(column.type_name, self.source.name, self.target.name)
        if translated.upper().split("(")[0] not in MYSQL_INTEGER_TYPES:
            translated = "BIGINT" if big else "INT"
        return translated + (" UNSIGNED" if column.unsigned else "")

    def _auto_increment_parts(self, column: ColumnClause, inline_pk: bool) -> List[str]:
        syntax = self.target.auto_increment_syntax
        if syntax == "rowid":
            return ["PRIMARY KEY", "AUTOINCREMENT"]
        if syntax == "serial":
            if inline_pk:
                return ["PRIMARY KEY"]
            return ["NOT NULL"] if column.not_null else []
        if syntax == "identity":
            return ["IDENTITY(1,1)", "NOT NULL"] + (["PRIMARY KEY"] if inline_pk else [])
        return ["NOT NULL", "AUTO_INCREMENT"] + (["PRIMARY KEY"] if inline_pk else [])

    # ── column types ──────────────────────────────────────────────────

    def _is_boolean_column(self, column: ColumnClause) -> bool:
        params = column.type_params.replace(" ", "")
        if column.base_type in ("boolean", "bool"):
            return True
        if column.base_type == "tinyint" and params == "(1)":
            return True
        return column.base_type == "bit" and params in ("", "(1)")

    def _column_type(self, column: ColumnClause) -> str:
        base = column.base_type
        if not base:
            return translate_field_type("text", self.source.name, self.target.name)
        if column.is_array:
            self._record("array → " + self.target.array_type)
            return self.target.array_type
        if base in ("enum", "set"):
            self._record("ENUM → TEXT")
            if self.target.name == SQLSERVER:
                return self.config.sqlserver_enum_type
            return self.target.enum_type

        type_name = column.type_name
        if base in SERIAL_TYPES:
            type_name = {"bigserial": "bigint", "smallserial": "smallint"}.get(base, "integer")
        if column.unsigned and self.target.name != MYSQL and base in UNSIGNED_WIDENING \
                and not self._is_boolean_column(column):
            type_name = UNSIGNED_WIDENING[base]
            self._record("UNSIGNED widened")

        translated = translate_field_type(type_name, self.source.name, self.target.name)

        if column.unsigned and self.target.name == MYSQL:
            translated += " UNSIGNED"
        if self.target.name == SQLSERVER:
            translated = self._sqlserver_length(translated)
        if self.target.name in (MYSQL, SQLSERVER) and translated.upper() in ("VARCHAR", "NVARCHAR"):
            translated += "(255)"
            self._record("VARCHAR length added")
        return translated

    def _sqlserver_length(self, translated: str) -> str:
        match = re.match(r"^(N?VARCHAR|VARBINARY)\((\d+)\)$", translated, re.IGNORECASE)
        if match and int(match.group(2)) > SQLSERVER_MAX_LENGTHS[match.group(1).upper()]:
            self._record(f"{match.group(1).upper()}(MAX)")
            return f"{match.group(1)}(MAX)"
        return translated

    # ── expressions ───────────────────────────────────────────────────

    def _render_token(self, token: Token) -> str:
        if token.kind == IDENT:
            if self.source.name == MYSQL and token.value.startswith('"'):
                # MySQL reads double quotes as a string literal
                return "'" + unquote_identifier(token.value).replace("'", "''") + "'"
            return self.target.quote(unquote_identifier(token.value))
        if token.kind == STRING and token.value[:1] in ("N", "n") and self.target.name != SQLSERVER:
            return token.value[1:]
        return token.value

    def _strip_casts(self, tokens: List[Token]) -> List[Token]:
        """Remove PostgreSQL ``::type`` casts."""
        result = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.kind != OP or token.value != "::":
                result.append(token)
                index += 1
                continue
            index += 1
            if index < len(tokens) and is_identifier(tokens[index]):
                index += 1
                while index < len(tokens) and tokens[index].is_word(*CAST_CONTINUATION_WORDS):
                    index += 1
            if index < len(tokens) and tokens[index].is_punct("("):
                depth = 0
                while index < len(tokens):
                    if tokens[index].is_punct("("):
                        depth += 1
                    elif tokens[index].is_punct(")"):
                        depth -= 1
                    index += 1
                    if depth == 0:
                        break
            if index < len(tokens) and tokens[index].kind == IDENT and tokens[index].value == "[]":
                index += 1
        return result

    def _render_expression(self, tokens: List[Token]) -> str:
        if not self.target.supports_casts:
            stripped = self._strip_casts(tokens)
            if len(stripped) != len(tokens):
                self._record("::casts removed")
            tokens = stripped
        return render_tokens(tokens, self._render_token)

    @staticmethod
    def _unwrap(tokens: List[Token]) -> List[Token]:
        """Remove redundant parentheses around a literal or function call, e.g. SQL Server ``((0))``."""
        while len(tokens) >= 3 and tokens[0].is_punct("(") and tokens[-1].is_punct(")"):
            depth = 0
            for index, token in enumerate(tokens):
                if token.is_punct("("):
                    depth += 1
                elif token.is_punct(")"):
                    depth -= 1
                if depth == 0 and index < len(tokens) - 1:
                    return tokens
            inner = tokens[1:-1]
            simple = len(inner) == 1 or (len(inner) == 2 and inner[0].value in ("-", "+")) or (
                is_identifier(inner[0]) and len(inner) >= 3 and inner[1].is_punct("(") and inner[-1].is_punct(")"))
            if not simple and not inner[0].is_punct("("):
                return tokens
            tokens = inner
        return tokens

    def _boolean_value(self, tokens: List[Token]) -> Optional[bool]:
        tokens = self._strip_casts(tokens)
        if len(tokens) == 1 and tokens[0].kind == STRING:
            text = string_literal_value(tokens[0])
        else:
            text = "".join(token.value for token in tokens)
        text = text.strip().upper()
        if text in TRUE_DEFAULTS:
            return True
        if text in FALSE_DEFAULTS:
            return False
        return None

    def _render_default(self, column: ColumnClause) -> Optional[str]:
        if not column.default:
            return None
        tokens = self._unwrap(column.default)
        if len(tokens) != len(column.default):
            self._record("default parentheses unwrapped")

        if self._is_boolean_column(column):
            value = self._boolean_value(tokens)
            if value is not None:
                self._record("boolean default")
                return self.target.render_boolean(value)

        text = self._render_expression(tokens)
        if CURRENT_TIMESTAMP_PATTERN.match(re.sub(r"\s+", "", text)) and text.upper() != "CURRENT_TIMESTAMP":
            self._record(f"{text} → CURRENT_TIMESTAMP")
            return "CURRENT_TIMESTAMP"
        return text

    # ── columns ───────────────────────────────────────────────────────

    def _render_column(self, column: ColumnClause, pk: PrimaryKeyModel,
                       auto_column: Optional[ColumnClause]) -> str:
        inline_pk = pk.is_inline(column.name)
        parts = [self.target.quote(column.name)]

        if column is auto_column:
            parts.append(self._auto_increment_type(column))
            parts.extend(self._auto_increment_parts(column, inline_pk))
        else:
            parts.append(self._column_type(column))
            default = None
            if column.default and not any(token.is_word("NEXTVAL") for token in column.default):
                default = self._render_default(column)

            if column.not_null or (inline_pk and column.not_null is False):
                if not column.not_null:
                    self._record("PRIMARY KEY NULL → NOT NULL")
                parts.append("NOT NULL")
            elif column.not_null is False or (default is not None and default.upper() == "NULL"):
                parts.append("NULL")
            if default is not None:
                parts.append(f"DEFAULT {default}")
            if inline_pk:
                parts.append("PRIMARY KEY")

        if column.unique and not inline_pk:
            parts.append("UNIQUE")
        if column.check:
            parts.append(f"CHECK ({self._render_expression(column.check)})")
        if column.reference:
            parts.append(self._render_reference(column.reference))
        parts.extend(self._render_mysql_only(column))
        if column.extra:
            parts.append(sanitize_quoted_keywords(self._render_expression(column.extra), self.target.name))
        return " ".join(parts)

    def _render_mysql_only(self, column: ColumnClause) -> List[str]:
        """ON UPDATE and COMMENT survive only when the target is MySQL; collations never cross dialects."""
        parts = []
        if column.on_update:
            if self.target.supports_on_update:
                parts.append(f"ON UPDATE {self._render_expression(column.on_update)}")
            else:
                self._record("ON UPDATE removed")
        if column.comment is not None:
            if self.target.supports_column_comment:
                parts.append("COMMENT '" + column.comment.replace("'", "''") + "'")
            else:
                self._record("COMMENT removed")
        if column.collation:
            self._record("COLLATE removed")
        return parts

    # ── constraints ───────────────────────────────────────────────────

    def _column_list(self, columns: List[str]) -> str:
        return ", ".join(self.target.quote(column) for column in columns)

    def _constraint_prefix(self, name: Optional[str]) -> str:
        return f"CONSTRAINT {self.target.quote(name)} " if name else ""

    def _render_primary_key(self, pk: PrimaryKeyModel) -> str:
        name = pk.constraint_name if self.target.named_unique and self.target.name != MYSQL else None
        return f"{self._constraint_prefix(name)}PRIMARY KEY ({self._column_list(pk.table_columns)})"

    def _render_reference(self, reference: ReferenceClause) -> str:
        schema = reference.schema if reference.schema and reference.schema.lower() not in DEFAULT_SCHEMAS else None
        text = f"REFERENCES {self.target.quote_qualified(schema, reference.table)}"
        if reference.columns:
            text += f" ({self._column_list(reference.columns)})"
        for event, action in reference.actions:
            if action == "RESTRICT" and self.target.name == SQLSERVER:
                action = "NO ACTION"
                self._record("RESTRICT → NO ACTION")
            text += f" ON {event} {action}"
        return text

    def _render_constraint(self, constraint: ConstraintClause, statement: ParsedStatement) -> Optional[str]:
        columns = self._column_list(constraint.columns)

        if constraint.kind == "UNIQUE":
            if self.target.name == MYSQL:
                name = f" {self.target.quote(constraint.name)}" if constraint.name else ""
                return f"UNIQUE KEY{name} ({columns})"
            if self.target.named_unique and constraint.name:
                return f"CONSTRAINT {self.target.quote(constraint.name)} UNIQUE ({columns})"
            return f"UNIQUE ({columns})"

        if constraint.kind == "FOREIGN KEY":
            return (f"{self._constraint_prefix(constraint.name)}FOREIGN KEY ({columns}) "
                    f"{self._render_reference(constraint.reference)}")

        if constraint.kind == "CHECK":
            return f"{self._constraint_prefix(constraint.name)}CHECK ({self._render_expression(constraint.check)})"

        return self._render_index(constraint, statement)

    def _render_index(self, constraint: ConstraintClause, statement: ParsedStatement) -> Optional[str]:
        label = constraint.name or ", ".join(constraint.columns)
        if not self.target.supports_inline_index or (self.target.name == SQLSERVER and constraint.index_type):
            kind = f"inline {constraint.index_type} index" if constraint.index_type else "inline index"
            logger.warning(f"Table {statement.table_name}: index {label} dropped, {self.target.name} has no {kind} syntax")
            self._record("inline index dropped")
            return None

        columns = self._column_list(constraint.columns)
        if self.target.name == SQLSERVER:
            name = constraint.name or f"ix_{statement.table_name}_{'_'.join(constraint.columns)}"
            return f"INDEX {self.target.quote(name)} ({columns})"

        prefix = f"{constraint.index_type} " if constraint.index_type else ""
        name = f" {self.target.quote(constraint.name)}" if constraint.name else ""
        return f"{prefix}KEY{name} ({columns})"


# ═══════════════════════════════════════════════════════════════════════
#  Per-pair translators & registry
# ═══════════════════════════════════════════════════════════════════════

def _direct(source: str, target: str, sql: str, config: Optional[TranslatorConfig]) -> str:
    return CreateTableTranslator(source, target, config).translate(sql)


def _through_mysql(source: str, target: str, sql: str, config: Optional[TranslatorConfig]) -> str:
    logger.debug(f"Translating {source}→{target} through mysql")
    intermediate = CreateTableTranslator(source, MYSQL, config).translate(sql)
    return CreateTableTranslator(MYSQL, target, config).translate(intermediate)


def mysql_to_postgresql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(MYSQL, POSTGRESQL, sql, config)


def postgresql_to_mysql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(POSTGRESQL, MYSQL, sql, config)


def mysql_to_sqlite(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(MYSQL, SQLITE, sql, config)


def sqlite_to_mysql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(SQLITE, MYSQL, sql, config)


def mysql_to_sqlserver(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(MYSQL, SQLSERVER, sql, config)


def sqlserver_to_mysql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _direct(SQLSERVER, MYSQL, sql, config)


def postgresql_to_sqlite(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(POSTGRESQL, SQLITE, sql, config)


def sqlite_to_postgresql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(SQLITE, POSTGRESQL, sql, config)


def postgresql_to_sqlserver(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(POSTGRESQL, SQLSERVER, sql, config)


def sqlite_to_sqlserver(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(SQLITE, SQLSERVER, sql, config)


def sqlserver_to_postgresql(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(SQLSERVER, POSTGRESQL, sql, config)


def sqlserver_to_sqlite(sql: str, config: Optional[TranslatorConfig] = None) -> str:
    return _through_mysql(SQLSERVER, SQLITE, sql, config)


TRANSLATION_PAIRS: Dict[Tuple[str, str], Callable[..., str]] = {
    (MYSQL, POSTGRESQL): mysql_to_postgresql,
    (POSTGRESQL, MYSQL): postgresql_to_mysql,
    (MYSQL, SQLITE): mysql_to_sqlite,
    (SQLITE, MYSQL): sqlite_to_mysql,
    (MYSQL, SQLSERVER): mysql_to_sqlserver,
    (SQLSERVER, MYSQL): sqlserver_to_mysql,
    (POSTGRESQL, SQLITE): postgresql_to_sqlite,
    (SQLITE, POSTGRESQL): sqlite_to_postgresql,
    (POSTGRESQL, SQLSERVER): postgresql_to_sqlserver,
    (SQLITE, SQLSERVER): sqlite_to_sqlserver,
    (SQLSERVER, POSTGRESQL): sqlserver_to_postgresql,
    (SQLSERVER, SQLITE): sqlserver_to_sqlite,
}


def get_pair_translator(source_dialect: str, target_dialect: str) -> Callable[..., str]:
    """Factory: return the registered translator function for a dialect pair."""
    source = normalize_dialect(source_dialect)
    target = normalize_dialect(target_dialect)
    translator = TRANSLATION_PAIRS.get((source, target))
    if translator is None:
        raise UnsupportedTranslationPairError(source, target)
    return translator


def translate_create_table(sql: str, source_dialect: str, target_dialect: str,
                           config: Optional[TranslatorConfig] = None) -> str:
    """
    Translate a CREATE TABLE statement between two dialects (aliases accepted).

    Returns ``sql`` unchanged when both dialects normalize to the same name.
    """
    if normalize_dialect(source_dialect) == normalize_dialect(target_dialect):
        return sql
    return get_pair_translator(source_dialect, target_dialect)(sql, config)


CREATE_TABLE_PATTERN = re.compile(r"^\s*CREATE\s+(?:TEMP(?:ORARY)?\s+)?TABLE\b", re.IGNORECASE)


def translate_sql_script(sql_text: str, source_dialect: str, target_dialect: str,
                         config: Optional[TranslatorConfig] = None, skip_errors: bool = False) -> List[str]:
    """
    Translate every CREATE TABLE statement in a script.

    Other statements are skipped with a warning. With ``skip_errors`` a
    statement that fails to translate is logged and skipped instead of raising.
    """
    translated = []
    for statement in split_statements(sql_text):
        if not CREATE_TABLE_PATTERN.match(statement):
            logger.warning(f"Skipping non-CREATE TABLE statement: {statement[:60]}")
            continue
        try:
            translated.append(translate_create_table(statement, source_dialect, target_dialect, config))
        except DatabaseConversionError as e:
            if not skip_errors:
                raise
            logger.error(f"Failed to translate statement: {e}")
    return translated


def translate_file(input_path: str, output_path: str, source_dialect: str, target_dialect: str,
                   config: Optional[TranslatorConfig] = None) -> int:
    """Translate all CREATE TABLE statements in a file. Returns the number written."""
    with open(input_path, "r", encoding="utf-8") as f:
        source_sql = f.read()

    statements = translate_sql_script(source_sql, source_dialect, target_dialect, config, skip_errors=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(f"-- Auto-translated from {normalize_dialect(source_dialect).upper()} "
                f"to {normalize_dialect(target_dialect).upper()}\n")
        f.write("-- Review carefully before executing\n\n")
        f.write("\n\n".join(statements))
        if statements:
            f.write("\n")

    logger.info(f"Translated {len(statements)} statements → {output_path}")
    return len(statements)


DIALECT_CHOICES = sorted(DIALECT_ALIASES.keys())


@click.command()
@click.option("--source", "-s", default="mysql",
              type=click.Choice(DIALECT_CHOICES, case_sensitive=False),
              help="Source SQL dialect (default: mysql)")
@click.option("--target", "-t", default="postgresql",
              type=click.Choice(DIALECT_CHOICES, case_sensitive=False),
              help="Target SQL dialect (default: postgresql)")
@click.option("--input", "-i", "input_path", help="Path to source SQL file")
@click.option("--output", "-o", "output_path", help="Path to output SQL file")
@click.option("--inline", help="Translate a single inline CREATE TABLE statement")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="JSON config file")
@click.option("--env", "environment", default="dev", help="Config environment section (default: dev)")
def main(source: str, target: str, input_path: str, output_path: str, inline: str,
         config_path: str, environment: str):
    """Translate CREATE TABLE statements between SQL dialects."""
    config = load_config(environment, config_path)
    logging.basicConfig(level=config.log_level, format="%(asctime)s [%(levelname)s] %(message)s")

    if inline:
        try:
            result = translate_create_table(inline, source, target, config)
        except DatabaseConversionError as e:
            raise click.ClickException(str(e))
        click.echo(result)
    elif input_path and output_path:
        translate_file(input_path, output_path, source, target, config)
    else:
        click.echo("Provide either --input/--output or --inline. Use --help for details.")


if __name__ == "__main__":
    main()
