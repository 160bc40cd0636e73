"""
DDL Parser — tokenizer and small recursive-descent parser for CREATE TABLE
statements written in MySQL, PostgreSQL, SQLite or SQL Server syntax.

The parser understands just enough structure to translate a table definition:
the table name, the balanced column/constraint section, one ColumnClause per
column (type, parameters and the options that follow) and one
ConstraintClause per table-level key. Anything it does not recognize inside a
column definition is kept as raw tokens and passed through.

Usage:
    from ddl_parser import parse_create_table
    statement = parse_create_table("CREATE TABLE t (id INT PRIMARY KEY, name VARCHAR(50))")
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

from translation_errors import MalformedStatementError
from type_mappings import SQL_TO_NATIVE_TYPE

logger = logging.getLogger(__name__)

WORD = "WORD"
IDENT = "IDENT"
STRING = "STRING"
NUMBER = "NUMBER"
PUNCT = "PUNCT"
OP = "OP"

TOKEN_PATTERN = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<comment>--[^\n]*|/\*.*?\*/)
    | (?P<string>[Nn]?'(?:[^']|'')*')
    | (?P<ident>`(?:[^`]|``)*`|"(?:[^"]|"")*"|\[(?:[^\]]|\]\])*\])
    | (?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)
    | (?P<word>[A-Za-z_#@][\w$#@]*)
    | (?P<punct>[(),;.])
    | (?P<op>::|<>|<=|>=|!=|\|\||.)
    """,
    re.VERBOSE | re.DOTALL,
)

ARRAY_SUFFIX = re.compile(r"^\[\d*\]$")

# Type names made of several words; checked after the first word of a column type
MULTIWORD_TYPES = {
    "DOUBLE": [("PRECISION",)],
    "CHARACTER": [("VARYING",)],
    "CHAR": [("VARYING",)],
    "BIT": [("VARYING",)],
    "NATIONAL": [("CHARACTER", "VARYING"), ("CHAR", "VARYING"), ("CHARACTER",), ("CHAR",)],
    "TIMESTAMP": [("WITH", "TIME", "ZONE"), ("WITHOUT", "TIME", "ZONE")],
    "TIME": [("WITH", "TIME", "ZONE"), ("WITHOUT", "TIME", "ZONE")],
}

ZONE_SUFFIXES = [("WITH", "TIME", "ZONE"), ("WITHOUT", "TIME", "ZONE")]
TYPE_MODIFIERS = ("UNSIGNED", "SIGNED", "ZEROFILL")

# Words that start a new column option and therefore end a DEFAULT / ON UPDATE expression
OPTION_KEYWORDS = {
    "NOT", "NULL", "DEFAULT", "PRIMARY", "UNIQUE", "CHECK", "REFERENCES",
    "AUTO_INCREMENT", "AUTOINCREMENT", "IDENTITY", "COMMENT", "COLLATE",
    "CHARACTER", "CHARSET", "GENERATED", "CONSTRAINT",
}

REFERENTIAL_ACTIONS = [
    ("CASCADE",), ("RESTRICT",), ("NO", "ACTION"), ("SET", "NULL"), ("SET", "DEFAULT"),
]

INDEX_KEYWORDS = ("KEY", "INDEX")
INDEX_PREFIXES = ("FULLTEXT", "SPATIAL")
INDEX_OPTIONS = ("CLUSTERED", "NONCLUSTERED", "USING", "BTREE", "HASH")

# First words of known type names; a column called `key` is followed by one of these
KNOWN_TYPE_WORDS = frozenset(key.split("(")[0].split()[0] for key in SQL_TO_NATIVE_TYPE)


# ═══════════════════════════════════════════════════════════════════════
#  Tokens
# ═══════════════════════════════════════════════════════════════════════

class Token(NamedTuple):
    kind: str
    value: str
    start: int
    end: int
    space_before: bool = False

    @property
    def upper(self) -> str:
        return self.value.upper()

    def is_word(self, *words: str) -> bool:
        return self.kind == WORD and (not words or self.value.upper() in words)

    def is_punct(self, char: str) -> bool:
        return self.kind == PUNCT and self.value == char


def tokenize(sql: str) -> List[Token]:
    """Split SQL text into tokens. Whitespace and comments are dropped."""
    tokens: List[Token] = []
    space_before = False
    for match in TOKEN_PATTERN.finditer(sql):
        kind = match.lastgroup
        if kind in ("space", "comment"):
            space_before = True
            continue
        tokens.append(Token(kind.upper(), match.group(), match.start(), match.end(), space_before))
        space_before = False
    return tokens


def unquote_identifier(value: str) -> str:
    """Remove backtick, double-quote or bracket quoting and undo doubled quote escapes."""
    if len(value) >= 2:
        if value[0] == "`" and value[-1] == "`":
            return value[1:-1].replace("``", "`")
        if value[0] == '"' and value[-1] == '"':
            return value[1:-1].replace('""', '"')
        if value[0] == "[" and value[-1] == "]":
            return value[1:-1].replace("]]", "]")
    return value


def string_literal_value(token: Token) -> str:
    """Text of a string literal token, without quotes, N prefix or '' escapes."""
    value = token.value
    if value[:1] in ("N", "n"):
        value = value[1:]
    return value[1:-1].replace("''", "'")


def is_identifier(token: Optional[Token]) -> bool:
    return token is not None and token.kind in (WORD, IDENT) and not ARRAY_SUFFIX.match(token.value)


def identifier_name(token: Token) -> str:
    return unquote_identifier(token.value) if token.kind == IDENT else token.value


def render_tokens(tokens: List[Token], render: Optional[Callable[[Token], str]] = None) -> str:
    """Join tokens back into text, keeping a space wherever the source had whitespace."""
    parts = []
    for index, token in enumerate(tokens):
        text = render(token) if render else token.value
        if index and token.space_before:
            parts.append(" ")
        parts.append(text)
    return "".join(parts)


# ═══════════════════════════════════════════════════════════════════════
#  Clause model
# ═══════════════════════════════════════════════════════════════════════

@dataclass
class ReferenceClause:
    """Target of a foreign key: ``REFERENCES table (columns) ON DELETE ...``."""
    table: str
    columns: List[str] = field(default_factory=list)
    actions: List[Tuple[str, str]] = field(default_factory=list)
    schema: Optional[str] = None


@dataclass
class ColumnClause:
    """One column definition with its type and the options that follow it."""
    name: str
    raw_type: str
    base_type: str
    type_params: str = ""
    definition_tail: str = ""
    not_null: Optional[bool] = None
    default: Optional[List[Token]] = None
    auto_increment: bool = False
    primary_key: bool = False
    unique: bool = False
    on_update: Optional[List[Token]] = None
    comment: Optional[str] = None
    check: Optional[List[Token]] = None
    reference: Optional[ReferenceClause] = None
    unsigned: bool = False
    is_array: bool = False
    collation: Optional[str] = None
    extra: List[Token] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        """Base type and parameters in a form the field type translator accepts."""
        return f"{self.base_type}{self.type_params}"


@dataclass
class ConstraintClause:
    """A table-level PRIMARY KEY, UNIQUE, FOREIGN KEY, CHECK or plain index definition."""
    kind: str
    name: Optional[str] = None
    columns: List[str] = field(default_factory=list)
    reference: Optional[ReferenceClause] = None
    check: Optional[List[Token]] = None
    index_type: Optional[str] = None


@dataclass
class ParsedStatement:
    table_name: str
    if_not_exists: bool = False
    temporary: bool = False
    schema: Optional[str] = None
    columns: List[ColumnClause] = field(default_factory=list)
    constraints: List[ConstraintClause] = field(default_factory=list)
    table_options: str = ""

    def find_column(self, name: str) -> Optional[ColumnClause]:
        wanted = name.lower()
        for column in self.columns:
            if column.name.lower() == wanted:
                return column
        return None

    @property
    def primary_key_columns(self) -> List[str]:
        """Columns of the primary key, whether declared inline or at table level."""
        for constraint in self.constraints:
            if constraint.kind == "PRIMARY KEY":
                return list(constraint.columns)
        return [column.name for column in self.columns if column.primary_key]


class ColumnSection(NamedTuple):
    """Where the column/constraint body of a CREATE TABLE statement sits."""
    table_name: str
    if_not_exists: bool
    start: int
    end: int
    schema: Optional[str] = None
    temporary: bool = False


Clause = Union[ColumnClause, ConstraintClause]


# ═══════════════════════════════════════════════════════════════════════
#  Token stream
# ═══════════════════════════════════════════════════════════════════════

class TokenStream:
    """Cursor over a token list with the lookahead helpers the grammar needs."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def next(self) -> Token:
        token = self.peek()
        if token is None:
            raise MalformedStatementError("Unexpected end of CREATE TABLE statement.")
        self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek_words(self, *words: str) -> bool:
        for offset, word in enumerate(words):
            token = self.peek(offset)
            if token is None or not token.is_word(word):
                return False
        return True

    def accept_words(self, *words: str) -> bool:
        if self.peek_words(*words):
            self.pos += len(words)
            return True
        return False

    def peek_punct(self, char: str) -> bool:
        token = self.peek()
        return token is not None and token.is_punct(char)

    def expect_identifier(self, what: str) -> str:
        token = self.peek()
        if not is_identifier(token):
            found = token.value if token else "end of statement"
            raise MalformedStatementError(f"Expected {what}, found '{found}'.")
        self.pos += 1
        return identifier_name(token)

    def take_qualified_name(self, what: str) -> Tuple[Optional[str], str]:
        """``schema.name`` or ``name``; returns (schema, name)."""
        parts = [self.expect_identifier(what)]
        while self.peek_punct("."):
            self.pos += 1
            parts.append(self.expect_identifier(what))
        schema = ".".join(parts[:-1]) or None
        return schema, parts[-1]

    def take_parenthesized(self) -> List[Token]:
        """Consume a balanced ``( ... )`` group and return the tokens inside it."""
        if not self.peek_punct("("):
            found = self.peek().value if self.peek() else "end of statement"
            raise MalformedStatementError(f"Expected '(', found '{found}'.")
        start = self.pos + 1
        depth = 0
        while not self.at_end():
            token = self.next()
            if token.is_punct("("):
                depth += 1
            elif token.is_punct(")"):
                depth -= 1
                if depth == 0:
                    return self.tokens[start:self.pos - 1]
        raise MalformedStatementError("Unbalanced parentheses in CREATE TABLE statement.")

    def take_expression(self) -> List[Token]:
        """
        Tokens of a DEFAULT / ON UPDATE expression: everything up to the next
        column option keyword at parenthesis depth zero (at least one token).
        """
        tokens = [self.next()]
        depth = 1 if tokens[0].is_punct("(") else 0
        while not self.at_end():
            token = self.peek()
            if depth == 0 and _starts_option(self, token):
                break
            if token.is_punct("("):
                depth += 1
            elif token.is_punct(")"):
                depth -= 1
            tokens.append(self.next())
        return tokens


def _starts_option(stream: TokenStream, token: Token) -> bool:
    if token.kind != WORD:
        return False
    following = stream.peek(1)
    if token.upper == "ON":
        return following is not None and following.is_word("UPDATE", "DELETE", "CONFLICT")
    if token.upper == "CHARACTER":
        # ``::character varying`` is a cast, ``CHARACTER SET x`` an option
        return following is not None and following.is_word("SET")
    return token.upper in OPTION_KEYWORDS


def split_token_groups(tokens: List[Token], separator: str = ",") -> List[List[Token]]:
    """Split tokens on a punctuation character that sits at parenthesis depth zero."""
    groups: List[List[Token]] = []
    current: List[Token] = []
    depth = 0
    for token in tokens:
        if token.is_punct("("):
            depth += 1
        elif token.is_punct(")"):
            depth -= 1
        elif token.is_punct(separator) and depth == 0:
            groups.append(current)
            current = []
            continue
        current.append(token)
    groups.append(current)
    return [group for group in groups if group]


# ═══════════════════════════════════════════════════════════════════════
#  Statement level
# ═══════════════════════════════════════════════════════════════════════

def locate_column_section(sql: str) -> ColumnSection:
    """
    Find the table name and the balanced ``( ... )`` body of a CREATE TABLE statement.

    Raises MalformedStatementError when the ``CREATE TABLE name (`` prefix is
    missing or the parentheses never balance.
    """
    tokens = tokenize(sql)
    stream = TokenStream(tokens)

    while not stream.at_end() and not stream.peek_words("CREATE"):
        stream.pos += 1
    if not stream.accept_words("CREATE"):
        raise MalformedStatementError("Invalid CREATE TABLE statement format.")

    temporary = stream.accept_words("TEMPORARY") or stream.accept_words("TEMP")
    if not stream.accept_words("TABLE"):
        raise MalformedStatementError("Invalid CREATE TABLE statement format.")
    if_not_exists = stream.accept_words("IF", "NOT", "EXISTS")

    schema, table_name = stream.take_qualified_name("table name")
    if not table_name:
        raise MalformedStatementError("Cannot parse table name.")

    opening = stream.peek()
    if opening is None or not opening.is_punct("("):
        raise MalformedStatementError("Invalid CREATE TABLE statement: missing opening parenthesis.")

    depth = 0
    for token in tokens[stream.pos:]:
        if token.is_punct("("):
            depth += 1
        elif token.is_punct(")"):
            depth -= 1
            if depth == 0:
                return ColumnSection(table_name, if_not_exists, opening.end, token.start, schema, temporary)

    raise MalformedStatementError("Unbalanced parentheses in CREATE TABLE statement.")


def split_clauses(section: str) -> List[str]:
    """
    Split the body of a CREATE TABLE statement into column / constraint clauses.

    Only commas at parenthesis depth zero separate clauses, so ``DECIMAL(10,2)``
    and ``ENUM('a,b','c')`` stay inside one clause.
    """
    groups = split_token_groups(tokenize(section))
    return [section[group[0].start:group[-1].end].strip() for group in groups]


def split_statements(sql_text: str) -> List[str]:
    """Split a script into statements on top-level semicolons outside string literals."""
    groups = split_token_groups(tokenize(sql_text), separator=";")
    return [sql_text[group[0].start:group[-1].end].strip() for group in groups]


def classify_clause(clause: str) -> Clause:
    """Parse one clause as a table-level constraint if it looks like one, otherwise as a column."""
    tokens = tokenize(clause)
    if not tokens:
        raise MalformedStatementError("Empty column definition.")
    stream = TokenStream(tokens)
    constraint = _parse_constraint(stream)
    if constraint is not None:
        return constraint
    stream.pos = 0
    return _parse_column(stream, clause)


def parse_create_table(sql: str) -> ParsedStatement:
    """Parse a complete CREATE TABLE statement into a ParsedStatement."""
    section = locate_column_section(sql)
    clauses = split_clauses(sql[section.start:section.end])
    if not clauses:
        raise MalformedStatementError("CREATE TABLE statement has no column definitions.")

    statement = ParsedStatement(
        table_name=section.table_name,
        if_not_exists=section.if_not_exists,
        temporary=section.temporary,
        schema=section.schema,
        table_options=sql[section.end + 1:].strip().rstrip(";").strip(),
    )
    for clause in clauses:
        parsed = classify_clause(clause)
        if isinstance(parsed, ConstraintClause):
            statement.constraints.append(parsed)
        else:
            statement.columns.append(parsed)

    logger.debug(
        f"Parsed table {statement.table_name}: {len(statement.columns)} columns, "
        f"{len(statement.constraints)} constraints"
    )
    return statement


# ═══════════════════════════════════════════════════════════════════════
#  Constraints
# ═══════════════════════════════════════════════════════════════════════

def _parse_column_list(stream: TokenStream) -> List[str]:
    """``(a, b(10) DESC, c)`` → ['a', 'b', 'c']"""
    columns = []
    for group in split_token_groups(stream.take_parenthesized()):
        if is_identifier(group[0]):
            columns.append(identifier_name(group[0]))
    return columns


def _parse_reference(stream: TokenStream) -> ReferenceClause:
    schema, table = stream.take_qualified_name("referenced table")
    reference = ReferenceClause(table=table, schema=schema)
    if stream.peek_punct("("):
        reference.columns = _parse_column_list(stream)

    while not stream.at_end():
        if stream.peek_words("ON", "DELETE") or stream.peek_words("ON", "UPDATE"):
            event = stream.peek(1).upper
            for action in REFERENTIAL_ACTIONS:
                if stream.peek_words("ON", event, *action):
                    stream.pos += 2 + len(action)
                    reference.actions.append((event, " ".join(action)))
                    break
            else:
                break
        elif stream.accept_words("MATCH"):
            stream.next()
        elif stream.accept_words("NOT", "DEFERRABLE") or stream.accept_words("DEFERRABLE"):
            continue
        elif stream.accept_words("INITIALLY"):
            stream.next()
        else:
            break
    return reference


def _skip_index_options(stream: TokenStream) -> None:
    while not stream.at_end() and stream.peek().is_word(*INDEX_OPTIONS):
        stream.pos += 1


def _parse_constraint(stream: TokenStream) -> Optional[ConstraintClause]:
    name = None
    if stream.peek_words("CONSTRAINT"):
        following = stream.peek(1)
        if following is not None and is_identifier(following) and not following.is_word(
                "PRIMARY", "UNIQUE", "FOREIGN", "CHECK"):
            stream.pos += 2
            name = identifier_name(following)
        else:
            stream.pos += 1

    if stream.accept_words("PRIMARY", "KEY"):
        constraint = ConstraintClause("PRIMARY KEY", name)
        _skip_index_options(stream)
        if is_identifier(stream.peek()):
            stream.pos += 1
        constraint.columns = _parse_column_list(stream)
        return constraint

    if stream.accept_words("UNIQUE"):
        if not (stream.accept_words("KEY") or stream.accept_words("INDEX")):
            _skip_index_options(stream)
        if is_identifier(stream.peek()) and not stream.peek().is_word(*INDEX_OPTIONS):
            name = stream.expect_identifier("index name")
        _skip_index_options(stream)
        constraint = ConstraintClause("UNIQUE", name)
        constraint.columns = _parse_column_list(stream)
        return constraint

    if stream.accept_words("FOREIGN", "KEY"):
        if is_identifier(stream.peek()):
            name = name or stream.expect_identifier("foreign key name")
        constraint = ConstraintClause("FOREIGN KEY", name)
        constraint.columns = _parse_column_list(stream)
        if not stream.accept_words("REFERENCES"):
            raise MalformedStatementError("FOREIGN KEY definition without REFERENCES clause.")
        constraint.reference = _parse_reference(stream)
        return constraint

    if stream.peek_words("CHECK") and stream.peek(1) is not None and stream.peek(1).is_punct("("):
        stream.pos += 1
        return ConstraintClause("CHECK", name, check=stream.take_parenthesized())

    if name is None and _looks_like_index(stream):
        index_type = None
        if stream.peek().is_word(*INDEX_PREFIXES):
            index_type = stream.next().upper
        stream.accept_words("KEY") or stream.accept_words("INDEX")
        if is_identifier(stream.peek()):
            name = stream.expect_identifier("index name")
        _skip_index_options(stream)
        constraint = ConstraintClause("INDEX", name, index_type=index_type)
        constraint.columns = _parse_column_list(stream)
        return constraint

    if name is not None:
        found = stream.peek().value if stream.peek() else "end of clause"
        raise MalformedStatementError(f"Unsupported constraint '{name}' near '{found}'.")
    return None


def _looks_like_index(stream: TokenStream) -> bool:
    """MySQL ``KEY name (cols)`` / ``INDEX (cols)`` / ``FULLTEXT KEY ...``, not a column named key."""
    first = stream.peek()
    if first is None:
        return False
    if first.is_word(*INDEX_PREFIXES):
        offset = 2 if stream.peek(1) is not None and stream.peek(1).is_word(*INDEX_KEYWORDS) else 1
    elif first.is_word(*INDEX_KEYWORDS):
        offset = 1
    else:
        return False

    following = stream.peek(offset)
    if following is None:
        return False
    if following.is_punct("("):
        return True
    if not is_identifier(following) or (following.kind == WORD and following.value.lower() in KNOWN_TYPE_WORDS):
        return False
    after = stream.peek(offset + 1)
    return after is not None and (after.is_punct("(") or after.is_word(*INDEX_OPTIONS))


# ═══════════════════════════════════════════════════════════════════════
#  Columns
# ═══════════════════════════════════════════════════════════════════════

def _accept_word_sequence(stream: TokenStream, candidates) -> List[str]:
    for words in candidates:
        if stream.accept_words(*words):
            return [word.lower() for word in words]
    return []


def _parse_column(stream: TokenStream, clause: str) -> ColumnClause:
    name_token = stream.peek()
    if not is_identifier(name_token):
        raise MalformedStatementError(f"Cannot parse column definition: '{clause}'.")
    stream.pos += 1
    name = identifier_name(name_token)

    type_token = stream.peek()
    starts_option = type_token is not None and type_token.upper in OPTION_KEYWORDS and (
        type_token.upper != "CHARACTER" or stream.peek_words("CHARACTER", "SET"))
    # SSMS scripts quote type names: [int], [nvarchar](max)
    quoted_type = type_token is not None and type_token.kind == IDENT and not ARRAY_SUFFIX.match(type_token.value)
    if type_token is None or (type_token.kind != WORD and not quoted_type) or starts_option:
        # SQLite allows columns without a declared type
        column = ColumnClause(name=name, raw_type="", base_type="")
        _parse_column_options(stream, column, clause)
        return column

    stream.pos += 1
    if quoted_type:
        words = unquote_identifier(type_token.value).lower().split()
    else:
        words = [type_token.value.lower()]
        words += _accept_word_sequence(stream, MULTIWORD_TYPES.get(words[0].upper(), []))

    params = ""
    suffix: List[str] = []
    if stream.peek_punct("("):
        params = "(" + "".join(token.value for token in stream.take_parenthesized()) + ")"
        if words in (["timestamp"], ["time"]):
            suffix = _accept_word_sequence(stream, ZONE_SUFFIXES)

    column = ColumnClause(
        name=name,
        raw_type=" ".join(words) + params + (" " + " ".join(suffix) if suffix else ""),
        base_type=" ".join(words + suffix),
        type_params=params,
    )

    while not stream.at_end():
        token = stream.peek()
        if token.is_word(*TYPE_MODIFIERS):
            column.unsigned = column.unsigned or token.upper == "UNSIGNED"
            stream.pos += 1
        elif token.kind == IDENT and ARRAY_SUFFIX.match(token.value):
            column.is_array = True
            stream.pos += 1
        else:
            break

    _parse_column_options(stream, column, clause)
    return column


def _parse_column_options(stream: TokenStream, column: ColumnClause, clause: str) -> None:
    if not stream.at_end():
        column.definition_tail = clause[stream.peek().start:].strip()

    while not stream.at_end():
        token = stream.peek()

        if stream.accept_words("NOT", "NULL"):
            column.not_null = True
        elif stream.accept_words("NULL"):
            column.not_null = False
        elif stream.accept_words("DEFAULT"):
            column.default = stream.take_expression()
        elif stream.accept_words("AUTO_INCREMENT") or stream.accept_words("AUTOINCREMENT"):
            column.auto_increment = True
        elif stream.accept_words("IDENTITY"):
            column.auto_increment = True
            if stream.peek_punct("("):
                stream.take_parenthesized()
        elif stream.peek_words("GENERATED"):
            _parse_generated(stream, column)
        elif stream.accept_words("PRIMARY", "KEY"):
            column.primary_key = True
            if stream.peek() is not None and stream.peek().is_word("ASC", "DESC"):
                stream.pos += 1
            _skip_index_options(stream)
        elif stream.accept_words("UNIQUE"):
            stream.accept_words("KEY")
            column.unique = True
        elif stream.peek_words("CHECK") and stream.peek(1) is not None and stream.peek(1).is_punct("("):
            stream.pos += 1
            column.check = stream.take_parenthesized()
        elif stream.accept_words("REFERENCES"):
            column.reference = _parse_reference(stream)
        elif stream.accept_words("ON", "UPDATE"):
            column.on_update = stream.take_expression()
        elif stream.accept_words("ON", "CONFLICT"):
            # SQLite conflict clause, no counterpart elsewhere
            stream.next()
        elif stream.accept_words("COMMENT"):
            comment = stream.next()
            column.comment = string_literal_value(comment) if comment.kind == STRING else comment.value
        elif stream.accept_words("COLLATE"):
            column.collation = stream.next().value
        elif stream.accept_words("CHARACTER", "SET") or stream.accept_words("CHARSET"):
            stream.next()
        elif stream.accept_words("CONSTRAINT"):
            stream.expect_identifier("constraint name")
        else:
            column.extra.append(stream.next())
            logger.debug(f"Column {column.name}: passing through '{token.value}'")


def _parse_generated(stream: TokenStream, column: ColumnClause) -> None:
    """``GENERATED {ALWAYS | BY DEFAULT} AS IDENTITY`` or a computed ``GENERATED ALWAYS AS (expr)``."""
    start = stream.pos
    stream.accept_words("GENERATED")
    stream.accept_words("ALWAYS") or stream.accept_words("BY", "DEFAULT")
    if stream.accept_words("AS", "IDENTITY"):
        column.auto_increment = True
        if stream.peek_punct("("):
            stream.take_parenthesized()
        return
    if stream.accept_words("AS") and stream.peek_punct("("):
        stream.take_parenthesized()
        if stream.peek() is not None and stream.peek().is_word("STORED", "VIRTUAL"):
            stream.pos += 1
    column.extra.extend(stream.tokens[start:stream.pos])
