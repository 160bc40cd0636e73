"""
SQL Normalizer — text-level clean-up applied to generated DDL.

- fix_line / fix_lines: drop comments, collapse whitespace before commas,
  canonical line endings, no blank lines (idempotent)
- trim_column_type: ``VARCHAR (255)`` → ``VARCHAR(255)``
- strip_table_options: remove source-only table options (ENGINE=, CHARSET=, ...)
- sanitize_quoted_keywords: un-quote SQL keywords that were quoted as identifiers

String literals and quoted identifiers are never touched by any of these.
"""

import logging
import re

from dialects import MYSQL, get_dialect_profile

logger = logging.getLogger(__name__)

# Preserved verbatim by every rewrite below
QUOTED = r"'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\"|`(?:[^`]|``)*`|\[(?:[^\]]|\]\])*\]"

BLOCK_COMMENT_PATTERN = re.compile(rf"({QUOTED})|/\*.*?\*/", re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(rf"({QUOTED})|--.*$")
SPACE_BEFORE_COMMA_PATTERN = re.compile(rf"({QUOTED})|\s+,")

COLUMN_TYPE_KEYWORDS = (
    "NVARCHAR", "VARCHAR", "CHARACTER VARYING", "NCHAR", "CHAR",
    "INTEGER", "INT", "TINYINT", "SMALLINT", "MEDIUMINT", "BIGINT",
    "DECIMAL", "NUMERIC", "FLOAT", "DOUBLE", "REAL",
    "BOOLEAN",
)
COLUMN_TYPE_ALTERNATION = "|".join(keyword.replace(" ", r"\s+") for keyword in COLUMN_TYPE_KEYWORDS)
COLUMN_TYPE_PATTERN = re.compile(rf"({QUOTED})|\b({COLUMN_TYPE_ALTERNATION})\s+\(", re.IGNORECASE)

TABLE_OPTION_PATTERNS = [
    re.compile(r"\bENGINE\s*=\s*\w+", re.IGNORECASE),
    re.compile(r"\b(?:DEFAULT\s+)?(?:CHARSET|CHARACTER\s+SET)\s*=?\s*\w+", re.IGNORECASE),
    re.compile(r"\b(?:DEFAULT\s+)?COLLATE\s*=?\s*\w+", re.IGNORECASE),
    re.compile(r"\bCOMMENT\s*=?\s*'(?:[^']|'')*'", re.IGNORECASE),
    re.compile(r"\bAUTO_INCREMENT\s*=\s*\d+", re.IGNORECASE),
    re.compile(r"\bROW_FORMAT\s*=\s*\w+", re.IGNORECASE),
    re.compile(r"\b(?:TEXTIMAGE_)?ON\s+\[?PRIMARY\]?", re.IGNORECASE),
]

# (keyword, text that must follow it, replacement)
QUOTED_KEYWORD_RULES = [
    ("PRIMARY", " KEY", "PRIMARY KEY"),
    ("UNIQUE", " KEY", "UNIQUE"),
    ("FOREIGN", " KEY", "FOREIGN KEY"),
    ("CHECK", " (", "CHECK ("),
    ("DEFAULT", " ", "DEFAULT "),
    ("NOT", " NULL", "NOT NULL"),
    ("NULL", "", "NULL"),
    ("REFERENCES", "", "REFERENCES"),
    ("ON", " DELETE", "ON DELETE"),
    ("ON", " UPDATE", "ON UPDATE"),
    ("USING", "", "USING"),
    ("WITH", "", "WITH"),
    ("CONSTRAINT", "", "CONSTRAINT"),
]


def _keep_quoted(replacement: str):
    def substitute(match):
        return match.group(1) if match.group(1) else replacement
    return substitute


def fix_line(line: str) -> str:
    """Clean one line: remove comments and whitespace before commas, strip trailing space."""
    line = BLOCK_COMMENT_PATTERN.sub(_keep_quoted(""), line)
    line = LINE_COMMENT_PATTERN.sub(_keep_quoted(""), line)
    line = SPACE_BEFORE_COMMA_PATTERN.sub(_keep_quoted(","), line)
    return line.rstrip()


def fix_lines(sql: str) -> str:
    """
    Clean a multi-line statement without changing its line structure.

    Line endings become ``\\n`` and blank lines are removed. Applying the
    function twice gives the same result as applying it once.
    """
    sql = sql.replace("\r\n", "\n").replace("\r", "\n")
    sql = BLOCK_COMMENT_PATTERN.sub(_keep_quoted(""), sql)
    lines = [fix_line(line) for line in sql.strip().split("\n")]
    return "\n".join(line for line in lines if line.strip())


def trim_column_type(sql: str) -> str:
    """Remove the space between a column type keyword and its opening parenthesis."""
    def substitute(match):
        if match.group(1):
            return match.group(1)
        return re.sub(r"\s+", " ", match.group(2)) + "("

    sql = COLUMN_TYPE_PATTERN.sub(substitute, sql)
    # TINYINT(1) exports occasionally arrive as BOOLEAN(11)
    return re.sub(r"\bBOOLEAN\(11\)", "INTEGER(11)", sql, flags=re.IGNORECASE)


def strip_table_options(options: str) -> str:
    """
    Remove source-only table options from the text after the closing parenthesis.

    Returns whatever is left (stripped); the caller decides whether leftovers
    are worth a warning.
    """
    remaining = options or ""
    for pattern in TABLE_OPTION_PATTERNS:
        remaining = pattern.sub(" ", remaining)
    remaining = re.sub(r"\s*,\s*(?=,|$)", "", remaining)
    return re.sub(r"\s+", " ", remaining).strip(" ,;")


def sanitize_quoted_keywords(sql: str, dialect: str = MYSQL) -> str:
    """
    Un-quote SQL keywords that ended up wrapped as identifiers,
    e.g. ``"PRIMARY" KEY`` → ``PRIMARY KEY`` or ``[NOT] NULL`` → ``NOT NULL``.
    """
    profile = get_dialect_profile(dialect)
    for keyword, following, replacement in QUOTED_KEYWORD_RULES:
        if keyword == "UNIQUE" and profile.name == MYSQL:
            replacement = "UNIQUE KEY"
        sql = sql.replace(profile.quote(keyword) + following, replacement)
    return sql
