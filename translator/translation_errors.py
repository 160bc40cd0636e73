"""
Exceptions raised by the CREATE TABLE dialect translator.

All of them derive from ValueError so callers that already guard translator
calls with ``except ValueError`` keep working.
"""


class DatabaseConversionError(ValueError):
    """Base class for every structural translation failure."""


class UnsupportedDialectError(DatabaseConversionError):
    """A dialect name or alias is not recognized."""

    def __init__(self, dialect: str, supported=None):
        self.dialect = dialect
        message = f"Unsupported database dialect: '{dialect}'"
        if supported:
            message += f". Supported: {', '.join(sorted(supported))}"
        super().__init__(message)


class MalformedStatementError(DatabaseConversionError):
    """The input is not a ``CREATE TABLE name (...)`` statement or its parentheses do not balance."""


class UnsupportedTranslationPairError(DatabaseConversionError):
    """No translator is registered for a (source, target) pair and none can be chained through MySQL."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Unsupported CREATE TABLE translation: from {source} to {target}")
