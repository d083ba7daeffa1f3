"""Parse error types and parse results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fom_tools.omt.model import ObjectModel


class ParseErrorType(Enum):
    """Kinds of failure a parse can end with."""

    SYNTAX = "syntax"  # Malformed XML, reported by lxml
    MISSING_REQUIRED_FIELD = "missing_required_field"
    UNRECOGNIZED_VALUE = "unrecognized_value"  # Closed vocabulary token
    MALFORMED_SCALAR = "malformed_scalar"  # Boolean/integer/decimal text


@dataclass(frozen=True)
class ParseError:
    """The error that stopped a parse."""

    error_type: ParseErrorType
    description: str
    path: str = ""  # Dotted schema path, e.g. "objects.objectClass.name"
    value: str | None = None  # Offending text, if any
    line: int | None = None  # Source line of the nearest element

    def __str__(self) -> str:
        location = self.path or "<document>"
        if self.line is not None:
            location = f"{location} (line {self.line})"
        return f"[{self.error_type.value}] {location}: {self.description}"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one object model document.

    Exactly one of ``model`` and ``error`` is set.
    """

    model: ObjectModel | None = None
    error: ParseError | None = None
    file_path: str = ""

    @property
    def is_valid(self) -> bool:
        return self.error is None


class FomParseError(Exception):
    """Base class for every parse failure."""

    error_type = ParseErrorType.SYNTAX

    def __init__(
        self,
        message: str,
        path: str = "",
        value: str | None = None,
        line: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.value = value
        self.line = line

    def to_error(self) -> ParseError:
        return ParseError(
            error_type=self.error_type,
            description=self.message,
            path=self.path,
            value=self.value,
            line=self.line,
        )

    def __str__(self) -> str:
        return str(self.to_error())


class XmlSyntaxError(FomParseError):
    """The document is not well-formed XML."""

    error_type = ParseErrorType.SYNTAX


class MissingRequiredFieldError(FomParseError):
    """A mandatory element or attribute is absent."""

    error_type = ParseErrorType.MISSING_REQUIRED_FIELD

    def __init__(self, path: str, line: int | None = None):
        super().__init__(f"Missing required field '{path}'", path=path, line=line)


class UnrecognizedValueError(FomParseError):
    """A closed vocabulary field holds a token outside its known set."""

    error_type = ParseErrorType.UNRECOGNIZED_VALUE

    def __init__(
        self,
        path: str,
        value: str,
        allowed: list[str],
        line: int | None = None,
    ):
        super().__init__(
            f"Value '{value}' is not one of: {', '.join(allowed)}",
            path=path,
            value=value,
            line=line,
        )
        self.allowed = allowed


class MalformedScalarError(FomParseError):
    """A boolean or numeric field's text does not parse as that type."""

    error_type = ParseErrorType.MALFORMED_SCALAR

    def __init__(self, path: str, value: str, reason: str, line: int | None = None):
        super().__init__(reason, path=path, value=value, line=line)
