"""XSD scalar validators for boolean and numeric OMT fields."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from fom_tools.errors import MalformedScalarError


@dataclass
class TypeValidationResult:
    """Result of type validation."""

    is_valid: bool
    error_message: str | None = None
    parsed_value: Any = None


class XsdTypeValidator(ABC):
    """Base class for XSD scalar validators."""

    @abstractmethod
    def validate(self, value: str) -> TypeValidationResult:
        """Validate a string value against this type.

        Args:
            value: The trimmed text of an element or attribute.

        Returns:
            TypeValidationResult with validation status and parsed value.
        """
        pass


class BooleanTypeValidator(XsdTypeValidator):
    """Validates xs:boolean values (case-sensitive, as in XSD)."""

    TRUE_VALUES = {"true", "1"}
    FALSE_VALUES = {"false", "0"}

    def validate(self, value: str) -> TypeValidationResult:
        if value in self.TRUE_VALUES:
            return TypeValidationResult(is_valid=True, parsed_value=True)
        if value in self.FALSE_VALUES:
            return TypeValidationResult(is_valid=True, parsed_value=False)
        return TypeValidationResult(
            is_valid=False,
            error_message=f"Invalid boolean value: '{value}'. Expected true, false, 1, or 0",
        )


class IntegerTypeValidator(XsdTypeValidator):
    """Validates integer values with optional inclusive min/max bounds."""

    INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

    def __init__(self, min_value: int | None = None, max_value: int | None = None):
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: str) -> TypeValidationResult:
        # int() alone would also accept "1_000" and surrounding whitespace.
        if not self.INTEGER_PATTERN.match(value):
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Invalid integer value: '{value}'",
            )
        parsed = int(value)

        if self.min_value is not None and parsed < self.min_value:
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Value {parsed} is less than minimum {self.min_value}",
            )
        if self.max_value is not None and parsed > self.max_value:
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Value {parsed} exceeds maximum {self.max_value}",
            )

        return TypeValidationResult(is_valid=True, parsed_value=parsed)


class DecimalTypeValidator(XsdTypeValidator):
    """Validates xs:decimal values."""

    DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

    def __init__(self, min_value: Decimal | int | None = None):
        self.min_value = Decimal(min_value) if min_value is not None else None

    def validate(self, value: str) -> TypeValidationResult:
        if not self.DECIMAL_PATTERN.match(value):
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Invalid decimal value: '{value}'",
            )
        try:
            parsed = Decimal(value)
        except InvalidOperation:
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Invalid decimal value: '{value}'",
            )

        if self.min_value is not None and parsed < self.min_value:
            return TypeValidationResult(
                is_valid=False,
                error_message=f"Value {parsed} is less than minimum {self.min_value}",
            )

        return TypeValidationResult(is_valid=True, parsed_value=parsed)


BOOLEAN = BooleanTypeValidator()
UNSIGNED_BYTE = IntegerTypeValidator(min_value=0, max_value=255)
UNSIGNED_SHORT = IntegerTypeValidator(min_value=0, max_value=65535)
NON_NEGATIVE_INTEGER = IntegerTypeValidator(min_value=0)
NON_NEGATIVE_DECIMAL = DecimalTypeValidator(min_value=0)


def parse_scalar(validator: XsdTypeValidator, text: str, path: str, line: int | None = None) -> Any:
    """Parse text with a validator, raising on invalid input.

    Raises:
        MalformedScalarError: If the validator rejects the text.
    """
    result = validator.validate(text)
    if not result.is_valid:
        raise MalformedScalarError(path, text, result.error_message or "Malformed value", line=line)
    return result.parsed_value


def as_scalar(validator: XsdTypeValidator) -> Callable[[str, str, int | None], Any]:
    """Wrap a validator as a text converter for the field extractors."""

    def convert(text: str, path: str, line: int | None) -> Any:
        return parse_scalar(validator, text, path, line)

    return convert
