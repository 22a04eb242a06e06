"""Exceptions raised while converting a JSON document into a table."""
from typing import Optional


class ConversionError(Exception):
    """Base class for every failure that aborts the conversion of a document."""


class JSONSyntaxError(ConversionError, ValueError):
    """The input text is not well-formed JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class StructuralError(ConversionError, ValueError):
    """The parsed document does not have a shape that can be flattened."""


class NestingDepthError(StructuralError):
    """The document nests objects/arrays deeper than the configured limit."""


class KeyCollisionError(StructuralError):
    """Two different key paths would be written to the same column."""

    def __init__(self, column: str, first_path, second_path):
        super().__init__(
            f"Column '{column}' is produced by both {list(first_path)} and {list(second_path)}"
        )
        self.column = column
        self.first_path = tuple(first_path)
        self.second_path = tuple(second_path)
