"""Errors raised by the packing engine."""
from typing import Optional


class PackingError(Exception):
    """Base error for anything that stops a package line from being packed."""

    def __init__(self, message: str, raw_line: Optional[str] = None, validation=None):
        super().__init__(message)
        self.raw_line = raw_line
        self.validation = validation


class InvalidPackageLine(PackingError):
    """
    A line could not be packed.

    Raised for syntax errors, unparseable numbers and constraint failures
    alike. When the line parsed but broke a constraint, ``validation``
    holds the ValidationResult that says which one.
    """

    def __init__(self, raw_line: str, validation=None):
        super().__init__(f"Invalid package line: {raw_line}", raw_line=raw_line, validation=validation)
