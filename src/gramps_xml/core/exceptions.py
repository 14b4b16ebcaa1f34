from __future__ import annotations

from typing import List, Sequence

from gramps_xml.model.violations import Violation


class GrampsXmlError(Exception):
    """Base exception for gramps_xml failures."""


class NotFoundError(GrampsXmlError, FileNotFoundError):
    """Raised when an input resource does not exist."""


class ParseError(GrampsXmlError):
    """Raised when input is not well-formed XML or lacks the <database> root."""

    kind = "MalformedInput"

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class IoFailure(GrampsXmlError, OSError):
    """Raised when bytes cannot be read or written."""


class SchemaStructureViolation(GrampsXmlError):
    """Raised when a caller asks for a valid document and gets violations."""

    def __init__(self, violations: Sequence[Violation]):
        self.violations: List[Violation] = list(violations)
        lines = "\n".join(f"  {v}" for v in self.violations)
        super().__init__(f"{len(self.violations)} schema violation(s):\n{lines}")
