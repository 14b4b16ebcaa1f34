"""
Core package: error types and the import/export composition.

``gramps_xml.core.pipeline`` is imported explicitly by callers; only the
exceptions are re-exported here.
"""

from __future__ import annotations

from .exceptions import (
    GrampsXmlError,
    IoFailure,
    NotFoundError,
    ParseError,
    SchemaStructureViolation,
)

__all__ = [
    "GrampsXmlError",
    "IoFailure",
    "NotFoundError",
    "ParseError",
    "SchemaStructureViolation",
]
