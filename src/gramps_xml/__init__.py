"""
gramps_xml: read, validate and write Gramps XML genealogy files.

    from gramps_xml import import_file, export_file

    document, violations = import_file("family.gramps")
    export_file("copy.gramps", document, compress=True)
"""

from __future__ import annotations

from gramps_xml.core.exceptions import (
    GrampsXmlError,
    IoFailure,
    NotFoundError,
    ParseError,
    SchemaStructureViolation,
)
from gramps_xml.core.pipeline import export_file, import_file
from gramps_xml.model import (
    ChildRef,
    Citation,
    Document,
    Event,
    EventRef,
    Family,
    Header,
    Name,
    Note,
    Person,
    Place,
    RepoRef,
    Repository,
    Researcher,
    Source,
    Tag,
    Violation,
    ViolationCode,
)
from gramps_xml.reader import parse
from gramps_xml.validation import build_reference_index, validate, validate_text
from gramps_xml.writer import serialize

__version__ = "0.1.0"

__all__ = [
    "ChildRef",
    "Citation",
    "Document",
    "Event",
    "EventRef",
    "Family",
    "GrampsXmlError",
    "Header",
    "IoFailure",
    "Name",
    "Note",
    "NotFoundError",
    "ParseError",
    "Person",
    "Place",
    "RepoRef",
    "Repository",
    "Researcher",
    "SchemaStructureViolation",
    "Source",
    "Tag",
    "Violation",
    "ViolationCode",
    "build_reference_index",
    "export_file",
    "import_file",
    "parse",
    "serialize",
    "validate",
    "validate_text",
]
