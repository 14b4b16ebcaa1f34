"""
parser.py
Gramps XML text -> Document.

Sections are walked in the fixed schema order. Each section is optional and
anything the model does not know about is skipped, so files written by newer
or older Gramps versions still load. Only text that is not well-formed, or
that lacks the ``<database>`` root, is refused.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from gramps_xml.core.exceptions import ParseError
from gramps_xml.logging import get_logger
from gramps_xml.model.entities import Document
from gramps_xml.reader.build_family import build_family
from gramps_xml.reader.build_header import build_header
from gramps_xml.reader.build_person import build_person
from gramps_xml.reader.build_records import (
    build_citation,
    build_event,
    build_note,
    build_place,
    build_repository,
    build_source,
    build_tag,
)
from gramps_xml.reader.utils import IssueCollector, _child_elements, local_name, namespace_of
from gramps_xml.schema.vocabulary import (
    ROOT_TAG,
    SECTION_ORDER,
    SECTIONS,
    EntityKind,
    version_from_namespace,
)

log = get_logger("reader.parser")

BUILDERS: Dict[EntityKind, Callable] = {
    EntityKind.PERSON: build_person,
    EntityKind.FAMILY: build_family,
    EntityKind.EVENT: build_event,
    EntityKind.PLACE: build_place,
    EntityKind.SOURCE: build_source,
    EntityKind.CITATION: build_citation,
    EntityKind.REPOSITORY: build_repository,
    EntityKind.NOTE: build_note,
    EntityKind.TAG: build_tag,
}


def _load_root(xml_text: Union[str, bytes]):
    try:
        return ET.fromstring(xml_text)
    except ET.ParseError as exc:
        line, column = getattr(exc, "position", (None, None))
        raise ParseError(f"Input is not well-formed XML: {exc}", line=line, column=column) from exc
    except DefusedXmlException as exc:
        raise ParseError(f"Input uses forbidden XML constructs: {exc}") from exc


def build_document(root) -> Document:
    """
    Map a ``<database>`` element onto a fresh Document.

    Builders stay pure; this function only dispatches and collects.
    """
    if local_name(root.tag) != ROOT_TAG:
        raise ParseError(f"Expected <{ROOT_TAG}> root element, got <{local_name(root.tag)}>")

    issues = IssueCollector()
    document = Document(schema_version=version_from_namespace(namespace_of(root.tag)))

    headers = _child_elements(root, "header")
    if headers:
        document.header = build_header(headers[0])

    for section in SECTIONS:
        builder = BUILDERS[section.kind]
        target = getattr(document, section.attribute)

        for container in _child_elements(root, section.name):
            for node in container:
                if local_name(node.tag) != section.element:
                    log.debug("Skipping <%s> inside <%s>", local_name(node.tag), section.name)
                    continue
                target.append(builder(node, issues))

    for node in root:
        name = local_name(node.tag)
        if name and name not in SECTION_ORDER:
            log.debug("Ignoring unsupported section <%s>", name)

    document.parse_issues.extend(issues.issues)
    return document


def parse(xml_text: Union[str, bytes]) -> Document:
    """
    Parse Gramps XML text (``str`` or ``bytes``) into a Document.

    Raises:
        ParseError: text is not well-formed or has no ``<database>`` root.
    """
    root = _load_root(xml_text)
    document = build_document(root)

    log.info(
        "Parsed Gramps XML (schema=%s) %s",
        document.schema_version or "?",
        " ".join(f"{name}={count}" for name, count in document.counts().items()),
    )
    if document.parse_issues:
        log.warning("Parser recorded %d value issue(s)", len(document.parse_issues))

    return document
