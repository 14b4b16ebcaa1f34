"""
serializer.py
Document -> Gramps XML text.

The input Document is never modified. Values the schema requires but the
Document leaves unset are synthesized into the output only:

  * handle  -> HandleAllocator (deterministic, unique within the output)
  * change  -> the serializer clock
  * gender  -> "U"
  * tag priority -> 0
  * header  -> created date from the clock, program version from config
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional
from xml.etree import ElementTree as ET

from gramps_xml.config import get_config
from gramps_xml.identity.handle_factory import HandleAllocator
from gramps_xml.logging import get_logger
from gramps_xml.model.entities import Document, Header
from gramps_xml.schema.vocabulary import (
    ROOT_TAG,
    SECTIONS,
    EntityKind,
    Gender,
    doctype_for,
    namespace_for,
)
from gramps_xml.writer.render import (
    render_citation,
    render_event,
    render_family,
    render_header,
    render_note,
    render_person,
    render_place,
    render_repository,
    render_source,
    render_tag,
)

log = get_logger("writer.serializer")

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

RENDERERS: Dict[EntityKind, Callable] = {
    EntityKind.FAMILY: render_family,
    EntityKind.EVENT: render_event,
    EntityKind.PLACE: render_place,
    EntityKind.SOURCE: render_source,
    EntityKind.CITATION: render_citation,
    EntityKind.REPOSITORY: render_repository,
    EntityKind.NOTE: render_note,
    EntityKind.TAG: render_tag,
}


class Serializer:
    """
    Renders Documents as Gramps XML.

    ``clock`` returns seconds since the epoch and is the only source of
    time-dependent output; pass a fixed clock for reproducible files.
    """

    def __init__(
        self,
        *,
        schema_version: Optional[str] = None,
        indent: Optional[int] = None,
        program_version: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ):
        cfg = get_config()
        self.schema_version = schema_version or cfg.schema_version
        self.indent = int(cfg.export.get("indent", 2) if indent is None else indent)
        self.program_version = program_version or str(cfg.export.get("program_version", ""))
        self.clock = clock

    def _header(self, doc: Document, now: int) -> Header:
        if doc.header is not None:
            return doc.header
        return Header(
            created_date=time.strftime("%Y-%m-%d", time.gmtime(now)),
            version=self.program_version or None,
        )

    def build_tree(self, doc: Document) -> ET.Element:
        now = int(self.clock())
        allocator = HandleAllocator(entity.handle for _, entity in doc.iter_entities())

        root = ET.Element(ROOT_TAG)
        root.set("xmlns", namespace_for(self.schema_version))
        root.append(render_header(self._header(doc, now)))

        synthesized = 0
        for section in SECTIONS:
            entities = getattr(doc, section.attribute)
            if not entities:
                continue

            container = ET.SubElement(root, section.name)
            for position, entity in enumerate(entities):
                handle = entity.handle
                if handle is None:
                    handle = allocator.allocate(section.kind.value, getattr(entity, "id", None), position)
                    synthesized += 1
                change = entity.change if entity.change is not None else now

                if section.kind is EntityKind.PERSON:
                    gender = entity.gender or Gender.UNKNOWN.value
                    container.append(render_person(entity, handle, change, gender))
                else:
                    container.append(RENDERERS[section.kind](entity, handle, change))

        if synthesized:
            log.debug("Synthesized %d handle(s) while serializing", synthesized)
        return root

    def serialize(self, doc: Document) -> str:
        root = self.build_tree(doc)
        if self.indent > 0:
            ET.indent(root, space=" " * self.indent)

        # ElementTree escapes CR only inside attributes; a raw CR in text
        # would come back as LF after XML line-end normalization.
        body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
        return "\n".join([XML_DECLARATION, doctype_for(self.schema_version), body]) + "\n"


def serialize(doc: Document, *, clock: Callable[[], float] = time.time) -> str:
    """Render ``doc`` as Gramps XML text using the configured target schema."""
    text = Serializer(clock=clock).serialize(doc)
    log.info(
        "Serialized Gramps XML %s",
        " ".join(f"{name}={count}" for name, count in doc.counts().items()),
    )
    return text
