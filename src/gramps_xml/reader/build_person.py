from __future__ import annotations

from gramps_xml.model.entities import EventRef, Name, Person
from gramps_xml.reader.utils import (
    IssueCollector,
    _child_elements,
    _child_text,
    _hlinks,
    _optional_child_text,
    _priv_attr,
)
from gramps_xml.schema.vocabulary import EntityKind


def build_name(node) -> Name:
    return Name(
        first=_child_text(node, "first"),
        surname=_child_text(node, "surname"),
        suffix=_child_text(node, "suffix"),
        title=_child_text(node, "title"),
        type=node.get("type"),
    )


def build_person(node, issues: IssueCollector) -> Person:
    """
    Build a Person from a ``<person>`` element.

    PURE FUNCTION:
      - names keep document order (the first one is primary)
      - gender is kept verbatim, even outside M/F/U
      - references are captured as handles only; resolution is the
        validator's job. A reference without hlink is kept as ""
    """
    person = Person(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.PERSON.value),
        priv=_priv_attr(node),
        gender=_optional_child_text(node, "gender"),
    )

    for name_node in _child_elements(node, "name"):
        person.names.append(build_name(name_node))

    for ref in _child_elements(node, "eventref"):
        person.event_refs.append(EventRef(hlink=ref.get("hlink") or "", role=ref.get("role")))

    person.childof.extend(_hlinks(node, "childof"))
    person.parentin.extend(_hlinks(node, "parentin"))
    person.citation_refs.extend(_hlinks(node, "citationref"))
    person.note_refs.extend(_hlinks(node, "noteref"))
    person.tag_refs.extend(_hlinks(node, "tagref"))

    return person
