from __future__ import annotations

from gramps_xml.model.entities import ChildRef, EventRef, Family
from gramps_xml.reader.utils import (
    IssueCollector,
    _child_attr,
    _child_elements,
    _child_hlink,
    _hlinks,
    _priv_attr,
)
from gramps_xml.schema.vocabulary import EntityKind


def build_family(node, issues: IssueCollector) -> Family:
    """
    Build a Family from a ``<family>`` element.

    PURE FUNCTION:
      - no lookup of the father/mother/children handles
      - a reference without hlink is kept as "" so the validator can
        report it
    """
    family = Family(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.FAMILY.value),
        priv=_priv_attr(node),
        rel_type=_child_attr(node, "rel", "type"),
        father=_child_hlink(node, "father"),
        mother=_child_hlink(node, "mother"),
    )

    for child in _child_elements(node, "childref"):
        family.children.append(
            ChildRef(
                hlink=child.get("hlink") or "",
                mrel=child.get("mrel"),
                frel=child.get("frel"),
            )
        )

    for ref in _child_elements(node, "eventref"):
        family.event_refs.append(EventRef(hlink=ref.get("hlink") or "", role=ref.get("role")))

    family.citation_refs.extend(_hlinks(node, "citationref"))
    family.note_refs.extend(_hlinks(node, "noteref"))
    family.tag_refs.extend(_hlinks(node, "tagref"))

    return family
