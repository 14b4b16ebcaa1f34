from __future__ import annotations

from gramps_xml.model.entities import Header, Researcher
from gramps_xml.reader.utils import _first_child, _optional_child_text, _child_text
from gramps_xml.schema.vocabulary import RESEARCHER_FIELDS


def build_header(node) -> Header:
    """
    Build a Header from a ``<header>`` element.

    PURE FUNCTION: absent sub-elements stay None, they are never invented.
    """
    header = Header()

    created = _first_child(node, "created")
    if created is not None:
        header.created_date = created.get("date")
        header.version = created.get("version")

    researcher = _first_child(node, "researcher")
    if researcher is not None:
        header.researcher = Researcher(
            **{name: _child_text(researcher, name) for name in RESEARCHER_FIELDS}
        )

    header.mediapath = _optional_child_text(node, "mediapath")
    return header
