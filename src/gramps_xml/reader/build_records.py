from __future__ import annotations

from gramps_xml.model.entities import (
    Citation,
    Event,
    Note,
    Place,
    RepoRef,
    Repository,
    Source,
    Tag,
)
from gramps_xml.reader.utils import (
    IssueCollector,
    _child_attr,
    _child_elements,
    _child_hlink,
    _child_text,
    _hlinks,
    _optional_child_text,
)
from gramps_xml.schema.vocabulary import EntityKind


def build_event(node, issues: IssueCollector) -> Event:
    event = Event(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.EVENT.value),
        type=_child_text(node, "type"),
        description=_child_text(node, "description"),
        date=_child_attr(node, "dateval", "val"),
        place=_child_hlink(node, "place"),
    )
    event.citation_refs.extend(_hlinks(node, "citationref"))
    event.note_refs.extend(_hlinks(node, "noteref"))
    return event


def build_place(node, issues: IssueCollector) -> Place:
    place = Place(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.PLACE.value),
        type=node.get("type") or "",
        title=_child_text(node, "ptitle"),
    )
    for pname in _child_elements(node, "pname"):
        value = pname.get("value")
        if value is not None:
            place.names.append(value)
    return place


def build_source(node, issues: IssueCollector) -> Source:
    source = Source(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.SOURCE.value),
        title=_child_text(node, "stitle"),
        author=_child_text(node, "sauthor"),
        pubinfo=_child_text(node, "spubinfo"),
        abbrev=_child_text(node, "sabbrev"),
    )
    source.note_refs.extend(_hlinks(node, "noteref"))
    for ref in _child_elements(node, "reporef"):
        source.repo_refs.append(RepoRef(hlink=ref.get("hlink") or "", medium=ref.get("medium")))
    return source


def build_citation(node, issues: IssueCollector) -> Citation:
    citation = Citation(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.CITATION.value),
        page=_child_text(node, "page"),
        confidence=_optional_child_text(node, "confidence"),
        source=_child_hlink(node, "sourceref"),
    )
    citation.note_refs.extend(_hlinks(node, "noteref"))
    return citation


def build_repository(node, issues: IssueCollector) -> Repository:
    return Repository(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.REPOSITORY.value),
        name=_child_text(node, "rname"),
        type=_child_text(node, "type"),
    )


def build_note(node, issues: IssueCollector) -> Note:
    """Note text is kept exactly, including line breaks and edge whitespace."""
    return Note(
        handle=node.get("handle"),
        id=node.get("id"),
        change=issues.int_attr(node, "change", kind=EntityKind.NOTE.value),
        type=node.get("type") or "",
        text=_child_text(node, "text"),
    )


def build_tag(node, issues: IssueCollector) -> Tag:
    return Tag(
        handle=node.get("handle"),
        name=node.get("name") or "",
        color=node.get("color") or "",
        priority=issues.int_attr(node, "priority", kind=EntityKind.TAG.value),
        change=issues.int_attr(node, "change", kind=EntityKind.TAG.value),
    )
