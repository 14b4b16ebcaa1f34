"""
Element renderers, one per entity kind.

Each renderer receives a fully-defaulted view of its entity (handle and
change already filled in by the serializer) and returns an ElementTree
element with children in DTD order. Renderers never look at other entities.
"""

from __future__ import annotations

from typing import Iterable, Optional
from xml.etree.ElementTree import Element, SubElement

from gramps_xml.model.entities import (
    Citation,
    Event,
    Family,
    Header,
    Name,
    Note,
    Person,
    Place,
    Repository,
    Source,
    Tag,
)
from gramps_xml.schema.vocabulary import RESEARCHER_FIELDS

# Required by the DTD; written when a Tag leaves it unset.
DEFAULT_TAG_PRIORITY = 0


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def _set_attr(elem: Element, name: str, value) -> None:
    if value is None:
        return
    elem.set(name, str(value))


def _text_child(parent: Element, name: str, text: Optional[str], *, always: bool = False) -> None:
    if text is None or (text == "" and not always):
        return
    SubElement(parent, name).text = text


def _refs(parent: Element, name: str, handles: Iterable[str]) -> None:
    for handle in handles:
        SubElement(parent, name, hlink=handle)


def _primary_attrs(elem: Element, entity, handle: str, change: int) -> None:
    elem.set("handle", handle)
    elem.set("change", str(change))
    _set_attr(elem, "id", getattr(entity, "id", None))
    priv = getattr(entity, "priv", None)
    if priv is not None:
        elem.set("priv", "1" if priv else "0")


# ----------------------------------------------------------------------
# Renderers
# ----------------------------------------------------------------------

def render_header(header: Header) -> Element:
    elem = Element("header")
    created = SubElement(elem, "created")
    _set_attr(created, "date", header.created_date)
    _set_attr(created, "version", header.version)

    if header.researcher is not None:
        researcher = SubElement(elem, "researcher")
        for name in RESEARCHER_FIELDS:
            _text_child(researcher, name, getattr(header.researcher, name))

    _text_child(elem, "mediapath", header.mediapath, always=True)
    return elem


def render_name(name: Name) -> Element:
    elem = Element("name")
    _set_attr(elem, "type", name.type)
    _text_child(elem, "first", name.first)
    _text_child(elem, "surname", name.surname)
    _text_child(elem, "suffix", name.suffix)
    _text_child(elem, "title", name.title)
    return elem


def render_person(person: Person, handle: str, change: int, gender: str) -> Element:
    elem = Element("person")
    _primary_attrs(elem, person, handle, change)

    SubElement(elem, "gender").text = gender
    for name in person.names:
        elem.append(render_name(name))
    for ref in person.event_refs:
        eventref = SubElement(elem, "eventref", hlink=ref.hlink)
        _set_attr(eventref, "role", ref.role)
    _refs(elem, "childof", person.childof)
    _refs(elem, "parentin", person.parentin)
    _refs(elem, "noteref", person.note_refs)
    _refs(elem, "citationref", person.citation_refs)
    _refs(elem, "tagref", person.tag_refs)
    return elem


def render_family(family: Family, handle: str, change: int) -> Element:
    elem = Element("family")
    _primary_attrs(elem, family, handle, change)

    if family.rel_type is not None:
        SubElement(elem, "rel", type=family.rel_type)
    if family.father is not None:
        SubElement(elem, "father", hlink=family.father)
    if family.mother is not None:
        SubElement(elem, "mother", hlink=family.mother)
    for ref in family.event_refs:
        eventref = SubElement(elem, "eventref", hlink=ref.hlink)
        _set_attr(eventref, "role", ref.role)
    for child in family.children:
        childref = SubElement(elem, "childref", hlink=child.hlink)
        _set_attr(childref, "mrel", child.mrel)
        _set_attr(childref, "frel", child.frel)
    _refs(elem, "noteref", family.note_refs)
    _refs(elem, "citationref", family.citation_refs)
    _refs(elem, "tagref", family.tag_refs)
    return elem


def render_event(event: Event, handle: str, change: int) -> Element:
    elem = Element("event")
    _primary_attrs(elem, event, handle, change)

    _text_child(elem, "type", event.type)
    if event.date is not None:
        SubElement(elem, "dateval", val=event.date)
    if event.place is not None:
        SubElement(elem, "place", hlink=event.place)
    _text_child(elem, "description", event.description)
    _refs(elem, "noteref", event.note_refs)
    _refs(elem, "citationref", event.citation_refs)
    return elem


def render_place(place: Place, handle: str, change: int) -> Element:
    elem = Element("placeobj")
    _primary_attrs(elem, place, handle, change)
    if place.type:
        elem.set("type", place.type)

    _text_child(elem, "ptitle", place.title)
    for value in place.names:
        SubElement(elem, "pname", value=value)
    return elem


def render_source(source: Source, handle: str, change: int) -> Element:
    elem = Element("source")
    _primary_attrs(elem, source, handle, change)

    _text_child(elem, "stitle", source.title)
    _text_child(elem, "sauthor", source.author)
    _text_child(elem, "spubinfo", source.pubinfo)
    _text_child(elem, "sabbrev", source.abbrev)
    _refs(elem, "noteref", source.note_refs)
    for ref in source.repo_refs:
        reporef = SubElement(elem, "reporef", hlink=ref.hlink)
        _set_attr(reporef, "medium", ref.medium)
    return elem


def render_citation(citation: Citation, handle: str, change: int) -> Element:
    elem = Element("citation")
    _primary_attrs(elem, citation, handle, change)

    _text_child(elem, "page", citation.page)
    _text_child(elem, "confidence", citation.confidence, always=True)
    _refs(elem, "noteref", citation.note_refs)
    if citation.source is not None:
        SubElement(elem, "sourceref", hlink=citation.source)
    return elem


def render_repository(repository: Repository, handle: str, change: int) -> Element:
    elem = Element("repository")
    _primary_attrs(elem, repository, handle, change)

    # Both are mandatory children in the DTD.
    _text_child(elem, "rname", repository.name, always=True)
    _text_child(elem, "type", repository.type, always=True)
    return elem


def render_note(note: Note, handle: str, change: int) -> Element:
    elem = Element("note")
    _primary_attrs(elem, note, handle, change)
    elem.set("type", note.type)

    _text_child(elem, "text", note.text, always=True)
    return elem


def render_tag(tag: Tag, handle: str, change: int) -> Element:
    elem = Element("tag")
    elem.set("handle", handle)
    elem.set("change", str(change))
    elem.set("name", tag.name)
    elem.set("color", tag.color)
    elem.set("priority", str(DEFAULT_TAG_PRIORITY if tag.priority is None else tag.priority))
    return elem
