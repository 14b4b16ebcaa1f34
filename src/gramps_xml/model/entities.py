from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from gramps_xml.schema.vocabulary import SECTIONS, EntityKind

if TYPE_CHECKING:
    from gramps_xml.model.violations import Violation


# -----------------------------
# Small records
# -----------------------------

@dataclass(slots=True)
class Name:
    """
    A person's name. The first Name on a Person is the primary one.
    """
    first: str = ""
    surname: str = ""
    suffix: str = ""
    title: str = ""
    type: Optional[str] = None  # "Birth Name", "Married Name", ...


@dataclass(slots=True)
class ChildRef:
    hlink: str = ""
    mrel: Optional[str] = None
    frel: Optional[str] = None


@dataclass(slots=True)
class EventRef:
    hlink: str = ""
    role: Optional[str] = None


@dataclass(slots=True)
class RepoRef:
    hlink: str = ""
    medium: Optional[str] = None


@dataclass(slots=True)
class Researcher:
    resname: str = ""
    resaddr: str = ""
    reslocality: str = ""
    rescity: str = ""
    resstate: str = ""
    rescountry: str = ""
    respostal: str = ""
    resphone: str = ""
    resemail: str = ""


@dataclass(slots=True)
class Header:
    created_date: Optional[str] = None
    version: Optional[str] = None
    researcher: Optional[Researcher] = None
    mediapath: Optional[str] = None


# -----------------------------
# Primary objects
# -----------------------------
# Every primary object carries handle/id/change. ``change`` is seconds since
# the epoch; None means unset, never zero.

@dataclass(slots=True)
class Person:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    priv: Optional[bool] = None
    gender: Optional[str] = None
    names: List[Name] = field(default_factory=list)

    event_refs: List[EventRef] = field(default_factory=list)
    childof: List[str] = field(default_factory=list)
    parentin: List[str] = field(default_factory=list)
    citation_refs: List[str] = field(default_factory=list)
    note_refs: List[str] = field(default_factory=list)
    tag_refs: List[str] = field(default_factory=list)

    @property
    def primary_name(self) -> Optional[Name]:
        return self.names[0] if self.names else None


@dataclass(slots=True)
class Family:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    priv: Optional[bool] = None
    rel_type: Optional[str] = None
    father: Optional[str] = None
    mother: Optional[str] = None
    children: List[ChildRef] = field(default_factory=list)

    event_refs: List[EventRef] = field(default_factory=list)
    citation_refs: List[str] = field(default_factory=list)
    note_refs: List[str] = field(default_factory=list)
    tag_refs: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Event:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    type: str = ""
    description: str = ""
    date: Optional[str] = None  # verbatim dateval/@val, never interpreted
    place: Optional[str] = None

    citation_refs: List[str] = field(default_factory=list)
    note_refs: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Place:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    type: str = ""
    title: str = ""
    names: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Source:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    title: str = ""
    author: str = ""
    pubinfo: str = ""
    abbrev: str = ""

    repo_refs: List[RepoRef] = field(default_factory=list)
    note_refs: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Citation:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    page: str = ""
    confidence: Optional[str] = None
    source: Optional[str] = None

    note_refs: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Repository:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    name: str = ""
    type: str = ""


@dataclass(slots=True)
class Note:
    handle: Optional[str] = None
    id: Optional[str] = None
    change: Optional[int] = None
    type: str = ""
    text: str = ""


@dataclass(slots=True)
class Tag:
    handle: Optional[str] = None
    name: str = ""
    color: str = ""
    priority: Optional[int] = None
    change: Optional[int] = None


# -----------------------------
# Document
# -----------------------------

@dataclass(slots=True)
class Document:
    """
    Complete in-memory contents of one Gramps XML file.

    Collections are lists in document order. Handles are not used as keys
    because a broken file may declare the same handle twice, and that has to
    survive until the validator reports it.
    """
    header: Optional[Header] = None
    # Version found in the source file's namespace; the writer targets the
    # configured version instead, so this is informational only.
    schema_version: Optional[str] = field(default=None, compare=False)

    people: List[Person] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    places: List[Place] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    citations: List[Citation] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    tags: List[Tag] = field(default_factory=list)

    # Values the parser could not type; reported again by the validator.
    parse_issues: List["Violation"] = field(default_factory=list, compare=False, repr=False)

    def iter_entities(self) -> Iterator[Tuple[EntityKind, object]]:
        """Yield ``(kind, entity)`` for every primary object, in section order."""
        for section in SECTIONS:
            for entity in getattr(self, section.attribute):
                yield section.kind, entity

    def counts(self) -> dict:
        return {section.name: len(getattr(self, section.attribute)) for section in SECTIONS}

    def find(self, handle: str) -> Optional[object]:
        for _, entity in self.iter_entities():
            if entity.handle == handle:
                return entity
        return None

    def get_person(self, handle: str) -> Optional[Person]:
        return next((p for p in self.people if p.handle == handle), None)

    def get_family(self, handle: str) -> Optional[Family]:
        return next((f for f in self.families if f.handle == handle), None)
