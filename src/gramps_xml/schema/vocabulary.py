"""
Fixed vocabulary of the Gramps XML interchange format.

Pure data: entity kinds, the section layout of a ``<database>`` document and
the closed enumerations the validator checks against. Values are the wire
values written by Gramps (``grampsxml.dtd`` 1.7.x).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Tuple


DEFAULT_SCHEMA_VERSION = "1.7.2"
ROOT_TAG = "database"
NAMESPACE_TEMPLATE = "http://gramps-project.org/xml/{version}/"
PUBLIC_ID_TEMPLATE = "-//Gramps//DTD Gramps XML {version}//EN"
SYSTEM_ID_TEMPLATE = "http://gramps-project.org/xml/{version}/grampsxml.dtd"


def namespace_for(version: str) -> str:
    return NAMESPACE_TEMPLATE.format(version=version)


def doctype_for(version: str) -> str:
    return (
        f'<!DOCTYPE {ROOT_TAG} PUBLIC "{PUBLIC_ID_TEMPLATE.format(version=version)}"\n'
        f'"{SYSTEM_ID_TEMPLATE.format(version=version)}">'
    )


def version_from_namespace(namespace: str | None) -> str | None:
    """Extract ``1.7.2`` from ``http://gramps-project.org/xml/1.7.2/``."""
    if not namespace:
        return None
    parts = [p for p in namespace.rstrip("/").split("/") if p]
    if not parts:
        return None
    candidate = parts[-1]
    if all(piece.isdigit() for piece in candidate.split(".")):
        return candidate
    return None


class EntityKind(str, Enum):
    PERSON = "person"
    FAMILY = "family"
    EVENT = "event"
    PLACE = "place"
    SOURCE = "source"
    CITATION = "citation"
    REPOSITORY = "repository"
    NOTE = "note"
    TAG = "tag"


@dataclass(frozen=True, slots=True)
class Section:
    """One top-level container and the element each of its entries uses."""
    name: str
    element: str
    kind: EntityKind
    attribute: str  # Document attribute holding the collection


# Order is fixed by the DTD; header precedes all of these.
SECTIONS: Tuple[Section, ...] = (
    Section("people", "person", EntityKind.PERSON, "people"),
    Section("families", "family", EntityKind.FAMILY, "families"),
    Section("events", "event", EntityKind.EVENT, "events"),
    Section("places", "placeobj", EntityKind.PLACE, "places"),
    Section("sources", "source", EntityKind.SOURCE, "sources"),
    Section("citations", "citation", EntityKind.CITATION, "citations"),
    Section("repositories", "repository", EntityKind.REPOSITORY, "repositories"),
    Section("notes", "note", EntityKind.NOTE, "notes"),
    Section("tags", "tag", EntityKind.TAG, "tags"),
)

SECTION_ORDER: Tuple[str, ...] = ("header",) + tuple(s.name for s in SECTIONS)
SECTIONS_BY_KIND: Dict[EntityKind, Section] = {s.kind: s for s in SECTIONS}


# -----------------------------
# Closed enumerations
# -----------------------------

class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"


class Confidence(str, Enum):
    VERY_LOW = "0"
    LOW = "1"
    NORMAL = "2"
    HIGH = "3"
    VERY_HIGH = "4"


class ChildRelation(str, Enum):
    NONE = "None"
    BIRTH = "Birth"
    ADOPTED = "Adopted"
    STEPCHILD = "Stepchild"
    SPONSORED = "Sponsored"
    FOSTER = "Foster"
    PRIVATE = "Private"
    UNKNOWN = "Unknown"
    CUSTOM = "Custom"


def _values(enum_cls) -> FrozenSet[str]:
    return frozenset(member.value for member in enum_cls)


GENDER_VALUES = _values(Gender)
CONFIDENCE_VALUES = _values(Confidence)
CHILD_RELATION_VALUES = _values(ChildRelation)

RESEARCHER_FIELDS: Tuple[str, ...] = (
    "resname",
    "resaddr",
    "reslocality",
    "rescity",
    "resstate",
    "rescountry",
    "respostal",
    "resphone",
    "resemail",
)
