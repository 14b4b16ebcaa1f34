from __future__ import annotations

from .entities import (
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
)
from .violations import Occurrence, Violation, ViolationCode

__all__ = [
    "Occurrence",
    "Violation",
    "ViolationCode",
    "ChildRef",
    "Citation",
    "Document",
    "Event",
    "EventRef",
    "Family",
    "Header",
    "Name",
    "Note",
    "Person",
    "Place",
    "RepoRef",
    "Repository",
    "Researcher",
    "Source",
    "Tag",
]
