"""
Handle -> entity kind index.

Built once per Document and thrown away afterwards. Besides the lookup map it
keeps every declaration of a handle so duplicates can be reported with all
of their occurrences.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from gramps_xml.model.entities import Document
from gramps_xml.model.violations import Occurrence
from gramps_xml.schema.vocabulary import SECTIONS, EntityKind


@dataclass(frozen=True, slots=True)
class Reference:
    """One hlink held by an entity."""
    field: str
    handle: str
    expected: EntityKind


@dataclass(slots=True)
class ReferenceIndex:
    kinds: Dict[str, EntityKind] = field(default_factory=dict)
    occurrences: Dict[str, List[Occurrence]] = field(default_factory=dict)

    def __contains__(self, handle: object) -> bool:
        return handle in self.kinds

    def __len__(self) -> int:
        return len(self.kinds)

    def kind_of(self, handle: str) -> Optional[EntityKind]:
        return self.kinds.get(handle)

    def duplicates(self) -> Dict[str, List[Occurrence]]:
        return {h: occ for h, occ in self.occurrences.items() if len(occ) > 1}


def build_reference_index(doc: Document) -> ReferenceIndex:
    """
    Index every declared handle.

    The first declaration of a handle decides its kind; later ones only add
    occurrences. Entities without a handle are not indexed.
    """
    index = ReferenceIndex()

    for section in SECTIONS:
        for position, entity in enumerate(getattr(doc, section.attribute)):
            handle = entity.handle
            if not handle:
                continue
            index.kinds.setdefault(handle, section.kind)
            index.occurrences.setdefault(handle, []).append(
                Occurrence(
                    kind=section.kind.value,
                    identifier=getattr(entity, "id", None),
                    position=position,
                )
            )

    return index


# ----------------------------------------------------------------------
# Reference enumeration
# ----------------------------------------------------------------------

def _list_refs(name: str, handles: List[str], expected: EntityKind) -> Iterator[Reference]:
    for i, handle in enumerate(handles):
        yield Reference(f"{name}[{i}]", handle, expected)


def iter_references(kind: EntityKind, entity, *, include_empty: bool = False) -> Iterator[Reference]:
    """
    Yield every reference held by ``entity``.

    References with an empty hlink are a required-field problem, not a
    resolution problem; they are only yielded with ``include_empty``.
    Single references that are absent (None) are never yielded.
    """
    refs: List[Reference] = []

    if kind is EntityKind.PERSON:
        refs += [Reference(f"eventref[{i}]", r.hlink, EntityKind.EVENT) for i, r in enumerate(entity.event_refs)]
        refs += _list_refs("childof", entity.childof, EntityKind.FAMILY)
        refs += _list_refs("parentin", entity.parentin, EntityKind.FAMILY)

    elif kind is EntityKind.FAMILY:
        if entity.father is not None:
            refs.append(Reference("father", entity.father, EntityKind.PERSON))
        if entity.mother is not None:
            refs.append(Reference("mother", entity.mother, EntityKind.PERSON))
        refs += [Reference(f"childref[{i}]", c.hlink, EntityKind.PERSON) for i, c in enumerate(entity.children)]
        refs += [Reference(f"eventref[{i}]", r.hlink, EntityKind.EVENT) for i, r in enumerate(entity.event_refs)]

    elif kind is EntityKind.EVENT:
        if entity.place is not None:
            refs.append(Reference("place", entity.place, EntityKind.PLACE))

    elif kind is EntityKind.SOURCE:
        refs += [Reference(f"reporef[{i}]", r.hlink, EntityKind.REPOSITORY) for i, r in enumerate(entity.repo_refs)]

    elif kind is EntityKind.CITATION:
        if entity.source is not None:
            refs.append(Reference("sourceref", entity.source, EntityKind.SOURCE))

    for name, attr, expected in (
        ("citationref", "citation_refs", EntityKind.CITATION),
        ("noteref", "note_refs", EntityKind.NOTE),
        ("tagref", "tag_refs", EntityKind.TAG),
    ):
        refs += _list_refs(name, getattr(entity, attr, None) or [], expected)

    for ref in refs:
        if ref.handle or include_empty:
            yield ref


def iter_document_references(
    doc: Document, *, include_empty: bool = False
) -> Iterator[Tuple[EntityKind, object, Reference]]:
    for kind, entity in doc.iter_entities():
        for ref in iter_references(kind, entity, include_empty=include_empty):
            yield kind, entity, ref
