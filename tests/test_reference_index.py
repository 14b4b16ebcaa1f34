from gramps_xml.model.entities import (
    ChildRef,
    Document,
    EventRef,
    Family,
    Note,
    Person,
)
from gramps_xml.reader import parse
from gramps_xml.schema.vocabulary import EntityKind
from gramps_xml.validation import build_reference_index, iter_references


def test_index_maps_every_handle_to_its_kind(sample_text):
    index = build_reference_index(parse(sample_text))

    assert len(index) == 12
    assert index.kind_of("_P0001") is EntityKind.PERSON
    assert index.kind_of("_F0001") is EntityKind.FAMILY
    assert index.kind_of("_L0001") is EntityKind.PLACE
    assert index.kind_of("_T0001") is EntityKind.TAG
    assert index.kind_of("_nope") is None
    assert "_N0001" in index
    assert index.duplicates() == {}


def test_first_declaration_wins():
    doc = Document(people=[Person(handle="x")], notes=[Note(handle="x")])
    index = build_reference_index(doc)

    assert index.kind_of("x") is EntityKind.PERSON
    assert len(index.duplicates()["x"]) == 2


def test_entities_without_handle_are_not_indexed():
    index = build_reference_index(Document(people=[Person(), Person(handle="")]))
    assert len(index) == 0


def test_family_references():
    family = Family(
        handle="f1",
        father="p1",
        mother="",
        children=[ChildRef(hlink="p3"), ChildRef(hlink="")],
        event_refs=[EventRef(hlink="e1")],
        note_refs=["n1"],
    )
    refs = [(r.field, r.handle, r.expected) for r in iter_references(EntityKind.FAMILY, family)]

    assert refs == [
        ("father", "p1", EntityKind.PERSON),
        ("childref[0]", "p3", EntityKind.PERSON),
        ("eventref[0]", "e1", EntityKind.EVENT),
        ("noteref[0]", "n1", EntityKind.NOTE),
    ]


def test_person_references():
    person = Person(handle="p1", childof=["f1"], parentin=["f2"], tag_refs=["t1"])
    refs = [(r.field, r.expected) for r in iter_references(EntityKind.PERSON, person)]

    assert refs == [
        ("childof[0]", EntityKind.FAMILY),
        ("parentin[0]", EntityKind.FAMILY),
        ("tagref[0]", EntityKind.TAG),
    ]
