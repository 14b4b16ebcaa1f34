import pytest

from gramps_xml.core.exceptions import ParseError
from gramps_xml.model.violations import ViolationCode
from gramps_xml.reader import parse


def wrap(body: str, ns: str = ' xmlns="http://gramps-project.org/xml/1.7.2/"') -> str:
    return f"<database{ns}>{body}</database>"


def test_parse_sample_counts(sample_text):
    doc = parse(sample_text)

    assert doc.schema_version == "1.7.2"
    assert doc.counts() == {
        "people": 3,
        "families": 1,
        "events": 2,
        "places": 1,
        "sources": 1,
        "citations": 1,
        "repositories": 1,
        "notes": 1,
        "tags": 1,
    }
    assert doc.parse_issues == []


def test_parse_accepts_bytes(sample_path):
    doc = parse(sample_path.read_bytes())
    assert len(doc.people) == 3


def test_header_fields(sample_text):
    header = parse(sample_text).header

    assert header.created_date == "2024-03-01"
    assert header.version == "5.2.0"
    assert header.researcher.resname == "Ada Archivist"
    assert header.researcher.rescity == "Leeds"
    assert header.researcher.resaddr == ""
    assert header.mediapath == ""


def test_person_fields(sample_text):
    doc = parse(sample_text)
    john, mary, alex = doc.people

    assert john.handle == "_P0001"
    assert john.id == "I0001"
    assert john.change == 1709251200
    assert john.gender == "M"
    assert john.primary_name.first == "John"
    assert john.primary_name.surname == "Smith"
    assert john.primary_name.type == "Birth Name"
    assert john.event_refs[0].hlink == "_E0001"
    assert john.event_refs[0].role == "Primary"
    assert john.parentin == ["_F0001"]
    assert john.citation_refs == ["_C0001"]

    # Name order is document order; the first one is primary.
    assert [n.type for n in mary.names] == ["Birth Name", "Married Name"]
    assert mary.primary_name.surname == "Jones"

    assert alex.childof == ["_F0001"]
    assert alex.note_refs == ["_N0001"]
    assert alex.tag_refs == ["_T0001"]


def test_family_fields(sample_text):
    family = parse(sample_text).families[0]

    assert family.rel_type == "Married"
    assert family.father == "_P0001"
    assert family.mother == "_P0002"
    assert len(family.children) == 1
    assert family.children[0].hlink == "_P0003"
    assert family.children[0].mrel == "Birth"
    assert family.children[0].frel == "Adopted"
    assert family.event_refs[0].hlink == "_E0002"


def test_record_fields(sample_text):
    doc = parse(sample_text)

    birth = doc.events[0]
    assert birth.type == "Birth"
    assert birth.date == "1850-04-12"
    assert birth.place == "_L0001"
    assert birth.description == "Birth of John Smith"
    assert doc.events[1].description == ""

    place = doc.places[0]
    assert place.type == "City"
    assert place.title == "Leeds, Yorkshire, England"
    assert place.names == ["Leeds"]

    source = doc.sources[0]
    assert source.title == "Parish Register of St Peter"
    assert source.author == "Church of England"
    assert source.repo_refs[0].hlink == "_R0001"
    assert source.repo_refs[0].medium == "Book"

    citation = doc.citations[0]
    assert citation.page == "folio 12"
    assert citation.confidence == "3"
    assert citation.source == "_S0001"

    repo = doc.repositories[0]
    assert repo.name == "West Yorkshire Archive Service"
    assert repo.type == "Archive"

    tag = doc.tags[0]
    assert tag.name == "ToDo"
    assert tag.priority == 0


def test_note_text_is_kept_verbatim(sample_text):
    note = parse(sample_text).notes[0]
    assert note.type == "Person Note"
    assert note.text == "Raised by the Smiths.\nSecond line kept as written."


def test_missing_sections_are_empty():
    doc = parse(wrap('<people><person handle="_A"><gender>F</gender></person></people>'))

    assert len(doc.people) == 1
    assert doc.header is None
    assert doc.families == []
    assert doc.tags == []


def test_missing_gender_is_none():
    doc = parse(wrap('<people><person handle="_A"/></people>'))
    assert doc.people[0].gender is None


def test_out_of_enum_values_are_kept():
    doc = parse(
        wrap(
            '<people><person handle="_A"><gender>X</gender></person></people>'
            '<citations><citation handle="_C"><confidence>7</confidence></citation></citations>'
        )
    )
    assert doc.people[0].gender == "X"
    assert doc.citations[0].confidence == "7"


def test_unknown_elements_are_skipped():
    doc = parse(
        wrap(
            "<objects><object handle='_O'/></objects>"
            "<people>"
            "<person handle='_A'><gender>M</gender><address><city>York</city></address></person>"
            "<bookmark hlink='_A'/>"
            "</people>"
        )
    )
    assert len(doc.people) == 1
    assert doc.people[0].gender == "M"


def test_namespace_is_optional():
    doc = parse(wrap("<people><person handle='_A'><gender>U</gender></person></people>", ns=""))

    assert doc.schema_version is None
    assert doc.people[0].handle == "_A"


def test_older_namespace_version_is_recorded():
    doc = parse(wrap("", ns=' xmlns="http://gramps-project.org/xml/1.5.0/"'))
    assert doc.schema_version == "1.5.0"


def test_non_integer_change_is_recorded_as_issue():
    doc = parse(wrap('<people><person handle="_A" id="I1" change="soon"><gender>M</gender></person></people>'))

    assert doc.people[0].change is None
    assert len(doc.parse_issues) == 1
    issue = doc.parse_issues[0]
    assert issue.code is ViolationCode.INVALID_VALUE
    assert issue.field == "change"
    assert issue.handle == "_A"
    assert issue.identifier == "I1"


def test_priv_flag():
    doc = parse(
        wrap(
            '<people>'
            '<person handle="_A" priv="1"><gender>M</gender></person>'
            '<person handle="_B"><gender>F</gender></person>'
            '</people>'
        )
    )
    assert doc.people[0].priv is True
    assert doc.people[1].priv is None


def test_malformed_input_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse("<database><people><person")

    assert excinfo.value.kind == "MalformedInput"
    assert excinfo.value.line is not None


def test_wrong_root_raises_parse_error():
    with pytest.raises(ParseError):
        parse("<gedcom><people/></gedcom>")


def test_entity_declarations_are_refused():
    text = '<!DOCTYPE database [<!ENTITY boom "boom">]><database>&boom;</database>'
    with pytest.raises(ParseError):
        parse(text)


def test_parse_calls_are_independent(sample_text):
    first = parse(sample_text)
    second = parse(sample_text)

    assert first == second
    assert first.people is not second.people


def test_references_without_hlink_are_kept():
    doc = parse(
        wrap(
            "<people><person handle='_A'><gender>M</gender>"
            "<eventref role='Primary'/><childof hlink=''/><noteref hlink='_N'/>"
            "</person></people>"
            "<families><family handle='_F'><father/><childref/></family></families>"
            "<sources><source handle='_S'><reporef medium='Book'/></source></sources>"
        )
    )
    person = doc.people[0]

    assert person.event_refs[0].hlink == ""
    assert person.event_refs[0].role == "Primary"
    assert person.childof == [""]
    assert person.note_refs == ["_N"]
    assert doc.families[0].father == ""
    assert doc.families[0].mother is None
    assert doc.families[0].children[0].hlink == ""
    assert doc.sources[0].repo_refs[0].hlink == ""
