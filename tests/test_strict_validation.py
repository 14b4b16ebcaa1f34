from lxml import etree

from gramps_xml.loader import load_schema_definition, resolve_schema_path
from gramps_xml.model.entities import Document, Header, Name, Person, Tag
from gramps_xml.model.violations import ViolationCode
from gramps_xml.validation import dtd_violations, validate, validate_text

# Just enough of grampsxml.dtd to cover a header and people.
MINI_DTD = """
<!ELEMENT database (header, people?, tags?)>
<!ATTLIST database xmlns CDATA #IMPLIED>
<!ELEMENT header (created, researcher?, mediapath?)>
<!ELEMENT created EMPTY>
<!ATTLIST created date CDATA #IMPLIED version CDATA #IMPLIED>
<!ELEMENT researcher (resname?)>
<!ELEMENT resname (#PCDATA)>
<!ELEMENT mediapath (#PCDATA)>
<!ELEMENT people (person*)>
<!ELEMENT person (gender, name*)>
<!ATTLIST person
        id     CDATA #IMPLIED
        handle CDATA #REQUIRED
        priv   (0|1) #IMPLIED
        change CDATA #REQUIRED>
<!ELEMENT gender (#PCDATA)>
<!ELEMENT name (first?, surname?)>
<!ATTLIST name type CDATA #IMPLIED>
<!ELEMENT first (#PCDATA)>
<!ELEMENT surname (#PCDATA)>
<!ELEMENT tags (tag*)>
<!ELEMENT tag EMPTY>
<!ATTLIST tag
        handle   CDATA #REQUIRED
        change   CDATA #REQUIRED
        name     CDATA #REQUIRED
        color    CDATA #REQUIRED
        priority CDATA #REQUIRED>
"""


def write_dtd(tmp_path):
    path = tmp_path / "mini.dtd"
    path.write_text(MINI_DTD, encoding="utf-8")
    return path


def person_document() -> Document:
    return Document(
        header=Header(created_date="2024-01-01", version="5.2.0"),
        people=[Person(handle="_P1", id="I1", change=1, gender="M", names=[Name(first="A", surname="B")])],
    )


def test_load_schema_definition(tmp_path):
    dtd = load_schema_definition(write_dtd(tmp_path))
    assert isinstance(dtd, etree.DTD)


def test_missing_schema_returns_none(tmp_path):
    assert load_schema_definition(tmp_path / "nowhere.dtd") is None


def test_schema_path_from_environment(tmp_path, monkeypatch):
    path = write_dtd(tmp_path)
    monkeypatch.setenv("GRAMPS_XML_DTD", str(path))

    assert resolve_schema_path() == path
    assert load_schema_definition() is not None


def test_strict_validation_of_valid_document(tmp_path):
    dtd = load_schema_definition(write_dtd(tmp_path))
    assert validate(person_document(), strict=True, schema=dtd) == []


def test_strict_validation_reports_schema_problems(tmp_path):
    dtd = load_schema_definition(write_dtd(tmp_path))
    text = (
        '<database xmlns="http://gramps-project.org/xml/1.7.2/">'
        '<header><created date="2024-01-01"/></header>'
        '<people><person handle="_P1"><name/><gender>M</gender></person></people>'
        "</database>"
    )

    violations = validate_text(text, strict=True, schema=dtd)

    assert violations
    assert all(v.code is ViolationCode.SCHEMA for v in violations)


def test_dtd_violations_on_unreadable_text(tmp_path):
    dtd = load_schema_definition(write_dtd(tmp_path))
    violations = dtd_violations("<database><people>", dtd)

    assert len(violations) == 1
    assert violations[0].field == "document"


def test_strict_without_dtd_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("GRAMPS_XML_DTD", str(tmp_path / "missing.dtd"))
    doc = person_document()

    assert validate(doc, strict=True) == validate(doc)


def test_tag_without_priority_passes_strict_validation(tmp_path):
    dtd = load_schema_definition(write_dtd(tmp_path))
    doc = person_document()
    doc.tags.append(Tag(handle="_T1", name="ToDo", color="#000000000000", change=1))

    assert validate(doc, strict=True, schema=dtd) == []
