import pytest

from gramps_xml import export_file, import_file
from gramps_xml.core.exceptions import NotFoundError, ParseError, SchemaStructureViolation
from gramps_xml.utils.pathing import mock_file_path


def test_import_sample(sample_path):
    doc, violations = import_file(sample_path)

    assert violations == []
    assert len(doc.people) == 3


def test_import_reports_violations(broken_path):
    doc, violations = import_file(broken_path)

    assert len(doc.people) == 2
    assert len(violations) == 8


def test_require_valid_raises(broken_path):
    with pytest.raises(SchemaStructureViolation) as excinfo:
        import_file(broken_path, require_valid=True)

    assert len(excinfo.value.violations) == 8
    assert "8 schema violation(s)" in str(excinfo.value)


def test_import_missing_file(tmp_path):
    with pytest.raises(NotFoundError):
        import_file(tmp_path / "ghost.gramps")


def test_import_malformed_file():
    with pytest.raises(ParseError):
        import_file(mock_file_path("not_xml.gramps"))


def test_export_then_import(tmp_path, sample_path):
    doc, _ = import_file(sample_path)

    target = export_file(tmp_path / "copy.gramps", doc, compress=True)
    assert target.read_bytes()[:2] == b"\x1f\x8b"

    again, violations = import_file(target)
    assert violations == []
    assert again == doc


def test_export_uses_configured_compression(tmp_path, sample_path):
    doc, _ = import_file(sample_path)

    target = export_file(tmp_path / "copy.xml", doc)
    assert target.read_bytes().startswith(b"<?xml")
