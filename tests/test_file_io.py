import gzip

import pytest

from gramps_xml.core.exceptions import IoFailure, NotFoundError
from gramps_xml.loader import file_writer
from gramps_xml.loader import read_bytes, resolve_input_path, write_bytes


def test_read_plain_file(sample_path):
    data = read_bytes(sample_path)
    assert data.startswith(b"<?xml")


def test_read_gzip_file_regardless_of_extension(tmp_path, sample_path):
    original = sample_path.read_bytes()
    packed = tmp_path / "family.xml"
    packed.write_bytes(gzip.compress(original))

    assert read_bytes(packed) == original


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(NotFoundError) as excinfo:
        read_bytes(tmp_path / "absent.gramps")

    assert isinstance(excinfo.value, FileNotFoundError)


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(IoFailure):
        resolve_input_path(tmp_path)


def test_corrupt_gzip_raises_io_failure(tmp_path):
    bad = tmp_path / "bad.gramps"
    bad.write_bytes(b"\x1f\x8b" + b"definitely not deflate")

    with pytest.raises(IoFailure):
        read_bytes(bad)


def test_write_plain_and_compressed(tmp_path):
    plain = write_bytes(tmp_path / "out" / "a.xml", b"<database/>")
    packed = write_bytes(tmp_path / "out" / "a.gramps", b"<database/>", compress=True)

    assert plain.read_bytes() == b"<database/>"
    assert packed.read_bytes()[:2] == b"\x1f\x8b"
    assert gzip.decompress(packed.read_bytes()) == b"<database/>"


def test_failed_write_leaves_previous_file(tmp_path, monkeypatch):
    target = tmp_path / "keep.gramps"
    target.write_bytes(b"old")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(file_writer.os, "replace", boom)

    with pytest.raises(IoFailure):
        write_bytes(target, b"new")

    assert target.read_bytes() == b"old"
    assert [p.name for p in tmp_path.iterdir()] == ["keep.gramps"]
