import re

from gramps_xml.identity import HandleAllocator, deterministic_handle, handle_for_record

HANDLE_RE = re.compile(r"^_[0-9a-f]{25}$")


def test_handles_are_deterministic():
    assert deterministic_handle("a", 1) == deterministic_handle("a", 1)
    assert deterministic_handle("a", 1) != deterministic_handle("a", 2)
    assert HANDLE_RE.match(deterministic_handle("anything"))


def test_record_handles_depend_on_position():
    assert handle_for_record("person", "I1", 0) == handle_for_record("person", "I1", 0)
    assert handle_for_record("person", None, 0) != handle_for_record("person", None, 1)
    assert handle_for_record("person", "I1", 0) != handle_for_record("note", "I1", 0)


def test_allocator_avoids_taken_handles():
    taken = handle_for_record("person", "I1", 0)
    allocator = HandleAllocator([taken, None, ""])

    handle = allocator.allocate("person", "I1", 0)

    assert handle != taken
    assert HANDLE_RE.match(handle)


def test_allocator_never_repeats():
    allocator = HandleAllocator()
    first = allocator.allocate("person", None, 0)
    second = allocator.allocate("person", None, 0)

    assert first != second
