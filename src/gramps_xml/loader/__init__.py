# src/gramps_xml/loader/__init__.py

"""
External collaborators: file access and the schema resource.

    from gramps_xml.loader import read_bytes, write_bytes, load_schema_definition
"""

from __future__ import annotations

from .file_loader import read_bytes, resolve_input_path
from .file_writer import write_bytes
from .schema_locator import load_schema_definition, resolve_schema_path

__all__ = [
    "load_schema_definition",
    "read_bytes",
    "resolve_input_path",
    "resolve_schema_path",
    "write_bytes",
]
