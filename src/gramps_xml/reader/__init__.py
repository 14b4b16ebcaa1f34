"""
Public interface for the Gramps XML reader.

    from gramps_xml.reader import parse

    document = parse(xml_text)
"""

from __future__ import annotations

from .parser import build_document, parse

__all__ = [
    "build_document",
    "parse",
]
