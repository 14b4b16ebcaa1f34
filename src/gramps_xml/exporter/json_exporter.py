"""
JSON view of a Document, for inspection and diffing.

Sections and records keep document order. Nothing is synthesized: a field
the file left unset is written as null.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

from gramps_xml.loader.file_writer import write_bytes
from gramps_xml.logging import get_logger
from gramps_xml.model.entities import Document
from gramps_xml.schema.vocabulary import SECTIONS

log = get_logger("exporter.json_exporter")


def _jsonable(value: Any) -> Any:
    """
    Plain-JSON copy of ``value``.

    Records become objects keyed by field name and enum members become
    their wire value. Anything unknown is stringified.
    """
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Mapping):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    return str(value)


def build_document_dict(doc: Document) -> Dict[str, Any]:
    """
    Convert a Document into a JSON-safe dict.
    """
    data: Dict[str, Any] = {
        "schema_version": doc.schema_version,
        "counts": doc.counts(),
        "header": _jsonable(doc.header),
    }
    for section in SECTIONS:
        data[section.name] = [_jsonable(e) for e in getattr(doc, section.attribute)]
    if doc.parse_issues:
        data["parse_issues"] = [_jsonable(v) for v in doc.parse_issues]
    return data


def serialize_document_to_json_string(doc: Document, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(build_document_dict(doc), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(build_document_dict(doc), indent=indent, ensure_ascii=False)


def export_document_json(doc: Document, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)

    log.info(
        "Exporting document JSON to: %s (%s)",
        output_path,
        ", ".join(f"{name}={count}" for name, count in doc.counts().items()),
    )

    json_str = serialize_document_to_json_string(doc, indent=indent)
    target = write_bytes(output_path, json_str.encode("utf-8"))

    log.info("JSON export complete. size=%d bytes", target.stat().st_size)
    return target
