from __future__ import annotations

from .vocabulary import (
    CHILD_RELATION_VALUES,
    CONFIDENCE_VALUES,
    DEFAULT_SCHEMA_VERSION,
    GENDER_VALUES,
    RESEARCHER_FIELDS,
    ROOT_TAG,
    SECTION_ORDER,
    SECTIONS,
    SECTIONS_BY_KIND,
    ChildRelation,
    Confidence,
    EntityKind,
    Gender,
    Section,
    doctype_for,
    namespace_for,
    version_from_namespace,
)

__all__ = [
    "CHILD_RELATION_VALUES",
    "CONFIDENCE_VALUES",
    "DEFAULT_SCHEMA_VERSION",
    "GENDER_VALUES",
    "RESEARCHER_FIELDS",
    "ROOT_TAG",
    "SECTION_ORDER",
    "SECTIONS",
    "SECTIONS_BY_KIND",
    "ChildRelation",
    "Confidence",
    "EntityKind",
    "Gender",
    "Section",
    "doctype_for",
    "namespace_for",
    "version_from_namespace",
]
