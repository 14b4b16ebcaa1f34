"""
validator.py
Structural and referential checks over a Document.

Checks run in a fixed order and every one of them runs; violations pile up
so a caller sees all problems at once:

  1. handle uniqueness across the whole document
  2. every reference resolves to a declared handle of the expected kind
  3. gender / confidence / child relationship values are in their enums
  4. required fields are present and numeric fields are non-negative

Strict mode adds a DTD check on top, when a DTD can be loaded.
"""

from __future__ import annotations

from typing import List, Optional, Union

from lxml import etree

from gramps_xml.loader.schema_locator import load_schema_definition
from gramps_xml.logging import get_logger
from gramps_xml.model.entities import Document
from gramps_xml.model.violations import Violation, ViolationCode
from gramps_xml.reader.parser import parse
from gramps_xml.schema.vocabulary import (
    CHILD_RELATION_VALUES,
    CONFIDENCE_VALUES,
    GENDER_VALUES,
    EntityKind,
)
from gramps_xml.validation.dtd import dtd_violations
from gramps_xml.validation.reference_index import (
    ReferenceIndex,
    build_reference_index,
    iter_document_references,
)
from gramps_xml.writer.serializer import serialize

log = get_logger("validation.validator")


def _violation(code: ViolationCode, kind: EntityKind, entity, field: str, reason: str) -> Violation:
    return Violation(
        code=code,
        kind=kind.value,
        handle=entity.handle,
        identifier=getattr(entity, "id", None),
        field=field,
        reason=reason,
    )


class Validator:
    """Runs the four structural checks against one Document."""

    def __init__(self, doc: Document, index: Optional[ReferenceIndex] = None):
        self.doc = doc
        self.index = index if index is not None else build_reference_index(doc)

    # ------------------------------------------------------------------
    # 1. Uniqueness
    # ------------------------------------------------------------------
    def check_unique_handles(self) -> List[Violation]:
        violations = []
        for handle, occurrences in self.index.duplicates().items():
            described = ", ".join(
                f"{o.kind} {o.identifier or '#' + str(o.position)}" for o in occurrences
            )
            first = occurrences[0]
            violations.append(
                Violation(
                    code=ViolationCode.DUPLICATE_HANDLE,
                    kind=first.kind,
                    handle=handle,
                    identifier=first.identifier,
                    field="handle",
                    reason=f"handle {handle!r} is declared {len(occurrences)} times: {described}",
                    occurrences=tuple(occurrences),
                )
            )
        return violations

    # ------------------------------------------------------------------
    # 2. Referential integrity
    # ------------------------------------------------------------------
    def check_references(self) -> List[Violation]:
        violations = []
        for kind, entity, ref in iter_document_references(self.doc):
            target = self.index.kind_of(ref.handle)
            if target is None:
                violations.append(
                    _violation(
                        ViolationCode.UNRESOLVED_REFERENCE,
                        kind,
                        entity,
                        ref.field,
                        f"{ref.expected.value} handle {ref.handle!r} is not declared in the document",
                    )
                )
            elif target is not ref.expected:
                violations.append(
                    _violation(
                        ViolationCode.WRONG_KIND_REFERENCE,
                        kind,
                        entity,
                        ref.field,
                        f"handle {ref.handle!r} is a {target.value}, expected a {ref.expected.value}",
                    )
                )
        return violations

    # ------------------------------------------------------------------
    # 3. Enumerations
    # ------------------------------------------------------------------
    def check_enumerations(self) -> List[Violation]:
        violations = []

        for person in self.doc.people:
            if person.gender and person.gender not in GENDER_VALUES:
                violations.append(
                    _violation(
                        ViolationCode.OUT_OF_ENUM,
                        EntityKind.PERSON,
                        person,
                        "gender",
                        f"{person.gender!r} is not one of {sorted(GENDER_VALUES)}",
                    )
                )

        for citation in self.doc.citations:
            if citation.confidence is not None and citation.confidence not in CONFIDENCE_VALUES:
                violations.append(
                    _violation(
                        ViolationCode.OUT_OF_ENUM,
                        EntityKind.CITATION,
                        citation,
                        "confidence",
                        f"{citation.confidence!r} is not one of {sorted(CONFIDENCE_VALUES)}",
                    )
                )

        for family in self.doc.families:
            for i, child in enumerate(family.children):
                for attr in ("mrel", "frel"):
                    value = getattr(child, attr)
                    if value is not None and value not in CHILD_RELATION_VALUES:
                        violations.append(
                            _violation(
                                ViolationCode.OUT_OF_ENUM,
                                EntityKind.FAMILY,
                                family,
                                f"childref[{i}].{attr}",
                                f"{value!r} is not a known child relationship",
                            )
                        )

        return violations

    # ------------------------------------------------------------------
    # 4. Required fields
    # ------------------------------------------------------------------
    def check_required_fields(self) -> List[Violation]:
        violations = []

        for kind, entity in self.doc.iter_entities():
            if not entity.handle:
                violations.append(
                    _violation(ViolationCode.MISSING_FIELD, kind, entity, "handle", "record has no handle")
                )
            if entity.change is not None and entity.change < 0:
                violations.append(
                    _violation(
                        ViolationCode.INVALID_VALUE,
                        kind,
                        entity,
                        "change",
                        f"timestamp {entity.change} is negative",
                    )
                )

        for person in self.doc.people:
            if not person.gender:
                violations.append(
                    _violation(
                        ViolationCode.MISSING_FIELD,
                        EntityKind.PERSON,
                        person,
                        "gender",
                        "person has no gender (use 'U' for unknown)",
                    )
                )

        for kind, entity, ref in iter_document_references(self.doc, include_empty=True):
            if not ref.handle:
                violations.append(
                    _violation(
                        ViolationCode.MISSING_FIELD,
                        kind,
                        entity,
                        ref.field,
                        f"{ref.field} reference has an empty hlink",
                    )
                )

        for tag in self.doc.tags:
            if not tag.name:
                violations.append(
                    _violation(ViolationCode.MISSING_FIELD, EntityKind.TAG, tag, "name", "tag has no name")
                )
            if tag.priority is not None and tag.priority < 0:
                violations.append(
                    _violation(
                        ViolationCode.INVALID_VALUE,
                        EntityKind.TAG,
                        tag,
                        "priority",
                        f"priority {tag.priority} is negative",
                    )
                )

        violations.extend(self.doc.parse_issues)
        return violations

    def run(self) -> List[Violation]:
        violations: List[Violation] = []
        violations.extend(self.check_unique_handles())
        violations.extend(self.check_references())
        violations.extend(self.check_enumerations())
        violations.extend(self.check_required_fields())
        return violations


def strict_violations(xml_text: Union[str, bytes], schema: Optional[etree.DTD] = None) -> List[Violation]:
    """DTD check of raw text; empty when no DTD can be loaded."""
    dtd = schema if schema is not None else load_schema_definition()
    if dtd is None:
        log.warning("Strict validation requested but no DTD is available; structural checks only")
        return []
    return dtd_violations(xml_text, dtd)


def validate(doc: Document, *, strict: bool = False, schema: Optional[etree.DTD] = None) -> List[Violation]:
    """
    Validate a Document. An empty list means the document is valid.

    Never raises for odd data; everything found is returned.
    """
    violations = Validator(doc).run()

    if strict:
        violations.extend(strict_violations(serialize(doc), schema))

    log.info("Validation finished with %d violation(s)", len(violations))
    return violations


def validate_text(
    xml_text: Union[str, bytes],
    *,
    strict: bool = False,
    schema: Optional[etree.DTD] = None,
) -> List[Violation]:
    """
    Parse raw text, then validate it. In strict mode the raw text itself,
    not a re-serialization, goes through the DTD.

    Raises:
        ParseError: the text is not well-formed.
    """
    doc = parse(xml_text)
    violations = Validator(doc).run()
    if strict:
        violations.extend(strict_violations(xml_text, schema))

    log.info("Validation finished with %d violation(s)", len(violations))
    return violations
