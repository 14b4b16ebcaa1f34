"""
Validation package.

    from gramps_xml.validation import validate

    for violation in validate(document):
        print(violation)
"""

from __future__ import annotations

from gramps_xml.model.violations import Occurrence, Violation, ViolationCode

from .dtd import dtd_violations
from .reference_index import (
    Reference,
    ReferenceIndex,
    build_reference_index,
    iter_references,
)
from .validator import Validator, strict_violations, validate, validate_text

__all__ = [
    "Occurrence",
    "Reference",
    "ReferenceIndex",
    "Validator",
    "Violation",
    "ViolationCode",
    "build_reference_index",
    "dtd_violations",
    "iter_references",
    "strict_violations",
    "validate",
    "validate_text",
]
