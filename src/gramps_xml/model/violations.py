from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ViolationCode(str, Enum):
    DUPLICATE_HANDLE = "duplicate-handle"
    UNRESOLVED_REFERENCE = "unresolved-reference"
    WRONG_KIND_REFERENCE = "wrong-kind-reference"
    OUT_OF_ENUM = "out-of-enum"
    MISSING_FIELD = "missing-field"
    INVALID_VALUE = "invalid-value"
    SCHEMA = "schema"


@dataclass(frozen=True, slots=True)
class Occurrence:
    kind: str
    identifier: Optional[str]
    position: int  # index within its section


@dataclass(frozen=True, slots=True)
class Violation:
    """
    One structural or referential defect.

    ``handle``/``identifier`` locate the offending record, ``field`` names the
    attribute or element, ``reason`` is meant for people.
    """
    code: ViolationCode
    kind: Optional[str]
    handle: Optional[str]
    identifier: Optional[str]
    field: str
    reason: str
    occurrences: Tuple[Occurrence, ...] = ()

    def __str__(self) -> str:
        where = self.kind or "document"
        ident = self.identifier or self.handle or "?"
        return f"[{self.code.value}] {where} {ident} {self.field}: {self.reason}"
