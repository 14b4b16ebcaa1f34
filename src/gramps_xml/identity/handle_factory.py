# src/gramps_xml/identity/handle_factory.py
from __future__ import annotations

import hashlib
from typing import Iterable, Optional, Set


# -----------------------------
# Core deterministic hashing
# -----------------------------

def _stable_hash(key: str) -> str:
    # Deterministic stable hashing; SHA1 is fine for identity (not security).
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def deterministic_handle(*parts: object) -> str:
    """
    Gramps-style handle (``_`` + 25 hex chars) derived from ``parts``.
    Same parts, same handle.
    """
    key = "|".join("" if p is None else str(p) for p in parts)
    return "_" + _stable_hash(key)[:25]


def handle_for_record(kind: str, identifier: Optional[str], position: int) -> str:
    """
    Handle for a record written without one.

    Position within its section keeps two anonymous records of the same kind
    apart.
    """
    return deterministic_handle("REC", kind, identifier or "", position)


class HandleAllocator:
    """
    Hands out synthesized handles that never collide with handles already
    declared in the document, nor with each other.
    """

    def __init__(self, taken: Iterable[str] = ()):
        self._taken: Set[str] = {h for h in taken if h}

    def allocate(self, kind: str, identifier: Optional[str], position: int) -> str:
        handle = handle_for_record(kind, identifier, position)
        attempt = 0
        while handle in self._taken:
            attempt += 1
            handle = deterministic_handle("REC", kind, identifier or "", position, attempt)
        self._taken.add(handle)
        return handle


__all__ = [
    "HandleAllocator",
    "deterministic_handle",
    "handle_for_record",
]
