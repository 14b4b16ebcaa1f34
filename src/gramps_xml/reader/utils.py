from __future__ import annotations

from typing import Iterator, List, Optional

from gramps_xml.model.violations import Violation, ViolationCode


def local_name(tag) -> str:
    """``{http://gramps-project.org/xml/1.7.2/}person`` -> ``person``."""
    if not isinstance(tag, str):
        # Comments and processing instructions carry callables as tags.
        return ""
    return tag.rsplit("}", 1)[-1]


def namespace_of(tag: str) -> Optional[str]:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def _iter_children(elem) -> Iterator:
    return iter(elem) if elem is not None else iter(())


def _child_elements(elem, name: str) -> List:
    return [c for c in _iter_children(elem) if local_name(c.tag) == name]


def _first_child(elem, name: str):
    for c in _iter_children(elem):
        if local_name(c.tag) == name:
            return c
    return None


def _child_text(elem, name: str, default: str = "") -> str:
    """Text of the first ``name`` child; ``default`` when the child is absent."""
    child = _first_child(elem, name)
    if child is None:
        return default
    return child.text or ""


def _optional_child_text(elem, name: str) -> Optional[str]:
    child = _first_child(elem, name)
    if child is None:
        return None
    return child.text or ""


def _child_attr(elem, name: str, attr: str) -> Optional[str]:
    child = _first_child(elem, name)
    if child is None:
        return None
    return child.get(attr)


def _hlinks(elem, name: str) -> List[str]:
    """``hlink`` of every ``name`` child, in order; a missing one reads as ``""``."""
    return [c.get("hlink") or "" for c in _child_elements(elem, name)]


def _child_hlink(elem, name: str) -> Optional[str]:
    """None when there is no ``name`` child, ``""`` when it has no hlink."""
    child = _first_child(elem, name)
    if child is None:
        return None
    return child.get("hlink") or ""


def _priv_attr(elem) -> Optional[bool]:
    value = elem.get("priv")
    if value is None:
        return None
    return value.strip() == "1"


class IssueCollector:
    """
    Gathers values the parser could not type while it keeps going.

    One collector per parse call; nothing is shared between calls.
    """

    def __init__(self) -> None:
        self.issues: List[Violation] = []

    def int_attr(self, elem, attr: str, *, kind: str) -> Optional[int]:
        raw = elem.get(attr)
        if raw is None or raw.strip() == "":
            return None
        try:
            return int(raw.strip())
        except ValueError:
            self.issues.append(
                Violation(
                    code=ViolationCode.INVALID_VALUE,
                    kind=kind,
                    handle=elem.get("handle"),
                    identifier=elem.get("id"),
                    field=attr,
                    reason=f"{attr}={raw!r} is not an integer; left unset",
                )
            )
            return None
