from __future__ import annotations

from typing import List, Union

from lxml import etree

from gramps_xml.logging import get_logger
from gramps_xml.model.violations import Violation, ViolationCode

log = get_logger("validation.dtd")


def _schema_violation(field: str, reason: str) -> Violation:
    return Violation(
        code=ViolationCode.SCHEMA,
        kind=None,
        handle=None,
        identifier=None,
        field=field,
        reason=reason,
    )


def dtd_violations(xml_text: Union[str, bytes], dtd: etree.DTD) -> List[Violation]:
    """
    Check raw XML against a loaded DTD.

    The document is re-read with lxml without network access or entity
    resolution; the DOCTYPE it declares is ignored in favour of ``dtd``.
    """
    data = xml_text.encode("utf-8") if isinstance(xml_text, str) else xml_text
    parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False)

    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        return [_schema_violation("document", f"lxml could not read the document: {exc}")]

    if dtd.validate(root):
        return []

    violations = [
        _schema_violation(f"line {entry.line}", entry.message.strip())
        for entry in dtd.error_log
    ]
    log.info("DTD validation reported %d problem(s)", len(violations))
    return violations
