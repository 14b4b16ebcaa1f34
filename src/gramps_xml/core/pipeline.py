from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

from gramps_xml.config import get_config
from gramps_xml.core.exceptions import SchemaStructureViolation
from gramps_xml.loader.file_loader import read_bytes
from gramps_xml.loader.file_writer import write_bytes
from gramps_xml.logging import get_logger
from gramps_xml.model.entities import Document
from gramps_xml.model.violations import Violation
from gramps_xml.reader.parser import parse
from gramps_xml.validation.validator import strict_violations, validate
from gramps_xml.writer.serializer import serialize

log = get_logger("core.pipeline")


def import_file(
    path: Union[str, Path],
    *,
    strict: bool = False,
    require_valid: bool = False,
) -> Tuple[Document, List[Violation]]:
    """
    Read, parse and validate a Gramps file.

    Violations are returned, not raised, unless ``require_valid`` is set.

    Raises:
        NotFoundError / IoFailure: from the file loader.
        ParseError: the file is not well-formed Gramps XML.
        SchemaStructureViolation: ``require_valid`` and violations were found.
    """
    log.info(f"Importing Gramps file: {path}")
    data = read_bytes(path)

    document = parse(data)
    violations = validate(document)
    if strict:
        violations.extend(strict_violations(data))

    if violations:
        log.warning(f"{path}: {len(violations)} violation(s)")
        for violation in violations:
            log.debug(str(violation))
        if require_valid:
            raise SchemaStructureViolation(violations)

    return document, violations


def export_file(
    path: Union[str, Path],
    doc: Document,
    *,
    compress: Optional[bool] = None,
) -> Path:
    """
    Serialize ``doc`` and write it atomically to ``path``.

    ``compress`` defaults to ``export.compress`` from the config.

    Raises:
        IoFailure: the write failed; no partial file is left behind.
    """
    if compress is None:
        compress = bool(get_config().export.get("compress", False))

    text = serialize(doc)
    target = write_bytes(path, text.encode("utf-8"), compress=compress)

    log.info(f"Exported Gramps file: {target}")
    return target
