"""
Schema Locator

Finds and loads the Gramps DTD used by strict validation. The DTD is an
optional resource: when it cannot be found or read, callers get None and
carry on with the structural checks.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from gramps_xml.config import get_config
from gramps_xml.logging import get_logger
from gramps_xml.utils.pathing import resolve_project_path

log = get_logger("loader.schema_locator")

DTD_ENV_VAR = "GRAMPS_XML_DTD"


def resolve_schema_path(path: Union[str, Path, None] = None) -> Optional[Path]:
    """Argument first, then ``$GRAMPS_XML_DTD``, then ``schema.dtd_path``."""
    candidate = path or os.environ.get(DTD_ENV_VAR) or get_config().schema.get("dtd_path")
    if not candidate:
        log.debug("No DTD location configured.")
        return None

    return resolve_project_path(candidate)


def load_schema_definition(path: Union[str, Path, None] = None) -> Optional[etree.DTD]:
    """
    Load the Gramps DTD.

    Returns:
        An ``lxml.etree.DTD`` or None when the resource is unavailable.
    """
    resolved = resolve_schema_path(path)
    if resolved is None:
        return None

    if not resolved.is_file():
        log.warning(f"DTD not found at {resolved}; strict validation unavailable")
        return None

    try:
        dtd = etree.DTD(str(resolved))
    except (etree.DTDParseError, OSError) as exc:
        log.error(f"Could not load DTD {resolved}: {exc}")
        return None

    log.debug(f"Loaded DTD: {resolved}")
    return dtd
