"""
File Loader

Reads Gramps archives from disk. Gramps writes ``.gramps`` files gzipped;
plain ``.xml`` exports are not. Both are accepted and told apart by the gzip
magic number, never by the file extension.
"""

from __future__ import annotations

import gzip
import os
import zlib
from pathlib import Path
from typing import Union

from gramps_xml.core.exceptions import IoFailure, NotFoundError
from gramps_xml.logging import get_logger

log = get_logger("loader.file_loader")

GZIP_MAGIC = b"\x1f\x8b"


def resolve_input_path(path: Union[str, Path]) -> Path:
    """
    Convert a user-provided path into an absolute validated file path.
    """
    abs_path = Path(os.path.abspath(path))
    log.debug(f"Resolving input file: {abs_path}")

    if not abs_path.exists():
        log.error(f"Input file does not exist: {abs_path}")
        raise NotFoundError(f"Input file not found: {abs_path}")

    if not abs_path.is_file():
        log.error(f"Input path is not a file: {abs_path}")
        raise IoFailure(f"Input path is not a file: {abs_path}")

    return abs_path


def read_bytes(path: Union[str, Path]) -> bytes:
    """
    Return the XML bytes stored at ``path``, gunzipped when needed.

    Raises:
        NotFoundError: nothing exists at ``path``.
        IoFailure: the file cannot be read or its gzip stream is corrupt.
    """
    file_path = resolve_input_path(path)

    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise IoFailure(f"Failed to read {file_path}: {exc}") from exc

    if data[:2] == GZIP_MAGIC:
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as exc:
            raise IoFailure(f"Corrupt gzip stream in {file_path}: {exc}") from exc
        log.debug(f"Decompressed gzip archive: {file_path}")

    log.info(f"Loaded file: {file_path} ({len(data)} bytes)")
    return data
