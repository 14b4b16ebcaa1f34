"""
File Writer

All-or-nothing writes: bytes go to a temporary file next to the target and
are moved into place with ``os.replace`` only once fully written. A failed
write leaves any previous file untouched and no partial file behind.
"""

from __future__ import annotations

import gzip
import os
import tempfile
from pathlib import Path
from typing import Union

from gramps_xml.core.exceptions import IoFailure
from gramps_xml.logging import get_logger

log = get_logger("loader.file_writer")


def write_bytes(path: Union[str, Path], data: bytes, *, compress: bool = False) -> Path:
    """
    Atomically write ``data`` to ``path`` (gzipped when ``compress``).

    Raises:
        IoFailure: the directory cannot be created or the write fails.
    """
    target = Path(path)
    payload = gzip.compress(data) if compress else data

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IoFailure(f"Cannot create directory {target.parent}: {exc}") from exc

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise IoFailure(f"Failed to write {target}: {exc}") from exc

    log.info(f"Wrote {target} ({len(payload)} bytes, compressed={compress})")
    return target
