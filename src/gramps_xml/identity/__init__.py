from __future__ import annotations

from .handle_factory import HandleAllocator, deterministic_handle, handle_for_record

__all__ = [
    "HandleAllocator",
    "deterministic_handle",
    "handle_for_record",
]
