"""
Writer package.

Re-exports the serializer entry points used by the pipeline.
"""

from __future__ import annotations

from .serializer import Serializer, serialize

__all__ = ["Serializer", "serialize"]
