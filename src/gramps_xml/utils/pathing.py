"""
Locations inside a source checkout.

Config, logs, the optional DTD and test fixtures are all addressed relative
to the checkout root (the directory holding ``src/``, ``config/`` and
``mock_files/``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

# src/gramps_xml/utils/pathing.py -> parents[3] is the checkout root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

CONFIG_DIR = PROJECT_ROOT / "config"
MOCK_FILES_DIR = PROJECT_ROOT / "mock_files"


def project_root() -> Path:
    return PROJECT_ROOT


def resolve_project_path(path: PathLike) -> Path:
    """
    Anchor a relative path at the checkout root; absolute paths pass through.

        resolve_project_path("config/grampsxml.dtd")
        resolve_project_path("/usr/share/gramps/grampsxml.dtd")
    """
    path = Path(path)
    return path if path.is_absolute() else PROJECT_ROOT / path


def config_file(name: str) -> Path:
    return CONFIG_DIR / name


def mock_file_path(filename: PathLike) -> Path:
    """Fixture under ``mock_files/``, e.g. ``mock_file_path("sample_family.gramps")``."""
    return MOCK_FILES_DIR / filename
