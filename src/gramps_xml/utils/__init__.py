# src/gramps_xml/utils/__init__.py

from .pathing import (
    config_file,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "config_file",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
]
