import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gramps_xml.utils.pathing import mock_file_path  # noqa: E402

FIXED_TIME = 1700000000  # 2023-11-14T22:13:20Z


@pytest.fixture
def sample_path() -> Path:
    return mock_file_path("sample_family.gramps")


@pytest.fixture
def broken_path() -> Path:
    return mock_file_path("broken_family.gramps")


@pytest.fixture
def sample_text(sample_path) -> str:
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME
