import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_lineage.parser_core import parse_gedcom  # noqa: E402
from gedcom_lineage.utils import mock_file_path  # noqa: E402


@pytest.fixture(scope="session")
def family_data():
    """Parsed mock_files/family.ged (two-wife patriarch, one private grandchild)."""
    return parse_gedcom(mock_file_path("family.ged").read_text(encoding="utf-8"))
