from pathlib import Path

import pytest

import mntent.parser as parser_mod


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_debug_flag():
    """Keep MNTENT_DEBUG from the outer environment out of the tests."""
    saved = parser_mod._DEBUG
    parser_mod._DEBUG = False
    yield
    parser_mod._DEBUG = saved


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def write_fstab(tmp_path):
    """Write raw text to a temp fstab and return its path."""
    def write(text: str, name: str = "fstab") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return write
