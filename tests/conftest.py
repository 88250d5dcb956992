import pytest

from pronounce_core.fallback import FALLBACK_LINES


@pytest.fixture
def dict_file(tmp_path):
    """The built-in excerpt written out as a cmudict.dict-style file."""
    path = tmp_path / "cmudict.dict"
    path.write_text("\n".join(FALLBACK_LINES) + "\n", encoding="utf-8")
    return path
