# tests/conftest.py - keep log/config files out of the repo while testing
import pytest

from fuzzy_matcher.utils import logger_utils


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logger_utils, "_default", None)
    return tmp_path


@pytest.fixture
def word_file(tmp_path):
    def _write(content: bytes, name="words.txt"):
        p = tmp_path / name
        p.write_bytes(content)
        return p
    return _write
