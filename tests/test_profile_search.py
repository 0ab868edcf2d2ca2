# tests/test_profile_search.py - profiling harness smoke checks
import importlib.util
from pathlib import Path

import pytest

TOOL = Path(__file__).resolve().parent.parent / "tools" / "profile_search.py"


@pytest.fixture
def profile_search():
    spec = importlib.util.spec_from_file_location("profile_search", TOOL)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_small_synthetic_run(profile_search, capsys):
    assert profile_search.main(["--synthetic", "60", "--iters", "5", "--tolerance", "1"]) == 0
    out = capsys.readouterr().out
    assert "Result mismatches vs linear scan: 0" in out


def test_empty_word_list(profile_search, word_file, capsys):
    p = word_file(b"\n\n")
    assert profile_search.main(["--words", str(p)]) == 1
    assert "No words to index" in capsys.readouterr().out


def test_zero_iterations_rejected(profile_search):
    with pytest.raises(SystemExit):
        profile_search.main(["--synthetic", "10", "--iters", "0"])
