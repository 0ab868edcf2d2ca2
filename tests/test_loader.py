# tests/test_loader.py
import pytest

from fuzzy_matcher.core.bktree import BKTree
from fuzzy_matcher.loader import iter_words, load_tree, load_tree_with_summary
from fuzzy_matcher.utils import logger_utils


def test_iter_words_strips_line_terminators(word_file):
    p = word_file(b"alpha\r\nbeta\n  spaced \ngamma")
    assert list(iter_words(str(p))) == ["alpha", "beta", "  spaced ", "gamma"]


def test_bad_lines_are_skipped_and_logged(word_file):
    p = word_file(b"alpha\n\xff\xfe\nbeta\n")
    tree, summary = load_tree_with_summary(str(p))
    assert set(tree) == {"alpha", "beta"}
    assert summary["lines"] == 3
    assert summary["skipped"] == 1
    assert summary["inserted"] == 2

    log_text = open(logger_utils.get_logger().path, encoding="utf-8").read()
    assert ":2: invalid utf-8" in log_text
    assert "loaded" in log_text


def test_blank_lines(word_file):
    p = word_file(b"one\n\ntwo\n")
    assert "" in load_tree(str(p))
    assert "" not in load_tree(str(p), skip_blank=True)


def test_load_extends_existing_tree(word_file):
    t = BKTree()
    t.insert("book")
    p = word_file(b"book\nbooks\ncake\nboo\n")
    out = load_tree(str(p), tree=t)
    assert out is t
    assert len(t) == 4
    assert "boo" in t.search("bo", 1)


def test_missing_file_leaves_tree_untouched(tmp_path):
    t = BKTree()
    t.insert("keep")
    with pytest.raises(OSError):
        load_tree(str(tmp_path / "missing.txt"), tree=t)
    assert list(t) == ["keep"]


def test_other_encoding(word_file):
    p = word_file("café\nnaïve\n".encode("latin-1"))
    assert list(iter_words(str(p), encoding="latin-1")) == ["café", "naïve"]
