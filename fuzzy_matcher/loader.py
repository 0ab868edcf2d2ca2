# loader.py
# Reads word lists (one entry per line) into a BKTree.
# I/O problems stay here: a line that fails to decode is logged and skipped,
# it never reaches the tree. A file that cannot be opened raises OSError
# before anything is inserted.

from __future__ import annotations

import time
from typing import Iterator, Optional

from fuzzy_matcher.core.bktree import BKTree
from fuzzy_matcher.core.protocols import LoadSummary
from fuzzy_matcher.utils.logger_utils import get_logger


def _strip_eol(raw: bytes) -> bytes:
    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n") or raw.endswith(b"\r"):
        return raw[:-1]
    return raw


class _LineReader:
    """Iterates decoded lines of a file and counts what it had to skip."""

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding
        self.lines = 0
        self.skipped = 0

    def __iter__(self) -> Iterator[str]:
        log = get_logger()
        with open(self.path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                self.lines = lineno
                try:
                    yield _strip_eol(raw).decode(self.encoding)
                except UnicodeDecodeError as e:
                    self.skipped += 1
                    log.warning(f"{self.path}:{lineno}: invalid {self.encoding} ({e.reason}), line skipped")


def iter_words(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield each line of `path` with its line terminator removed.
    Other whitespace is kept as-is, so "  cat " and "cat" are different words.
    """
    return iter(_LineReader(path, encoding))


def load_tree(
    path: str,
    tree: Optional[BKTree] = None,
    encoding: str = "utf-8",
    skip_blank: bool = False,
) -> BKTree:
    """Build a BKTree from a word list (or extend `tree`), logging a short summary."""
    tree, _summary = load_tree_with_summary(path, tree, encoding, skip_blank)
    return tree


def load_tree_with_summary(
    path: str,
    tree: Optional[BKTree] = None,
    encoding: str = "utf-8",
    skip_blank: bool = False,
):
    """Same as load_tree but also returns a LoadSummary."""
    if tree is None:
        tree = BKTree()

    reader = _LineReader(path, encoding)
    words = iter(reader)
    if skip_blank:
        words = (w for w in words if w)

    t0 = time.perf_counter()
    inserted = tree.insert_many(words)
    seconds = time.perf_counter() - t0

    summary: LoadSummary = {
        "path": path,
        "lines": reader.lines,
        "inserted": inserted,
        "skipped": reader.skipped,
        "seconds": round(seconds, 4),
    }
    log = get_logger()
    log.info(
        f"loaded {path}: {reader.lines} lines, {inserted} new words, "
        f"{reader.skipped} skipped, tree size {len(tree)}"
    )
    log.metric(f"load {path}", summary["seconds"], "s")
    return tree, summary
