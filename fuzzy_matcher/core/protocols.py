# fuzzy_matcher/core/protocols.py
"""
Protocol interfaces and shared typed structures for fuzzy_matcher.

The BK-tree only needs "something callable that returns an integer distance",
so it depends on DistanceFunction rather than on levenshtein directly.
Any metric works as long as it is non-negative, symmetric, zero only for equal
strings and satisfies the triangle inequality; search pruning relies on it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from typing_extensions import TypedDict


@runtime_checkable
class DistanceFunction(Protocol):
    """Integer metric over strings: d(a, b) -> int >= 0."""

    def __call__(self, a: str, b: str) -> int:
        ...


class ConfigData(TypedDict, total=False):
    """
    Shape of the JSON config file.

    Example:
      {"tolerance": 2, "max_results": 25, "encoding": "utf-8"}
    """
    tolerance: int
    max_results: int
    encoding: str
    skip_blank: bool
    log_path: str
    console_log: bool


class LoadSummary(TypedDict):
    """What load_tree reports after reading a word list."""
    path: str
    lines: int
    inserted: int
    skipped: int
    seconds: float
