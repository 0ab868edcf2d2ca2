"""
fuzzy_matcher

Approximate string matching over a growing word list, backed by a BK-tree
keyed by Levenshtein distance.
"""

from .core import BKTree, levenshtein

__all__ = ["BKTree", "levenshtein"]

__version__ = "0.1.0"
