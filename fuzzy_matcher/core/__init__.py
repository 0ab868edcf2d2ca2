"""
fuzzy_matcher.core

The matching engine:
 - edit-distance metric (levenshtein, levenshtein_with_cutoff)
 - BK-tree index keyed by that metric (BKTree, BKNode)
 - the DistanceFunction protocol for plugging in another metric
"""

from .distance import levenshtein, levenshtein_with_cutoff
from .bktree import BKNode, BKTree
from .protocols import DistanceFunction

__all__ = [
    "levenshtein",
    "levenshtein_with_cutoff",
    "BKNode",
    "BKTree",
    "DistanceFunction",
]
