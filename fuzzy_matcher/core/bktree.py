# bktree.py
# BK-tree (Burkhard-Keller metric tree) for approximate string lookup.
# Every node stores one string; its children are keyed by their exact
# distance from that string. Search prunes with the triangle inequality:
# a child keyed k can only lead to matches if |d - k| <= tolerance.
# - Stored strings are a set: exact duplicates are dropped on insert.
# - Insert and search use explicit loops/stacks (no recursion), so a
#   degenerate tree (e.g. words inserted in "distance chain" order) is only
#   slow, never a RecursionError.

from typing import Dict, Iterable, Iterator, List, Optional

from fuzzy_matcher.core.distance import levenshtein
from fuzzy_matcher.core.protocols import DistanceFunction


def _check_str(value, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


def _check_tolerance(tolerance) -> None:
    # bool is an int subclass, reject it explicitly
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise TypeError(f"tolerance must be int, got {type(tolerance).__name__}")
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")


class BKNode:
    """
    A single node in the BK-tree.
    value: stored string (never changes)
    children: distance -> child node, at most one child per distance
    """

    __slots__ = ("value", "children")

    def __init__(self, value: str) -> None:
        self.value = value
        self.children: Dict[int, "BKNode"] = {}

    def __repr__(self) -> str:
        return f"BKNode({self.value!r}, children={sorted(self.children)})"


class BKTree:
    """
    BK-tree keyed by an integer string metric (Levenshtein by default).

        tree = BKTree()
        tree.insert_many(["book", "books", "cake", "boo"])
        tree.search("bo", 1)    # -> ["boo"]
    """

    def __init__(self, distance: DistanceFunction = levenshtein) -> None:
        self.distance = distance
        self.root: Optional[BKNode] = None
        self._size = 0

    # insertion -----------------------------------------------------------------------
    def insert(self, word: str) -> None:
        """Store word unless an identical string is already present."""
        self._insert(word)

    def insert_many(self, words: Iterable[str]) -> int:
        """Insert every word, returns how many new distinct strings were stored."""
        added = 0
        for w in words:
            if self._insert(w):
                added += 1
        return added

    def _insert(self, word: str) -> bool:
        _check_str(word, "word")

        if self.root is None:
            self.root = BKNode(word)
            self._size = 1
            return True

        node = self.root
        while True:
            d = self.distance(node.value, word)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKNode(word)
                self._size += 1
                return True
            node = child

    # query ---------------------------------------------------------------------------
    def search(self, query: str, tolerance: int) -> List[str]:
        """
        Return every stored string within `tolerance` edit operations of `query`.

        Order is pre-order traversal: a node's own match comes before anything
        in its subtree, children are visited in the order they were created.
        Results are not sorted by distance.
        """
        _check_str(query, "query")
        _check_tolerance(tolerance)

        results: List[str] = []
        if self.root is None:
            return results

        stack = [self.root]
        while stack:
            node = stack.pop()
            d = self.distance(node.value, query)
            if d <= tolerance:
                results.append(node.value)

            # distances are never negative, clamp the lower bound at zero
            low = max(0, d - tolerance)
            high = d + tolerance
            matches = [child for k, child in node.children.items() if low <= k <= high]
            # reversed so the first-created child is popped first
            stack.extend(reversed(matches))

        return results

    # utilities -----------------------------------------------------------------------
    def __contains__(self, word) -> bool:
        """Exact membership. Only the chain of children keyed by the current distance is walked."""
        if not isinstance(word, str):
            return False
        node = self.root
        while node is not None:
            d = self.distance(node.value, word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Yield stored strings in pre-order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node.value
            stack.extend(reversed(list(node.children.values())))

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            if level > deepest:
                deepest = level
            for child in node.children.values():
                stack.append((child, level + 1))
        return deepest
