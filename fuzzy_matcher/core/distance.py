# distance.py
# Levenshtein edit distance used as the metric of the BK-tree.
# - levenshtein(): exact distance, two-row DP over the shorter string.
# - levenshtein_with_cutoff(): same DP with an early exit once the distance
#   is known to exceed max_dist. Good for linear scans, NOT for tree keys
#   (child keys must be exact distances).

from typing import Optional


def levenshtein(a: str, b: str) -> int:
    """
    Classic Levenshtein edit distance (insert/delete/substitute all cost 1).
    Time O(len(a) * len(b)), extra memory O(min(len(a), len(b))).
    """
    return levenshtein_with_cutoff(a, b)


def levenshtein_with_cutoff(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Compute Levenshtein distance with optional early exit when distance
    exceeds max_dist.
    Returns the exact distance when it is <= max_dist (or max_dist is None),
    otherwise max_dist + 1.
    """
    if max_dist is not None and max_dist < 0:
        raise ValueError(f"max_dist must be >= 0, got {max_dist}")

    if a == b:
        return 0

    # ensure b is the shorter string so the rows stay small
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)

    # length difference is a lower bound on the distance
    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1
    if lb == 0:
        return la

    prev = list(range(lb + 1))

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr = [i]
        row_min = i

        for j in range(1, lb + 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr.append(val)
            if val < row_min:
                row_min = val

        # every later row is >= this row's minimum
        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev = curr

    d = prev[-1]
    if max_dist is not None and d > max_dist:
        return max_dist + 1
    return d
